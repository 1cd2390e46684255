from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import time

from .errors import FragmentParseError, UnknownTraitError
from .implementors import list_traits, read_page
from .io.script import load_implementors_script, render_implementors_script


def _serve(args: argparse.Namespace) -> int:
    from .runtime.server import run

    srv = run(host=args.host, port=args.port, open_browser=not args.no_browser, log_level=args.log_level)
    print(getattr(srv, "url", None) or srv.base_url)

    # Block forever (so it behaves like a normal CLI server)
    while True:
        time.sleep(3600)


def _render(args: argparse.Namespace) -> int:
    try:
        implementors = read_page(args.trait)
    except UnknownTraitError as e:
        print(str(e), file=sys.stderr)
        return 2
    sys.stdout.write(render_implementors_script(implementors))
    return 0


def _list(args: argparse.Namespace) -> int:  # noqa: ARG001
    for trait in list_traits():
        print(trait)
    return 0


def _inspect(args: argparse.Namespace) -> int:
    try:
        implementors = load_implementors_script(args.path)
    except (FragmentParseError, OSError) as e:
        print(str(e), file=sys.stderr)
        return 2
    summary = {unit: [e.implementor_path or e.implementor for e in entries] for unit, entries in implementors.items()}
    print(json.dumps(summary, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="docimpl", description="docimpl: lazy implementor lists for static docs")
    p.add_argument("--log-level", default=None, help="logging level (default: DOCIMPL_LOG_LEVEL or warning)")
    sub = p.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="serve the API and the implementors page")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--no-browser", action="store_true")
    serve.set_defaults(func=_serve)

    render = sub.add_parser("render", help="print the data script for a trait page")
    render.add_argument("trait", help="trait page, e.g. rand/trait.Rng")
    render.set_defaults(func=_render)

    lst = sub.add_parser("list", help="list known trait pages")
    lst.set_defaults(func=_list)

    inspect = sub.add_parser("inspect", help="summarize a generated data script")
    inspect.add_argument("path")
    inspect.set_defaults(func=_inspect)

    args = p.parse_args(argv)
    logging.basicConfig(level=(args.log_level or os.getenv("DOCIMPL_LOG_LEVEL") or "WARNING").upper(), format="%(levelname)s %(name)s: %(message)s")
    return int(args.func(args))


if __name__ == "__main__":
    sys.exit(main())
