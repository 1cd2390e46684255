from __future__ import annotations

import html
import re

from ..core.entries import ImplementorEntry
from ..errors import FragmentParseError


# impl <a class='trait' href='..' title='..'>Trait</a> for <a class='struct' href='..' title='..'>Type</a>
_LINK = (
    r"<a class=['\"](?P<{p}kind>[\w-]+)['\"] href=['\"](?P<{p}href>[^'\"]*)['\"]"
    r"(?: title=['\"](?P<{p}path>[^'\"]*)['\"])?>(?P<{p}name>[^<]*)</a>"
)
_FRAGMENT_RE = re.compile(
    r"^\s*impl\s+" + _LINK.format(p="t_") + r"\s+for\s+" + _LINK.format(p="i_") + r"\s*$"
)


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def _link(kind: str, href: str, path: str | None, name: str) -> str:
    title = f" title='{_attr(path)}'" if path else ""
    return f"<a class='{kind}' href='{_attr(href)}'{title}>{html.escape(name, quote=False)}</a>"


def render_fragment(entry: ImplementorEntry) -> str:
    """Render `entry` the way the documentation generator writes implementor lines."""

    return "impl {} for {}".format(
        _link("trait", entry.trait_href, entry.trait_path, entry.trait),
        _link(entry.kind, entry.implementor_href, entry.implementor_path, entry.implementor),
    )


def parse_fragment(fragment: str) -> ImplementorEntry:
    """Parse a generator implementor line back into an ImplementorEntry.

    Only the plain `impl Trait for Type` shape is understood; generic impls
    raise FragmentParseError.
    """

    m = _FRAGMENT_RE.match(fragment)
    if m is None:
        raise FragmentParseError(f"Unrecognized implementor fragment: {fragment!r}")
    if m.group("t_kind") != "trait":
        raise FragmentParseError(f"Expected a trait link first, got class '{m.group('t_kind')}'")

    def _opt(name: str) -> str | None:
        value = m.group(name)
        return html.unescape(value) if value else None

    return ImplementorEntry(
        trait=html.unescape(m.group("t_name")),
        trait_href=html.unescape(m.group("t_href")),
        trait_path=_opt("t_path"),
        implementor=html.unescape(m.group("i_name")),
        implementor_href=html.unescape(m.group("i_href")),
        implementor_path=_opt("i_path"),
        kind=m.group("i_kind"),
    )
