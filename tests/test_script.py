from __future__ import annotations

from pathlib import Path

from docimpl.core import build_implementor_map
from docimpl.io import load_implementors_script, parse_implementors_script, render_implementors_script

FIXTURE = Path(__file__).parent / "fixtures" / "trait.Rng.js"


def test_rendered_rng_page_matches_generated_script() -> None:
    from docimpl.implementors.rand.trait_rng import IMPLEMENTORS

    assert render_implementors_script(IMPLEMENTORS) == FIXTURE.read_text(encoding="utf-8")


def test_generated_script_parses_to_the_data_module_map() -> None:
    from docimpl.implementors.rand.trait_rng import IMPLEMENTORS

    parsed = load_implementors_script(FIXTURE)
    assert list(parsed) == list(IMPLEMENTORS)
    assert dict(parsed) == dict(IMPLEMENTORS)


def test_script_performs_publish_or_park() -> None:
    text = render_implementors_script(build_implementor_map({"bytes": []}))
    assert text.startswith("(function() {var implementors = {};\n")
    assert 'implementors["bytes"] = [];' in text
    assert "window.register_implementors(implementors);" in text
    assert "window.pending_implementors = implementors;" in text
    assert text.endswith("})()\n")


def test_empty_map_script_parses_empty() -> None:
    text = render_implementors_script(build_implementor_map({}))
    assert dict(parse_implementors_script(text)) == {}
