from __future__ import annotations

from importlib import resources as importlib_resources


def test_packaged_frontend_dist_exists() -> None:
    dist = importlib_resources.files("docimpl._frontend").joinpath("dist")

    assert dist.joinpath("index.html").is_file()
    assert dist.joinpath("assets").joinpath("implementors.js").is_file()
