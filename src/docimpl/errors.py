from __future__ import annotations


class DocimplError(Exception):
    """Base class for docimpl errors raised outside the hand-off core."""


class UnknownTraitError(DocimplError, KeyError):
    def __init__(self, trait: str) -> None:
        super().__init__(trait)
        self.trait = trait

    def __str__(self) -> str:
        return f"Unknown trait page: {self.trait}"


class UnknownUnitError(DocimplError, KeyError):
    def __init__(self, trait: str, unit: str) -> None:
        super().__init__(unit)
        self.trait = trait
        self.unit = unit

    def __str__(self) -> str:
        return f"Unknown library unit '{self.unit}' for {self.trait}"


class FragmentParseError(DocimplError, ValueError):
    pass
