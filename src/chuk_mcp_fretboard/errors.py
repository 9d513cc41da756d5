"""
Error types for the fretboard system.

Only invalid input is raised. An exhausted voicing search or a voicing kind
that does not fit the chord is an ordinary result and is returned, not raised.
"""

from __future__ import annotations


class InvalidPitchClass(ValueError):
    """A note name that is not one of the 12 canonical pitch classes."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown pitch class: {name!r}")


class InvalidStringIndex(ValueError):
    """A string index outside the tuning."""

    def __init__(self, string_index: int, string_count: int) -> None:
        self.string_index = string_index
        self.string_count = string_count
        super().__init__(
            f"Invalid string index {string_index}: expected 0-{string_count - 1}"
        )


class UnknownCatalogKey(KeyError):
    """A chord quality, scale formula or interval key missing from its catalog."""

    def __init__(self, catalog: str, key: str) -> None:
        self.catalog = catalog
        self.key = key
        super().__init__(f"Unknown {catalog}: {key!r}")

    def __str__(self) -> str:
        return f"Unknown {self.catalog}: {self.key!r}"


class QuestionGenerationError(RuntimeError):
    """No quiz question could be produced from the given settings."""
