"""Core types: keyword categories, language editions and the lookup error."""

from __future__ import annotations

import enum


class KeywordError(ValueError):
    """Raised when a string does not name a known keyword."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class Category(enum.Enum):
    """How strongly a word is reserved by the language."""

    STRICT = "strict"
    RESERVED = "reserved"
    WEAK = "weak"


class Edition(enum.Enum):
    """A language edition; the value is its year."""

    RUST_2015 = 2015
    RUST_2018 = 2018
    RUST_2021 = 2021
    RUST_2024 = 2024