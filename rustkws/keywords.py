"""The set of keywords across all editions."""

from __future__ import annotations

import enum
from typing import Optional

from rustkws.model import Category, Edition, KeywordError
from rustkws.table import DATA, KeywordData


class Keyword(enum.Enum):
    """Every keyword of any edition; each member's value is its spelling."""

    ABSTRACT = "abstract"
    AS = "as"
    ASYNC = "async"
    AWAIT = "await"
    BECOME = "become"
    BOX = "box"
    BREAK = "break"
    CONST = "const"
    CONTINUE = "continue"
    CRATE = "crate"
    DO = "do"
    DYN = "dyn"
    ELSE = "else"
    ENUM = "enum"
    EXTERN = "extern"
    FALSE = "false"
    FINAL = "final"
    FN = "fn"
    FOR = "for"
    GEN = "gen"
    IF = "if"
    IMPL = "impl"
    IN = "in"
    LET = "let"
    LOOP = "loop"
    MACRO = "macro"
    MACRO_RULES = "macro_rules"
    MATCH = "match"
    MOD = "mod"
    MOVE = "move"
    MUT = "mut"
    OVERRIDE = "override"
    PRIV = "priv"
    PUB = "pub"
    RAW = "raw"
    REF = "ref"
    RETURN = "return"
    SAFE = "safe"
    SELF_VALUE = "self"
    SELF_TYPE = "Self"
    STATIC = "static"
    STATIC_LIFETIME = "'static"
    STRUCT = "struct"
    SUPER = "super"
    TRAIT = "trait"
    TRUE = "true"
    TRY = "try"
    TYPE = "type"
    TYPEOF = "typeof"
    UNION = "union"
    UNSAFE = "unsafe"
    UNSIZED = "unsized"
    USE = "use"
    VIRTUAL = "virtual"
    WHERE = "where"
    WHILE = "while"
    YIELD = "yield"

    @classmethod
    def from_value(cls, value: str) -> "Keyword":
        """Return the keyword spelled ``value``; raise KeywordError if none is."""
        for member in cls:
            if member.data().value == value:
                return member
        raise KeywordError(f"Not a keyword: {value}")

    def data(self) -> KeywordData:
        """Return the keyword's spelling and per-edition categories."""
        return DATA[self.name]

    def text(self) -> str:
        """Return the keyword as written in source code."""
        return self.data().value

    def category(self, edition: Edition) -> Optional[Category]:
        """Return the category in ``edition``, or None if it is not a keyword there."""
        return self.data().category(edition)