"""Per-keyword data: the spelling of each keyword and its category by edition."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from rustkws.model import Category, Edition


@dataclass(frozen=True)
class KeywordData:
    """A keyword's spelling and how it is categorised in each edition.

    ``default`` applies to every edition not listed in ``overrides``;
    ``None`` means the word is not a keyword in that edition.
    """

    value: str
    default: Optional[Category]
    overrides: Mapping[Edition, Optional[Category]] = field(
        default_factory=dict, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))

    def category(self, edition: Edition) -> Optional[Category]:
        """Return the keyword's category in ``edition``, or None if it is not one."""
        return self.overrides.get(edition, self.default)


_S = Category.STRICT
_R = Category.RESERVED
_W = Category.WEAK

DATA: Mapping[str, KeywordData] = MappingProxyType({
    "ABSTRACT": KeywordData("abstract", _R),
    "AS": KeywordData("as", _S),
    "ASYNC": KeywordData("async", _S, {Edition.RUST_2015: None}),
    "AWAIT": KeywordData("await", _S, {Edition.RUST_2015: None}),
    "BECOME": KeywordData("become", _R),
    "BOX": KeywordData("box", _R),
    "BREAK": KeywordData("break", _S),
    "CONST": KeywordData("const", _S),
    "CONTINUE": KeywordData("continue", _S),
    "CRATE": KeywordData("crate", _S),
    "DO": KeywordData("do", _R),
    "DYN": KeywordData("dyn", _S, {Edition.RUST_2015: _W}),
    "ELSE": KeywordData("else", _S),
    "ENUM": KeywordData("enum", _S),
    "EXTERN": KeywordData("extern", _S),
    "FALSE": KeywordData("false", _S),
    "FINAL": KeywordData("final", _R),
    "FN": KeywordData("fn", _S),
    "FOR": KeywordData("for", _S),
    "GEN": KeywordData("gen", None, {Edition.RUST_2024: _R}),
    "IF": KeywordData("if", _S),
    "IMPL": KeywordData("impl", _S),
    "IN": KeywordData("in", _S),
    "LET": KeywordData("let", _S),
    "LOOP": KeywordData("loop", _S),
    "MACRO": KeywordData("macro", _R),
    "MACRO_RULES": KeywordData("macro_rules", _W),
    "MATCH": KeywordData("match", _S),
    "MOD": KeywordData("mod", _S),
    "MOVE": KeywordData("move", _S),
    "MUT": KeywordData("mut", _S),
    "OVERRIDE": KeywordData("override", _R),
    "PRIV": KeywordData("priv", _R),
    "PUB": KeywordData("pub", _S),
    "RAW": KeywordData("raw", _W),
    "REF": KeywordData("ref", _S),
    "RETURN": KeywordData("return", _S),
    "SAFE": KeywordData("safe", _W),
    "SELF_VALUE": KeywordData("self", _S),
    "SELF_TYPE": KeywordData("Self", _S),
    "STATIC": KeywordData("static", _S),
    "STATIC_LIFETIME": KeywordData("'static", _W),
    "STRUCT": KeywordData("struct", _S),
    "SUPER": KeywordData("super", _S),
    "TRAIT": KeywordData("trait", _S),
    "TRUE": KeywordData("true", _S),
    "TRY": KeywordData("try", _R, {Edition.RUST_2015: None}),
    "TYPE": KeywordData("type", _S),
    "TYPEOF": KeywordData("typeof", _R),
    "UNION": KeywordData("union", _W),
    "UNSAFE": KeywordData("unsafe", _S),
    "UNSIZED": KeywordData("unsized", _R),
    "USE": KeywordData("use", _S),
    "VIRTUAL": KeywordData("virtual", _R),
    "WHERE": KeywordData("where", _S),
    "WHILE": KeywordData("while", _S),
    "YIELD": KeywordData("yield", _R),
})