import pytest

from rustkws.model import Category, Edition
from rustkws.table import DATA, KeywordData

_STRICT_2015 = {
    "as", "break", "const", "continue", "crate", "else", "enum", "extern",
    "false", "fn", "for", "if", "impl", "in", "let", "loop", "match", "mod",
    "move", "mut", "pub", "ref", "return", "self", "Self", "static",
    "struct", "super", "trait", "true", "type", "unsafe", "use", "where",
    "while",
}
_STRICT_LATER = _STRICT_2015 | {"async", "await", "dyn"}
_RESERVED_2015 = {
    "abstract", "become", "box", "do", "final", "macro", "override", "priv",
    "typeof", "unsized", "virtual", "yield",
}
_RESERVED_LATER = _RESERVED_2015 | {"try"}
_WEAK_LATER = {"macro_rules", "raw", "safe", "'static", "union"}

EXPECTED = {
    Edition.RUST_2015: {
        Category.STRICT: _STRICT_2015,
        Category.RESERVED: _RESERVED_2015,
        Category.WEAK: _WEAK_LATER | {"dyn"},
    },
    Edition.RUST_2018: {
        Category.STRICT: _STRICT_LATER,
        Category.RESERVED: _RESERVED_LATER,
        Category.WEAK: _WEAK_LATER,
    },
    Edition.RUST_2021: {
        Category.STRICT: _STRICT_LATER,
        Category.RESERVED: _RESERVED_LATER,
        Category.WEAK: _WEAK_LATER,
    },
    Edition.RUST_2024: {
        Category.STRICT: _STRICT_LATER,
        Category.RESERVED: _RESERVED_LATER | {"gen"},
        Category.WEAK: _WEAK_LATER,
    },
}


def test_values_unique():
    values = [data.value for data in DATA.values()]
    assert len(values) == len(set(values))


@pytest.mark.parametrize("edition", list(Edition))
@pytest.mark.parametrize("category", list(Category))
def test_categories_by_edition(edition, category):
    found = {d.value for d in DATA.values() if d.category(edition) is category}
    assert found == EXPECTED[edition][category]


def test_every_keyword_known_in_latest_edition():
    categories = {d.category(Edition.RUST_2024) for d in DATA.values()}
    assert categories == set(Category)
    assert len(DATA) == 57
    assert len(DATA) == sum(len(s) for s in EXPECTED[Edition.RUST_2024].values())


def test_edition_dependent_keywords():
    assert DATA["ASYNC"].category(Edition.RUST_2015) is None
    assert DATA["ASYNC"].category(Edition.RUST_2018) is Category.STRICT
    assert DATA["GEN"].category(Edition.RUST_2021) is None
    assert DATA["GEN"].category(Edition.RUST_2024) is Category.RESERVED
    assert DATA["DYN"].category(Edition.RUST_2015) is Category.WEAK


def test_default_applies_without_override():
    data = KeywordData("word", Category.WEAK)
    assert [data.category(e) for e in Edition] == [Category.WEAK] * len(Edition)


def test_override_takes_precedence():
    data = KeywordData("word", None, {Edition.RUST_2018: Category.STRICT})
    assert data.category(Edition.RUST_2018) is Category.STRICT
    assert data.category(Edition.RUST_2021) is None


def test_overrides_are_read_only():
    data = KeywordData("word", None, {Edition.RUST_2018: Category.STRICT})
    with pytest.raises(TypeError):
        data.overrides[Edition.RUST_2015] = Category.WEAK
    assert dict(data.overrides) == {Edition.RUST_2018: Category.STRICT}
    assert data.category(Edition.RUST_2015) is None


def test_data_equality_and_hash():
    first = KeywordData("word", Category.STRICT)
    second = KeywordData("word", Category.STRICT)
    assert first == second
    assert hash(first) == hash(second)