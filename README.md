# rustkws

A small library for recognising Rust keywords and finding out how each one is
classified (strict, reserved or weak) in a given Rust edition.

It has no dependencies beyond the Python standard library and supports
Python 3.10 and later.

## Installation

```
pip install rustkws
```

## Modules

- `rustkws.model`: the `Category` enum (`STRICT`, `RESERVED`, `WEAK`), the
  `Edition` enum (`RUST_2015`, `RUST_2018`, `RUST_2021`, `RUST_2024`, valued by
  year) and `KeywordError`, a `ValueError` raised for unknown keywords.
- `rustkws.table`: `KeywordData`, a frozen record holding a keyword's text
  (`value`), its usual category (`default`) and any per-edition exceptions
  (`overrides`). `KeywordData.category(edition)` gives the category in one
  edition.
- `rustkws.keywords`: the `Keyword` enum, listing every keyword of any edition.
- `rustkws.editions`: helpers that look keywords up within one edition.

## Usage

`Keyword` lists every keyword across all editions. Look one up by its text:

```python
from rustkws.keywords import Keyword
from rustkws.model import KeywordError

Keyword.from_value("enum")        # Keyword.ENUM
Keyword.ENUM.text()               # "enum"
Keyword.SELF_TYPE.text()          # "Self"

try:
    Keyword.from_value("not a keyword")
except KeywordError as error:
    print(error)                  # Not a keyword: not a keyword
```

A keyword's category depends on the edition. `None` means the word is not a
keyword in that edition:

```python
from rustkws.keywords import Keyword
from rustkws.model import Edition

Keyword.ASYNC.category(Edition.RUST_2015)   # None
Keyword.ASYNC.category(Edition.RUST_2018)   # Category.STRICT
Keyword.DYN.category(Edition.RUST_2015)     # Category.WEAK
Keyword.GEN.category(Edition.RUST_2024)     # Category.RESERVED
```

Most of the time you care about one edition only. The functions in
`rustkws.editions` keep that short:

```python
from rustkws import editions
from rustkws.keywords import Keyword
from rustkws.model import Category, Edition

edition = Edition.RUST_2021
editions.keyword(edition, "match")          # Keyword.MATCH
editions.keyword(edition, "gen")            # None: a keyword only from 2024
editions.keyword(edition, "banana")         # None: not a keyword at all
editions.category(edition, Keyword.TRY)     # Category.RESERVED

weak = [kw.text() for kw in editions.keywords(edition)
        if kw.category(edition) is Category.WEAK]
# ['macro_rules', 'raw', 'safe', "'static", 'union']
```

`editions.keyword` returns `None` rather than raising when the text is not a
keyword. `editions.keywords` returns an iterator over the keywords of an
edition in the order `Keyword` declares them, and `Keyword.data()` gives the
underlying `KeywordData` record.

## What it does not do

This is a lookup library only. It does not tokenise or parse source code and
has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```