# namegen

An interactive console tool that generates random personal names in three styles:

- **Chinese names**, with a single (单姓) or compound (复姓) surname. You choose
  the gender (male, female or mixed) and a given name of one character, two
  characters, or a random mix of both lengths.
- **English names**: a first name, male or female at even odds, followed by a
  last name.
- **Japanese names**: a surname followed by a given name, male or female at
  even odds.

The menus and messages are in Chinese.

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
namegen
```

or, without installing the script:

```
python -m namegen.cli
```

The main menu offers these choices:

| Option | Action |
|--------|--------|
| 1 | Chinese names with a single surname |
| 2 | Chinese names with a compound surname |
| 3 | English names |
| 4 | Japanese names |
| 5 | All styles at once (Chinese, English, Japanese) |
| 0 | Exit |

For Chinese names you choose a gender and then a name length, and then how
many names to generate, from 1 to 10. After the names are printed you can
generate again with the same settings (`1`), go back and choose a different
length (`2`), or return to the main menu (`0`). In the gender and length menus,
`0` goes back one level.

Input that is not a number, or a number out of range, is rejected with an
error message and the prompt is repeated. Closing the input stream (Ctrl-D) or
pressing Ctrl-C leaves the program.

Messages are coloured with ANSI escape sequences, and the screen is cleared
between menus with an escape sequence as well.

## Library use

The generators can also be used from your own code:

```python
from namegen.config import ChineseNameConfig, Gender, NameLength, SurnameType
from namegen.chinese import ChineseNameGenerator
from namegen.english import EnglishNameGenerator
from namegen.japanese import JapaneseNameGenerator
from namegen.rng import Random

rng = Random(42)
config = ChineseNameConfig(SurnameType.COMPOUND, Gender.FEMALE, NameLength.DOUBLE)
print(ChineseNameGenerator(config, rng).generate())
print(EnglishNameGenerator(rng).generate())
print(JapaneseNameGenerator(rng).generate())
```

- `namegen.rng.Random` is a seedable random source. Without a seed it is seeded
  from the clock; `Random.instance()` returns a shared one, which the generators
  use when they are not given their own.
- `namegen.config.ChineseNameConfig` holds `surname_type`, `gender`,
  `name_length` and `count`; all three kinds default to `MIXED` and the count
  to 1. With a mixed surname type a compound surname is chosen one time in
  five. `description()` gives a summary such as `单姓 - 男性 - 双字名`.
- Every generator has `generate()` and `style_name()`, and
  `generate_multiple(count, console)`, which prints a numbered list to a
  `namegen.console.Console` and returns how many names it generated. A count
  of zero or less prints an error and returns 0.
- `ChineseNameGenerator` also has `generate_with_config(config)` and
  `generate_multiple_with_config(config, console)`, which use the given
  configuration instead of its own.
- `namegen.console.Console(stdin, stdout)` reads from and writes to the given
  streams, or to the standard streams when none are given.

Passing a seeded `Random` makes the output reproducible.

## Development

```
pip install -e .[test]
pytest
```