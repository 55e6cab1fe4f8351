# numlex

`numlex` recognises C numeric literals with two finite-state machines and
counts the kinds of literals that appear in a text. It also carries a small
catalogue of paintings that can be stored as text or binary records, and a
few text helpers.

## Recognising literals

Each recogniser takes a word and returns the `numlex.states.State` that the
machine stops in. Letters are matched without regard to case, and reading
stops at a NUL character.

**Integer literals** (`numlex.integer_fsm.classify_integer`):

- decimal numbers with an optional `+` or `-` sign: `42`, `+7`, `-13`
- zero, with or without a sign: `0`, `+0`, `-0`
- octal numbers starting with `0`: `0755`
- hexadecimal numbers starting with `0x`: `0x1F`
- the suffixes `u`, `l`, `ll` and their combinations: `10ul`, `0x1fLLU`
  (negative numbers take only `l` and `ll`)

An empty word leaves the machine in `State.STATE_START`.

**Floating-point literals** (`numlex.float_fsm.classify_float`):

- forms such as `1.`, `.5`, `3.14`, `-2.5`
- exponents such as `1e10`, `2.5e-3`
- the suffixes `f` and `l`: `3.14f`, `1e5L`

A word that breaks the rules ends in `State.STATE_ERROR` or
`State.F_STATE_ERROR`. A word that stops part-way, such as `0x` or `1e`, ends
in the intermediate state it reached; the counter does not count it.

The character tests `is_decimal_digit`, `is_octal_digit`, `is_hex_digit`
(in `numlex.integer_fsm`) and `is_digit` (in `numlex.float_fsm`) are public
too.

## Counting literals

```python
from numlex.counter import classify, count_literals

print(classify("0x1Fu"))          # State.STATE_HEX_U
counts = count_literals("12 0x1F, 3.5f -7 hello 017")
print(counts.report())
```

`classify` tries the integer machine first and falls back to the
floating-point machine when it ends in error. `split_words` yields the words
of a text, split on whitespace and commas. `count_literals` returns a
`LiteralCounts` dataclass with these fields:

| field            | report line                     |
|------------------|---------------------------------|
| `decimal`        | Decimal constants               |
| `floating_point` | Floating-point constants        |
| `whole`          | Whole constants (all systems)   |
| `unsigned`       | Unsigned numbers                |
| `octal`          | Octal numbers                   |
| `hexadecimal`    | Hexadecimal numbers             |
| `float_typed`    | Float numbers                   |

Note how the tallies overlap: `decimal` counts every integer literal,
octal and hexadecimal included; octal and hexadecimal literals also count as
unsigned; `whole` counts every literal recognised, floating-point ones
included; `float_typed` counts floating-point literals with an `f` suffix.
`LiteralCounts.add(state)` counts one classified word, and `report()` returns
the counters as text.

A word of 30 characters or more raises `WordTooLongError`. When it comes from
`count_literals`, its `counts` attribute holds what was counted before that
word.

### Command line

```
numlex-count [path]
```

Reads the file (default `test_FSM.txt`) and prints the counters. If a word is
too long, it prints `Word exceeds maximum length!` and then the counters as
they stood. A file that cannot be opened gives an error message and exit
status 1.

## Pictures

`numlex.pictures.Picture` holds a code, painter name, picture name and price.

- `average_price_above(pictures, price)`: mean price of the pictures dearer
  than `price`, or `0.0` when there is none.
- `append_by_initial(pictures, letter, path)`: appends `code;title;price leva`
  lines for the pictures whose painter's name starts with `letter`, and
  returns how many were written.
- `write_binary(pictures, path)` / `read_binary(path)`: little-endian binary
  records (code, length-prefixed painter name, length-prefixed title, 32-bit
  float price). Names are limited to 29 bytes of UTF-8; a longer name, a bad
  length or a truncated record raises `ValueError`.
- `pictures_by_painter(path, painter)`: the pictures in a binary file by one
  painter.
- `read_pictures(lines)`: parses pictures from four lines each (code,
  painter, title, price); names are cut to 29 characters.

### Command line

```
numlex-pictures
```

Prompts for a count, asking again until it gets a number greater than 3 and
less than 30, then reads that many pictures from standard input in the
four-line form. It exits with status 1 if input runs out or is malformed.

## What this package does not do

The `numlex-pictures` command only reads and checks the pictures it is given:
it does not print, store or query them. Saving, filtering and averaging are
available only through the functions above.

## Small text helpers

`numlex.exercises` has `copy_stream(source, target)` (returns the amount
copied), `count_characters`, `count_lines` (newlines), `count_blanks`
(spaces and tabs), `squeeze_blanks` (collapses runs of spaces to one),
`hello_world`, `escape_sequences_demo` and `quotient_and_remainder(m, n)`,
which divides truncating toward zero and raises `ZeroDivisionError` when `n`
is 0.

## Running the tests

```
pip install -e ".[test]"
pytest
```