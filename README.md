# jsrt

Building blocks for a small ECMAScript interpreter, in pure Python with no
dependencies.

## What is inside

- `jsrt.utf` – UTF-8 rune decoding and encoding, where NUL is written as the
  two-byte sequence `C0 80`, plus case mapping and letter tests driven by
  Unicode tables: `decode_rune`, `encode_rune`, `rune_len`, `is_alpha_rune`,
  `is_lower_rune`, `is_upper_rune`, `to_lower_rune`, `to_upper_rune`,
  `to_lower_full`, `to_upper_full`.
- `jsrt.unicase` and `jsrt.unialpha` – the case-mapping and letter tables
  that `jsrt.utf` looks runes up in.
- `jsrt.regparse` – parses JavaScript-flavoured regular expressions
  (character classes, `\d \s \w` and their negations, groups, non-capturing
  groups, lookahead, back-references, greedy and lazy quantifiers including
  `{m,n}`) and compiles them with `compile_pattern` into a `Program`: a list
  of `Instruction`s, the `CharClass`es they refer to, the `RegexFlag`s and the
  number of capture slots. Bad patterns raise `RegexError`. `canon` is the
  case folding used under `RegexFlag.ICASE`.
- `jsrt.values` – JavaScript value semantics on plain Python values
  (`UNDEFINED` for undefined, `None` for null, `bool`, `int`/`float`, `str`,
  anything else an object): `to_boolean`, `to_number`, `to_string`,
  `to_integer`, `to_primitive` (with a `Hint`), `number_to_string`,
  `string_to_number`, `string_to_float`, `parse_int_prefix`, `format_int`,
  the integer conversions (`number_to_integer`, `number_to_int32`,
  `number_to_uint32`, `number_to_int16`, `number_to_uint16`), and the
  operators `concat`, `compare`, `loose_equal` and `strict_equal`. Objects are
  turned into primitives through their `valueOf` and `toString` members;
  in strict mode a failed conversion raises `JSTypeError`.

## Install

```
pip install .
```

## Examples

```python
from jsrt.utf import decode_rune, encode_rune, to_upper_full

encode_rune(0)                      # b'\xc0\x80'
decode_rune(b"\xe2\x82\xac")        # (8364, 3)
to_upper_full(0xDF)                 # (83, 83), i.e. "SS"
```

```python
from jsrt.regparse import RegexFlag, compile_pattern

program = compile_pattern(r"(\w+)@(\w+)", RegexFlag.ICASE)
program.nsub                        # 3: the whole match and two groups
[inst.opcode for inst in program.instructions][:4]
# ['split', 'anynl', 'jump', 'lpar']
```

```python
from jsrt.values import number_to_string, string_to_number, loose_equal

number_to_string(0.1)       # '0.1'
string_to_number(" 0x1F ")  # 31.0
loose_equal("1", 1)         # True
```

## What it does not do

- It compiles regular expressions but does not run them: there is no matcher
  that executes a `Program` against text.
- It has no lexer, parser, bytecode or interpreter for JavaScript source, and
  no command to run scripts.

## Tests

```
pip install .[test]
pytest
```