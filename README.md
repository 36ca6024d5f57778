# clexer

A small lexer for C source. It reads a file, splits it into tokens
(keywords, identifiers, literals and punctuation) and prints the name of
each token's type on one line.

## Installation

```
pip install .
```

## Command line

```
clexer simpletest.c
```

For a file that holds `int main() { return 0; }` this prints:

```
INT IDENT LPAREN RPAREN LBRACE RETURN INTLIT SEMI RBRACE
```

Each name is followed by a space, and the output ends with a blank line.
Line comments (`//`) and whitespace are skipped. The file is read as
Latin-1 text.

The command exits with status 1 and a message on standard error when:

- it is not given exactly one file argument (`usage: clexer <file>`),
- the file cannot be opened (`Could not open file`),
- the lexer meets a character it does not know, or a string or character
  literal that is never closed; the message gives the line number.

## Library

```python
from clexer.tokens import tokenize, dump, line_number, TokenType, LexError

tokens = tokenize("int x = 5;")
print([t.type for t in tokens])
# [TokenType.INT, TokenType.IDENT, TokenType.EQUALS, TokenType.INTLIT, TokenType.SEMI]

print(tokens[1].start)   # 4, the offset of the token in the text
print(dump(tokens), end="")
# INT IDENT EQUALS INTLIT SEMI

try:
    tokenize("a $ b")
except LexError as err:
    print(err)           # Unrecognized token $ (line 1).
    print(err.line)      # 1
```

- `tokenize(text)` returns a list of `Token` objects. A `Token` is a frozen
  dataclass with a `type` (a `TokenType` member) and a `start` offset.
- `dump(tokens)` returns the type names as a string; it does not print.
- `line_number(text, pos)` gives the 1-based line for an offset, counting
  newlines up to and including `pos`. It raises `IndexError` when `pos` is
  outside the text.
- `LexError` carries the offending line number in its `line` attribute.

Some behaviour worth knowing:

- For two-character operators such as `==`, `->` or `&&`, `start` is the
  offset of the second character.
- For string and character literals, `start` is the offset just after the
  opening quote. Escapes are not interpreted: the literal ends at the next
  matching quote.
- A word is given the type of the first keyword it is a prefix of, so `i`
  is read as `IF` and `con` as `CONST`; other words are `IDENT`.
- A number is a run of digits and dots; it is `FLOATLIT` if it holds a dot,
  otherwise `INTLIT`.

`clexer.dynarray.DynArray` is a growable array with an explicit capacity.
It starts at the capacity it is given and, when full, grows to one and a
half times its length (at least one more). It supports `push`, `pop`
(which leaves the capacity unchanged), indexing with non-negative indices,
`len()`, iteration and a read-only `capacity` property.

## What it does not do

The package only lexes. It does not parse, preprocess or compile C, does
not handle block comments (`/* */`), and does not keep the text of tokens,
only their types and offsets.

## Tests

```
pip install .[test]
pytest
```