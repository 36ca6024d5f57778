"""Command line entry point: tokenize a file and print the token names."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from clexer.tokens import LexError, dump, tokenize


def main(argv: Sequence[str] | None = None) -> int:
    """Tokenize the file named in ``argv`` and print its tokens; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: clexer <file>", file=sys.stderr)
        return 1

    try:
        with open(args[0], encoding="latin-1") as handle:
            text = handle.read()
    except OSError:
        print("Could not open file", file=sys.stderr)
        return 1

    try:
        tokens = tokenize(text)
    except LexError as err:
        print(err, file=sys.stderr)
        return 1

    sys.stdout.write(dump(tokens))
    return 0


if __name__ == "__main__":
    sys.exit(main())