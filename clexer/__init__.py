"""Lexer that turns C source text into a sequence of typed tokens."""

__version__ = "0.1.0"
__all__ = ["cli", "dynarray", "tokens"]