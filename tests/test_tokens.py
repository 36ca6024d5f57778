import pytest

from clexer.tokens import LexError, Token, TokenType, dump, line_number, tokenize

T = TokenType


def types(text):
    return [tok.type for tok in tokenize(text)]


def test_simple_program():
    assert types("int main() { return 0; }") == [
        T.INT, T.IDENT, T.LPAREN, T.RPAREN, T.LBRACE,
        T.RETURN, T.INTLIT, T.SEMI, T.RBRACE,
    ]


def test_starts_of_words():
    text = "int main"
    assert [tok.start for tok in tokenize(text)] == [0, text.index("main")]


def test_two_character_operators():
    assert types("++ -- -> == >= >> <= << != && ||") == [
        T.INCREM, T.DECREM, T.ARROW, T.EQEQ, T.GE, T.RSHIFT,
        T.LE, T.LSHIFT, T.NEQ, T.AND, T.OR,
    ]


def test_single_character_operators():
    assert types("+ - * / = < > ! & | ^ ~ ? . # : ,") == [
        T.PLUS, T.MINUS, T.ASTERISK, T.SLASH, T.EQUALS, T.LT, T.GT,
        T.NOT, T.AMPER, T.BITOR, T.NOR, T.TILDE, T.QUESTION,
        T.PERIOD, T.HASH, T.COLON, T.COMMA,
    ]


def test_comment_is_skipped():
    text = "// note\nint"
    assert tokenize(text) == [Token(T.INT, text.index("int"))]


def test_comment_at_end_without_newline():
    assert types("int // trailing") == [T.INT]


def test_number_literals():
    assert types("42 3.14") == [T.INTLIT, T.FLOATLIT]


def test_string_and_char_literals():
    text = "\"ab\" 'c'"
    toks = tokenize(text)
    assert [t.type for t in toks] == [T.STRINGLIT, T.CHARLIT]
    assert toks[0].start == 1
    assert toks[1].start == text.index("c")


def test_word_takes_keyword_it_prefixes():
    assert types("str") == [T.STRUCT]


def test_keywords_and_identifier_with_underscore():
    assert types("while unsigned my_var") == [T.WHILE, T.UNSIGNED, T.IDENT]


def test_unrecognized_character_reports_line():
    with pytest.raises(LexError, match=r"Unrecognized token \$") as info:
        tokenize("int\n$")
    assert info.value.line == 2


def test_leading_underscore_rejected():
    with pytest.raises(LexError):
        tokenize("_x")


def test_unterminated_string_rejected():
    with pytest.raises(LexError):
        tokenize('"abc')


def test_line_number():
    assert line_number("a\nb", 0) == 1
    assert line_number("a\nb", 2) == 2


def test_line_number_out_of_bounds():
    with pytest.raises(IndexError):
        line_number("abc", 4)


def test_dump_format():
    assert dump(tokenize("int x;")) == "INT IDENT SEMI \n\n"


def test_dump_empty():
    assert dump([]) == "\n\n"


def test_starts_are_ordered_and_in_range():
    text = (
        "int main() {\n  const float PI = 3.14;\n"
        "  int *arr = malloc(sizeof(int) * 5);\n"
        "  if (arr[1] <= 5) { char less = 80; }\n"
        '  char *s = "string";\n  return 0;\n}\n'
    )
    starts = [tok.start for tok in tokenize(text)]
    assert starts == sorted(starts)
    assert all(0 <= s < len(text) for s in starts)