import pytest

from asteva.errors import LexError
from asteva.lexer import Lexer, tokenize


def types(source):
    return [t.type for t in tokenize(source)]


def test_keywords_identifiers_and_literals():
    tokens = tokenize('variable integer count = 42;')
    assert [t.type for t in tokens] == ['variable', 'integer', 'IDENT', '=', 'INT_LIT', ';', 'EOF']
    assert tokens[2].value == 'count'
    assert tokens[4].value == 42


def test_boolean_words_become_literals():
    tokens = tokenize('true false truth')
    assert [(t.type, t.value) for t in tokens[:3]] == [
        ('BOOL_LIT', True), ('BOOL_LIT', False), ('IDENT', 'truth'),
    ]


def test_two_character_operators_use_longest_match():
    assert types('= == ! != < <= > >= && ||')[:-1] == ['=', '==', '!', '!=', '<', '<=', '>', '>=', '&&', '||']


def test_string_literal_is_verbatim():
    tokens = tokenize('print "a \\n b";')
    assert tokens[1].type == 'STRING_LIT'
    assert tokens[1].value == 'a \\n b'


def test_positions_are_tracked():
    tokens = tokenize('print 1;\n  x = 2;')
    x = tokens[3]
    assert (x.value, x.line, x.column) == ('x', 2, 3)


def test_line_comments_are_skipped():
    assert types('print 1; // trailing words\nprint 2;') == ['print', 'INT_LIT', ';', 'print', 'INT_LIT', ';', 'EOF']


def test_next_is_lazy_and_sticks_at_eof():
    lexer = Lexer('x @')
    assert lexer.next().value == 'x'
    # the bad character is only reached on the following call
    with pytest.raises(LexError):
        lexer.next()
    done = Lexer('')
    assert done.next().type == 'EOF'
    assert done.next().type == 'EOF'


def test_unexpected_character():
    with pytest.raises(LexError, match="unexpected character '@' at 1:7"):
        tokenize('print @;')


def test_single_ampersand_is_rejected():
    with pytest.raises(LexError, match="expected '&&'"):
        tokenize('true & false')
    with pytest.raises(LexError, match="expected '||'"):
        tokenize('true | false')


def test_unterminated_string():
    with pytest.raises(LexError, match='unterminated string literal'):
        tokenize('print "never closed;')


def test_integer_literal_range():
    assert tokenize('2147483647')[0].value == 2147483647
    with pytest.raises(LexError, match='out of range'):
        tokenize('2147483648')
