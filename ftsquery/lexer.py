"""
Token grammar for Google style search expressions.

Tokens:

    Bare terms, a run of letters, digits and ``!@#$%^*_'.?``:

      walking cat* o'brien u.s.a

    The words ``or`` and ``and``, in any case, are operators and never
    terms.

    Phrases, quoted with single or double quotes.  The quotes are
    stripped and the content is kept exactly as typed:

      "cake inspector" 'rock & roll'

    Operator and grouping symbols, one character each:

      | & - ~ + ( ) < >

Whitespace between tokens is insignificant.
"""
import re
from collections import namedtuple

from pyparsing import (
    Char,
    ParseException,
    ParseFatalException,
    QuotedString,
    Regex,
    ZeroOrMore,
    )

from .exc import LexicalError


Token = namedtuple('Token', ['kind', 'text', 'column'])

TERM = 'term'
SINGLE_QUOTED = 'single_quoted'
DOUBLE_QUOTED = 'double_quoted'
OR = 'or'
AND = 'and'

SYMBOLS = '|&-~+()<>'
TERM_PUNCTUATION = "!@#$%^*_'.?"

KEYWORDS = frozenset([OR, AND])

# every Unicode space separator, not only ASCII whitespace
WHITESPACE = (' \t\r\n\f\v\x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004'
              '\u2005\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f'
              '\u205f\u3000')


def _term(s, loc, tokens):
    text = tokens[0]
    keyword = text.lower()
    if keyword in KEYWORDS:
        return [Token(keyword, text, loc)]
    return [Token(TERM, text, loc)]


def _unterminated(s, loc, tokens):
    raise ParseFatalException(s, loc, "Unterminated phrase")


double_quoted = QuotedString('"', multiline=True,
                             convert_whitespace_escapes=False)
double_quoted.set_parse_action(
    lambda s, loc, t: [Token(DOUBLE_QUOTED, t[0], loc)])

single_quoted = QuotedString("'", multiline=True,
                             convert_whitespace_escapes=False)
single_quoted.set_parse_action(
    lambda s, loc, t: [Token(SINGLE_QUOTED, t[0], loc)])

# an opening quote that no phrase above could close
unterminated = Regex(r"[\"']")
unterminated.set_parse_action(_unterminated)

term = Regex(r"[\w%s]+" % re.escape(TERM_PUNCTUATION))
term.set_parse_action(_term)

symbol = Char(SYMBOLS)
symbol.set_parse_action(lambda s, loc, t: [Token(t[0], t[0], loc)])

token = (double_quoted | single_quoted | unterminated | term | symbol)
token_stream = ZeroOrMore(token)

for element in (double_quoted, single_quoted, unterminated, term, symbol,
                token, token_stream):
    element.set_whitespace_chars(WHITESPACE)

# tabs inside phrases are content and columns must match the input
token_stream.parse_with_tabs()


def tokenize(text):
    """Split *text* into a list of Tokens.

    Raises LexicalError on an unterminated phrase or on a character
    that cannot start any token.
    """
    try:
        return list(token_stream.parse_string(text, parse_all=True))
    except ParseFatalException as e:
        raise LexicalError(e.msg, text=text, column=e.loc)
    except ParseException as e:
        column = e.loc
        while column < len(text) and text[column].isspace():
            column += 1
        raise LexicalError("Unexpected character %r" % text[column:column + 1],
                           text=text, column=column)
