"""
Recursive descent parser for Google style search expressions.

Grammar, loosest binding first:

    Or        -> And (("or" | "|") And)*
    And       -> Primary (["and" | "&"] Operand)*
    Operand   -> Primary | Exclude
    Exclude   -> "-" Primary
    Primary   -> Leaf | Thesaurus | Exact | Group | Phrase | Proximity
    Thesaurus -> "~" Leaf
    Exact     -> "+" (Leaf | Phrase)
    Group     -> "(" Or ")"
    Proximity -> "<" Leaf+ ">"

Two primaries with nothing between them are joined by an implicit
AND.  Every repetition folds into left nested binary nodes.
"""
from . import lexer
from .exc import InvalidArgument, SyntacticError
from .nodes import (
    And,
    Empty,
    Exact,
    Exclude,
    Group,
    Leaf,
    Or,
    Phrase,
    Proximity,
    Thesaurus,
    )


DEFAULT_MAX_DEPTH = 100

OR_OPERATORS = frozenset([lexer.OR, '|'])
AND_OPERATORS = frozenset([lexer.AND, '&'])
PHRASES = frozenset([lexer.SINGLE_QUOTED, lexer.DOUBLE_QUOTED])

# token kinds that may begin an operand of an implicit AND
OPERAND_STARTS = frozenset([lexer.TERM, '~', '+', '(', '<', '-']) | PHRASES


class _Cursor(object):
    """Position in the token list of a single parse."""

    def __init__(self, text, tokens):
        self.text = text
        self.tokens = tokens
        self.pos = 0
        self.depth = 0

    def peek(self):
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def peek_kind(self):
        token = self.peek()
        return token.kind if token is not None else None

    def next(self):
        token = self.peek()
        if token is None:
            raise self.error("Unexpected end of search expression")
        self.pos += 1
        return token

    def expect(self, kind, msg):
        if self.peek_kind() != kind:
            raise self.error(msg)
        return self.next()

    def error(self, msg):
        token = self.peek()
        if token is None:
            return SyntacticError(msg, text=self.text, column=len(self.text))
        return SyntacticError("%s, found %r" % (msg, token.text),
                              text=self.text, column=token.column)


class Parser(object):
    """Builds expression trees from search text.

    A parser keeps no state between calls and may be shared.

    :param max_depth: The deepest parenthesized nesting accepted before
    the text is rejected.
    """

    def __init__(self, max_depth=DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth

    def parse(self, text):
        """Return the expression tree of *text*.

        Raises LexicalError or SyntacticError when *text* is not a
        well formed search expression.
        """
        if text is None:
            raise InvalidArgument("Search text is required")
        tokens = lexer.tokenize(text)
        if not tokens:
            return Empty()
        cursor = _Cursor(text, tokens)
        tree = self._or(cursor)
        if cursor.peek() is not None:
            raise cursor.error("Unexpected trailing input")
        return tree

    def _or(self, cursor):
        left = self._and(cursor)
        while cursor.peek_kind() in OR_OPERATORS:
            cursor.next()
            left = Or(left, self._and(cursor))
        return left

    def _and(self, cursor):
        left = self._primary(cursor)
        while True:
            kind = cursor.peek_kind()
            if kind in AND_OPERATORS:
                cursor.next()
            elif kind not in OPERAND_STARTS:
                return left
            left = And(left, self._operand(cursor))

    def _operand(self, cursor):
        if cursor.peek_kind() == '-':
            cursor.next()
            return Exclude(self._primary(cursor))
        return self._primary(cursor)

    def _primary(self, cursor):
        kind = cursor.peek_kind()
        if kind == lexer.TERM:
            return Leaf(cursor.next().text)
        if kind in PHRASES:
            return Phrase(cursor.next().text)
        if kind == '~':
            cursor.next()
            return Thesaurus(
                cursor.expect(lexer.TERM, "Expected a term after '~'").text)
        if kind == '+':
            cursor.next()
            if cursor.peek_kind() == lexer.TERM or cursor.peek_kind() in PHRASES:
                return Exact(cursor.next().text)
            raise cursor.error("Expected a term or phrase after '+'")
        if kind == '(':
            return self._group(cursor)
        if kind == '<':
            return self._proximity(cursor)
        raise cursor.error("Expected a term, phrase or group")

    def _group(self, cursor):
        if cursor.depth >= self.max_depth:
            raise cursor.error(
                "Groups nested deeper than %s levels" % self.max_depth)
        cursor.next()
        cursor.depth += 1
        inner = self._or(cursor)
        cursor.expect(')', "Expected ')'")
        cursor.depth -= 1
        return Group(inner)

    def _proximity(self, cursor):
        cursor.next()
        terms = []
        while cursor.peek_kind() == lexer.TERM:
            terms.append(cursor.next().text)
        if not terms:
            raise cursor.error("Expected at least one term after '<'")
        cursor.expect('>', "Expected '>'")
        return Proximity(tuple(terms))


default_parser = Parser()


def parse(text):
    """Return the expression tree of *text* using the default parser."""
    return default_parser.parse(text)
