"""
Renders expression trees as SQL Server ``CONTAINS``/``CONTAINSTABLE``
search conditions.

    walking shoes            FORMSOF (INFLECTIONAL, walking) AND
                             FORMSOF (INFLECTIONAL, shoes)
    cake or pie              (FORMSOF (INFLECTIONAL, cake) OR
                              FORMSOF (INFLECTIONAL, pie))
    drugs -marijuana         FORMSOF (INFLECTIONAL, drugs) AND
                             NOT(FORMSOF (INFLECTIONAL, marijuana))
    ~happy                   FORMSOF (THESAURUS, happy)
    +walking                 "walking"
    <cake inspector>         (cake NEAR inspector)
    walk*                    "walk*"

In PhraseMode.PREFIX bare terms become prefix searches, ``"walking*"``.
"""
from .exc import CompilerDefect, InvalidArgument
from .modes import PhraseMode, TermMode
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


WILDCARD = '*'


def quote(text):
    return '"%s"' % text


def format_term(text, phrase_mode, wildcards=True):
    """Format a bare term the way it is searched outside of proximity
    groups.

    :param wildcards: If True, a term already ending in ``*`` is
    quoted as an explicit prefix search regardless of *phrase_mode*.
    """
    if wildcards and text.endswith(WILDCARD):
        return quote(text)
    if phrase_mode is PhraseMode.PREFIX:
        return quote(text + WILDCARD)
    return "FORMSOF (INFLECTIONAL, %s)" % text


class Compiler(object):
    """Walks an expression tree and emits search condition text.

    :param phrase_mode: The default behavior of bare terms.
    """

    def __init__(self, phrase_mode=PhraseMode.INFLECTIONAL):
        self.phrase_mode = PhraseMode.coerce(phrase_mode)
        self._handlers = {
            Or: self._or,
            And: self._and,
            Exclude: self._exclude,
            Thesaurus: self._thesaurus,
            Exact: self._exact,
            Group: self._group,
            Proximity: self._proximity,
            Phrase: self._phrase,
            Leaf: self._leaf,
            Empty: self._empty,
            }

    def compile(self, tree):
        if tree is None:
            raise InvalidArgument("An expression tree is required")
        return self.node(tree, TermMode.INFLECTIONAL)

    def node(self, node, mode):
        try:
            handler = self._handlers[type(node)]
        except KeyError:
            raise CompilerDefect(
                "Unexpected expression node %r" % (node,))
        return handler(node, mode)

    def _empty(self, node, mode):
        return ''

    def _spine(self, node):
        """Operands of a left nested chain of *node*'s type, leftmost
        first.  Walked in a loop, so long queries cost no stack."""
        kind = type(node)
        operands = []
        while type(node) is kind:
            operands.append(node.right)
            node = node.left
        operands.append(node)
        operands.reverse()
        return operands

    def _or(self, node, mode):
        operands = self._spine(node)
        text = self.node(operands[0], mode)
        for operand in operands[1:]:
            text = "(%s OR %s)" % (text, self.node(operand, mode))
        return text

    def _and(self, node, mode):
        return " AND ".join(self.node(operand, TermMode.INFLECTIONAL)
                            for operand in self._spine(node))

    def _exclude(self, node, mode):
        return "NOT(%s)" % self.node(node.inner, TermMode.INFLECTIONAL)

    def _thesaurus(self, node, mode):
        return "FORMSOF (THESAURUS, %s)" % node.term

    def _exact(self, node, mode):
        return quote(node.text)

    def _group(self, node, mode):
        return "(%s)" % self.node(node.inner, mode)

    def _phrase(self, node, mode):
        return quote(node.text)

    def _proximity(self, node, mode):
        return "(%s)" % " NEAR ".join(
            self.node(Leaf(term), TermMode.EXACT) for term in node.terms)

    def _leaf(self, node, mode):
        if mode is TermMode.EXACT:
            return node.text
        return format_term(node.text, self.phrase_mode)


def compile(tree, phrase_mode=PhraseMode.INFLECTIONAL):
    """Return the search condition text of *tree*."""
    return Compiler(phrase_mode).compile(tree)
