"""Expression tree built by the parser and read by the compiler.

Nodes are immutable named tuples.  Binary operators always hold
exactly two operands; chains fold to the left, so ``a or b or c`` is
``Or(Or(a, b), c)``.
"""
from collections import namedtuple


Or = namedtuple('Or', ['left', 'right'])

And = namedtuple('And', ['left', 'right'])

Exclude = namedtuple('Exclude', ['inner'])

Thesaurus = namedtuple('Thesaurus', ['term'])

Exact = namedtuple('Exact', ['text'])

Group = namedtuple('Group', ['inner'])

Proximity = namedtuple('Proximity', ['terms'])

Phrase = namedtuple('Phrase', ['text'])

Leaf = namedtuple('Leaf', ['text'])


class Empty(tuple):
    """The tree of an empty search expression."""

    __slots__ = ()

    def __new__(cls):
        return tuple.__new__(cls)

    def __repr__(self):
        return 'Empty()'
