from collections import namedtuple

import pytest

from ftsquery.compiler import Compiler, compile, format_term
from ftsquery.exc import CompilerDefect, InvalidArgument
from ftsquery.modes import PhraseMode
from ftsquery.nodes import (
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
from ftsquery.parser import parse

INFLECTIONAL = PhraseMode.INFLECTIONAL
PREFIX = PhraseMode.PREFIX


def forms(word):
    return 'FORMSOF (INFLECTIONAL, %s)' % word


def test_empty():
    assert compile(Empty()) == ''
    assert compile(Empty(), PREFIX) == ''


def test_leaf():
    assert compile(Leaf('cat')) == forms('cat')
    assert compile(Leaf('cat'), PREFIX) == '"cat*"'


def test_leaf_wildcard():
    assert compile(Leaf('cat*')) == '"cat*"'
    assert compile(Leaf('cat*'), PREFIX) == '"cat*"'


def test_or():
    assert compile(Or(Leaf('a'), Leaf('b'))) == '(%s OR %s)' % (
        forms('a'), forms('b'))


def test_and():
    assert compile(And(Leaf('a'), Leaf('b')), PREFIX) == '"a*" AND "b*"'


def test_and_never_emits_and_not():
    tree = And(Leaf('drugs'), Exclude(Leaf('marijuana')))
    assert compile(tree) == '%s AND NOT(%s)' % (
        forms('drugs'), forms('marijuana'))


def test_exclude():
    assert compile(Exclude(Leaf('x')), PREFIX) == 'NOT("x*")'
    assert compile(Exclude(Group(Or(Leaf('a'), Leaf('b'))))) == (
        'NOT(((%s OR %s)))' % (forms('a'), forms('b')))


def test_thesaurus():
    assert compile(Thesaurus('happy')) == 'FORMSOF (THESAURUS, happy)'
    assert compile(Thesaurus('happy'), PREFIX) == 'FORMSOF (THESAURUS, happy)'


def test_exact():
    assert compile(Exact('walking')) == '"walking"'
    assert compile(Exact('walk*'), PREFIX) == '"walk*"'
    assert compile(Exact('cake inspector'), PREFIX) == '"cake inspector"'


def test_group():
    assert compile(Group(Leaf('a'))) == '(%s)' % forms('a')


def test_phrase():
    assert compile(Phrase("it's (1/2) off")) == '"it\'s (1/2) off"'
    assert compile(Phrase('cake inspector'), PREFIX) == '"cake inspector"'


def test_proximity_terms_are_verbatim():
    tree = Proximity(('alpha', 'beta*', 'gamma'))
    assert compile(tree) == '(alpha NEAR beta* NEAR gamma)'
    assert compile(tree, PREFIX) == '(alpha NEAR beta* NEAR gamma)'


def test_proximity_mode_does_not_leak():
    tree = And(Proximity(('a', 'b')), Leaf('c'))
    assert compile(tree) == '(a NEAR b) AND %s' % forms('c')
    tree = Or(Proximity(('a', 'b')), Leaf('c'))
    assert compile(tree) == '((a NEAR b) OR %s)' % forms('c')


def test_parsed():
    assert compile(parse('a or b and c')) == '(%s OR %s AND %s)' % (
        forms('a'), forms('b'), forms('c'))
    assert compile(parse('walking shoes or (boots -leather)')) == (
        '(%s AND %s OR (%s AND NOT(%s)))' % (
            forms('walking'), forms('shoes'), forms('boots'), forms('leather')))
    assert compile(parse('+walk ~happy "big cat" <a b>'), PREFIX) == (
        '"walk" AND FORMSOF (THESAURUS, happy) AND "big cat" AND (a NEAR b)')


def test_single_operand_root_is_unwrapped():
    assert compile(parse('cat')) == forms('cat')


def test_unknown_node():
    Bogus = namedtuple('Bogus', ['text'])
    with pytest.raises(CompilerDefect):
        compile(Bogus('a'))
    with pytest.raises(CompilerDefect):
        compile(And(Leaf('a'), Bogus('b')))


def test_none():
    with pytest.raises(InvalidArgument):
        compile(None)


def test_phrase_mode_names():
    assert Compiler('prefix').phrase_mode is PREFIX
    assert Compiler('INFLECTIONAL').phrase_mode is INFLECTIONAL
    with pytest.raises(InvalidArgument):
        Compiler('stemmed')


def test_format_term():
    assert format_term('cat*', INFLECTIONAL) == '"cat*"'
    assert format_term('cat*', PREFIX, wildcards=False) == '"cat**"'
    assert format_term('cat', INFLECTIONAL, wildcards=False) == forms('cat')


def test_long_chains():
    leaves = [Leaf('w%d' % i) for i in range(3000)]
    tree = leaves[0]
    for leaf in leaves[1:]:
        tree = And(tree, leaf)
    assert compile(tree, PREFIX) == ' AND '.join(
        '"w%d*"' % i for i in range(3000))

    tree = leaves[0]
    expected = '"w0*"'
    for i, leaf in enumerate(leaves[1:], 1):
        tree = Or(tree, leaf)
        expected = '(%s OR "w%d*")' % (expected, i)
    assert compile(tree, PREFIX) == expected


def test_chain_inside_group():
    tree = Or(Or(Leaf('a'), Group(And(And(Leaf('b'), Leaf('c')),
                                      Exclude(Leaf('d'))))), Leaf('e'))
    assert compile(tree, PREFIX) == (
        '(("a*" OR ("b*" AND "c*" AND NOT("d*"))) OR "e*")')
