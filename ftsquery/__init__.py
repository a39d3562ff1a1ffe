from .compiler import Compiler, compile
from .exc import (
    CompilerDefect,
    FTSQueryError,
    InvalidArgument,
    LexicalError,
    ParseError,
    SyntacticError,
    )
from .fallback import DEFAULT_STOPWORDS, simple_compile
from .modes import PhraseMode
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
from .parser import Parser, parse
from .translator import Translator, translate

__all__ = [
    'And',
    'Compiler',
    'CompilerDefect',
    'DEFAULT_STOPWORDS',
    'Empty',
    'Exact',
    'Exclude',
    'FTSQueryError',
    'Group',
    'InvalidArgument',
    'Leaf',
    'LexicalError',
    'Or',
    'ParseError',
    'Parser',
    'Phrase',
    'PhraseMode',
    'Proximity',
    'SyntacticError',
    'Thesaurus',
    'Translator',
    'compile',
    'parse',
    'simple_compile',
    'translate',
    ]
