"""Grammar free rendering of search text.

Used when the text cannot be parsed.  Punctuation is deleted, common
words are dropped, and every remaining word is required.
"""
import re

from .compiler import format_term
from .exc import InvalidArgument
from .modes import PhraseMode


DEFAULT_STOPWORDS = frozenset([
    'and', 'or', 'not',
    'a', 'the',
    'he', 'his', 'him', 'she', 'hers', 'her', 'it', 'its',
    ])

strip_characters = re.compile(r"""[!@#$%^*_'.?"();+\-&|]""")
split_whitespace = re.compile(r"[ \r\n\t]")


def words(text, stopwords=DEFAULT_STOPWORDS):
    """Yield the words of *text* that survive punctuation and stopword
    removal, in order.  Stopwords match in any case."""
    stopwords = frozenset(w.lower() for w in stopwords)
    for word in split_whitespace.split(strip_characters.sub('', text)):
        if word and word.lower() not in stopwords:
            yield word


def simple_compile(text, phrase_mode=PhraseMode.INFLECTIONAL,
                   stopwords=DEFAULT_STOPWORDS):
    """Return every significant word of *text* joined with AND.

    Never fails on any string; returns an empty string when nothing
    significant is left.
    """
    if text is None:
        raise InvalidArgument("Search text is required")
    phrase_mode = PhraseMode.coerce(phrase_mode)
    return " AND ".join(format_term(word, phrase_mode, wildcards=False)
                        for word in words(text, stopwords))
