import logging

from .compiler import Compiler
from .exc import InvalidArgument, ParseError
from .fallback import DEFAULT_STOPWORDS, simple_compile
from .modes import PhraseMode
from .parser import DEFAULT_MAX_DEPTH, Parser
from .tools import lazy_property


logger = logging.getLogger(__name__)


class Translator(object):
    """Translates Google style search text to SQL Server full-text
    search conditions.

    :param phrase_mode: The default behavior of bare terms, a
    PhraseMode or its name.

    :param stopwords: Words dropped by the simple tokenization used
    when the text cannot be parsed.

    :param max_depth: The deepest parenthesized nesting accepted
    before the text is considered malformed.
    """

    setting_names = ('phrase_mode', 'stopwords', 'max_depth')

    def __init__(self,
                 phrase_mode=PhraseMode.INFLECTIONAL,
                 stopwords=DEFAULT_STOPWORDS,
                 max_depth=DEFAULT_MAX_DEPTH):
        self.phrase_mode = PhraseMode.coerce(phrase_mode)
        if isinstance(stopwords, str):
            raise InvalidArgument("stopwords must be a collection of words")
        self.stopwords = frozenset(w.lower() for w in stopwords)
        if not isinstance(max_depth, int) or max_depth < 1:
            raise InvalidArgument(
                "max_depth must be a positive integer, not %r" % (max_depth,))
        self.max_depth = max_depth

    @classmethod
    def from_dict(cls, settings):
        """ Construct a Translator from a settings dictionary. """
        unknown = set(settings) - set(cls.setting_names)
        if unknown:
            raise InvalidArgument(
                "Unknown settings: %s" % ', '.join(sorted(unknown)))
        return cls(**settings)

    @property
    def settings(self):
        """ Returns a dictionary of the translator settings. """
        return dict(
            phrase_mode=self.phrase_mode.value,
            stopwords=sorted(self.stopwords),
            max_depth=self.max_depth)

    @lazy_property
    def parser(self):
        return Parser(max_depth=self.max_depth)

    @lazy_property
    def compiler(self):
        return Compiler(self.phrase_mode)

    def parse(self, text):
        return self.parser.parse(text)

    def compile(self, tree, phrase_mode=None):
        """Return the search condition text of a parsed tree.

        :param phrase_mode: Overrides the translator phrase mode, so a
        tree parsed once can be rendered in both modes.
        """
        if phrase_mode is None:
            return self.compiler.compile(tree)
        return Compiler(phrase_mode).compile(tree)

    def simple_compile(self, text):
        return simple_compile(text, self.phrase_mode, self.stopwords)

    def translate(self, text):
        """Convert search text to ``CONTAINS``/``CONTAINSTABLE`` syntax.

        Returns a ``(text, succeeded)`` pair.  When the text cannot be
        parsed it falls back to simple tokenization, and *succeeded* is
        False.
        """
        if text is None:
            raise InvalidArgument("Search text is required")
        try:
            tree = self.parse(text)
        except ParseError as e:
            logger.debug('Falling back to simple tokenization of %r: %s',
                         text, e)
            return self.simple_compile(text), False
        return self.compile(tree), True

    def __repr__(self):
        return '%s(phrase_mode=%s, max_depth=%s)' % (
            type(self).__name__, self.phrase_mode.value, self.max_depth)


def translate(text, phrase_mode=PhraseMode.INFLECTIONAL):
    """Convert search text, returning a ``(text, succeeded)`` pair."""
    return Translator(phrase_mode=phrase_mode).translate(text)
