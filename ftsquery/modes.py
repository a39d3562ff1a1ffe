from enum import Enum

from .exc import InvalidArgument


class PhraseMode(Enum):
    """Default behavior of bare search terms."""

    INFLECTIONAL = 'inflectional'
    """Expect full words and let the engine match every inflectional
    form.  Prefix searches need an explicit ``*`` suffix."""

    PREFIX = 'prefix'
    """Search every bare word by prefix."""

    @classmethod
    def coerce(cls, value):
        """Return the PhraseMode named by *value*.

        :param value: a PhraseMode, or its name or value in any case.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for mode in cls:
                if value.lower() in (mode.value, mode.name.lower()):
                    return mode
        raise InvalidArgument("Unknown phrase mode %r" % (value,))


class TermMode(Enum):
    INFLECTIONAL = 'inflectional'
    EXACT = 'exact'
