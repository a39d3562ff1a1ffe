

class FTSQueryError(Exception):
    pass


class InvalidArgument(FTSQueryError, TypeError):
    pass


class ParseError(FTSQueryError, ValueError):
    """The source text is not a well formed search expression.

    ``column`` is the zero based offset into ``text`` where the problem
    was noticed, or None when it is not known.
    """

    def __init__(self, msg, text=None, column=None):
        super(ParseError, self).__init__(msg)
        self.msg = msg
        self.text = text
        self.column = column

    def __str__(self):
        if self.column is None:
            return self.msg
        return "%s (at column %s)" % (self.msg, self.column)


class LexicalError(ParseError):
    pass


class SyntacticError(ParseError):
    pass


class CompilerDefect(FTSQueryError, RuntimeError):
    pass
