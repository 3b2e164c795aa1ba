from .utils import logger


class LeonaError(Exception):
    pass


class ConfigurationError(LeonaError, ValueError):
    pass


def assert_config(value, options, msg='Got %r, expected one of %s'):
    if value not in options:
        raise ConfigurationError(msg % (value, options))


class ParseError(LeonaError):
    pass


class LexError(LeonaError):
    pass


class UnexpectedInput(LeonaError):
    """UnexpectedInput Error.

    Used as a base class for the following exceptions:

    - ``UnexpectedToken``: The parser received an unexpected token
    - ``UnexpectedEOF``: The program ended while the parser expected more
    - ``UnexpectedCharacters``: The parser reached a run of characters that no terminal matches

    Every subclass carries the offending ``token`` and its ``line``.
    After catching one of these exceptions, you may call ``get_context`` to create a nicer error message.
    """
    token = None
    line = None
    column = None
    expected = ()

    def _init_from_token(self, token, expected):
        self.token = token
        self.line = getattr(token, 'line', None)
        self.column = getattr(token, 'column', None)
        self.expected = tuple(expected)
        logger.debug("%s at line %s: %r", type(self).__name__, self.line, token)

    def get_context(self, text):
        """Returns a pretty string pinpointing the error in the text.

        Note:
            The parser doesn't hold a copy of the text it has to parse,
            so you have to provide it again
        """
        assert self.line is not None, self
        if not self.line or self.column is None:
            return ''
        lines = text.split('\n')
        if self.line > len(lines):
            return ''
        source_line = lines[self.line - 1]
        return source_line + '\n' + ' ' * len(source_line[:self.column - 1].expandtabs()) + '^\n'

    def _format_expected(self):
        if not self.expected:
            return ''
        return "Expected one of: \n\t* %s\n" % '\n\t* '.join(self.expected)


class UnexpectedEOF(ParseError, UnexpectedInput):
    def __init__(self, token, expected=()):
        self._init_from_token(token, expected)
        super(UnexpectedEOF, self).__init__()

    def __str__(self):
        message = "Unexpected end-of-input at line %s. " % self.line
        message += self._format_expected()
        return message


class UnexpectedCharacters(LexError, UnexpectedInput):
    def __init__(self, token, expected=()):
        self._init_from_token(token, expected)
        super(UnexpectedCharacters, self).__init__()

    def __str__(self):
        return "No terminal matches %r at line %s col %s" % (str(self.token), self.line, self.column)


class UnexpectedToken(ParseError, UnexpectedInput):
    """An exception that is raised by the parser, when the token it received
    doesn't match any valid step forward.
    """

    def __init__(self, token, expected=()):
        self._init_from_token(token, expected)
        super(UnexpectedToken, self).__init__()

    def __str__(self):
        message = ("Unexpected token %r at line %s, column %s.\n%s"
                   % (self.token, self.line, self.column, self._format_expected()))
        return message


class VisitError(LeonaError):
    """VisitError is raised when the evaluator reaches a node it has no handler for

    It provides the following attributes for inspection:
    - obj: the tree node it was processing when the error was raised
    """

    def __init__(self, rule, obj):
        self.obj = obj

        message = 'No handler for tree node "%s": %r' % (rule, obj)
        super(VisitError, self).__init__(message)
