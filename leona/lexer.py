## Lexer Implementation

import re

from .utils import logger
from .exceptions import LexError


END_OF_INPUT = 'END_OF_INPUT'
LEX_ERROR = 'LEX_ERROR'


class Pattern:

    def __init__(self, value, flags=()):
        self.value = value
        self.flags = frozenset(flags)

    def __repr__(self):
        return repr(self.to_regexp())

    def to_regexp(self):
        raise NotImplementedError()

    def _get_flags(self, value):
        for f in self.flags:
            value = ('(?%s:%s)' % (f, value))
        return value


class PatternStr(Pattern):
    type = "str"

    def to_regexp(self):
        return self._get_flags(re.escape(self.value))


class PatternRE(Pattern):
    type = "re"

    def to_regexp(self):
        return self._get_flags(self.value)


class TerminalDef:

    def __init__(self, name, pattern):
        assert isinstance(pattern, Pattern), pattern
        self.name = name
        self.pattern = pattern

    def __repr__(self):
        return '%s(%r, %r)' % (type(self).__name__, self.name, self.pattern)


class Token(str):
    """A lexical unit of the program.

    The string content of a token is the source text it was matched from.
    ``value`` holds the payload: an ``int`` for ``NUMBER`` tokens, the verbatim
    ``#xxxxxx`` text for ``HEX_COLOR`` tokens, and the source text for every
    other kind.
    """
    __slots__ = ('type', 'value', 'line', 'column', 'end_line', 'end_column')

    def __new__(cls, type_, value, line=None, column=None, end_line=None, end_column=None):
        self = super(Token, cls).__new__(cls, value)

        self.type = type_
        self.value = value
        self.line = line
        self.column = column
        self.end_line = end_line
        self.end_column = end_column
        return self

    def update(self, type_=None, value=None):
        return Token.new_borrow_pos(
            type_ if type_ is not None else self.type,
            value if value is not None else self.value,
            self
        )

    @classmethod
    def new_borrow_pos(cls, type_, value, borrow_t):
        return cls(type_, value, borrow_t.line, borrow_t.column, borrow_t.end_line, borrow_t.end_column)

    def __reduce__(self):
        return (self.__class__, (self.type, self.value, self.line, self.column, self.end_line, self.end_column))

    def __repr__(self):
        return 'Token(%s, %r)' % (self.type, self.value)

    def __deepcopy__(self, memo):
        return Token(self.type, self.value, self.line, self.column, self.end_line, self.end_column)

    def __eq__(self, other):
        if isinstance(other, Token) and self.type != other.type:
            return False

        return str.__eq__(self, other)

    __hash__ = str.__hash__


class LineCounter:
    def __init__(self):
        self.newline_char = '\n'
        self.char_pos = 0
        self.line = 1
        self.column = 1
        self.line_start_pos = 0

    def feed(self, token, test_newline=True):
        """Consume a token and calculate the new line & column.

        As an optional optimization, set test_newline=False is token doesn't contain a newline.
        """
        if test_newline:
            newlines = token.count(self.newline_char)
            if newlines:
                self.line += newlines
                self.line_start_pos = self.char_pos + token.rindex(self.newline_char) + 1

        self.char_pos += len(token)
        self.column = self.char_pos - self.line_start_pos + 1


_COMMENT_RE = re.compile(r'%[^\n]*')

def strip_comments(text):
    """Remove every ``%`` comment, keeping the newline that ends it so line numbers don't move."""
    return _COMMENT_RE.sub('', text)


def _regexp_has_newline(r):
    r"""Expressions that may indicate newlines in a regexp:
        - newlines (\n)
        - escaped newline (\\n)
        - anything but ([^...])
        - spaces (\s)
    """
    return '\n' in r or '\\n' in r or '\\s' in r or '[^' in r


def _build_mres(terminals, max_size, g_regex_flags, re_):
    # Older versions of the re module cap the number of groups in one pattern.
    # This function recursively tries less and less terminals until it's successful.
    mres = []
    while terminals:
        try:
            mre = re_.compile(u'|'.join(u'(?:%s)' % t.pattern.to_regexp() for t in terminals[:max_size]), g_regex_flags)
        except AssertionError:
            return _build_mres(terminals, max_size//2, g_regex_flags, re_)

        mres.append(mre)
        terminals = terminals[max_size:]
    return mres

def build_mres(terminals, g_regex_flags, re_):
    return _build_mres(terminals, len(terminals), g_regex_flags, re_)


_KEYWORD_END = r'[ \t\n]'

# Order matters: when two terminals match the same length, the earlier one wins.
TERMINALS = [
    TerminalDef('FORWARD', PatternRE(r'forw(?:ard)?' + _KEYWORD_END, 'i')),
    TerminalDef('BACKWARD', PatternRE(r'back(?:ward)?' + _KEYWORD_END, 'i')),
    TerminalDef('TURN_LEFT', PatternRE(r'left' + _KEYWORD_END, 'i')),
    TerminalDef('TURN_RIGHT', PatternRE(r'right' + _KEYWORD_END, 'i')),
    TerminalDef('SET_COLOR', PatternRE(r'color' + _KEYWORD_END, 'i')),
    TerminalDef('PEN_UP', PatternStr('up', 'i')),
    TerminalDef('PEN_DOWN', PatternStr('down', 'i')),
    TerminalDef('REPEAT', PatternRE(r'(?P<keyword>rep(?:eat)?)[ \t\n]+(?P<count>[0-9]+)[ \t\n]+', 'i')),
    TerminalDef('PERIOD', PatternStr('.')),
    TerminalDef('QUOTE', PatternStr('"')),
    TerminalDef('NUMBER', PatternRE(r'[0-9]+')),
    TerminalDef('HEX_COLOR', PatternRE(r'#[A-Za-z0-9]{6}')),
    TerminalDef('NEWLINE', PatternStr('\n')),
    TerminalDef('WS', PatternRE(r'[ \t]+')),
]

IGNORE = ('NEWLINE', 'WS')

KEYWORDS = frozenset(['FORWARD', 'BACKWARD', 'TURN_LEFT', 'TURN_RIGHT', 'SET_COLOR'])


class Lexer:
    """Splits program text into tokens.

    Every terminal is tried at the current position and the longest match wins.
    Ties go to the terminal listed first. Text that no terminal matches becomes a
    single ``LEX_ERROR`` token, so lexing never fails on bad input.

    Method Signatures:
        lex(self, stream) -> Iterator[Token]
    """

    def __init__(self, terminals=TERMINALS, re_=re, ignore=IGNORE, callbacks=None, g_regex_flags=0):
        terminals = list(terminals)
        assert all(isinstance(t, TerminalDef) for t in terminals), terminals

        self.re = re_
        self.compiled = []
        for t in terminals:
            try:
                mre = self.re.compile(t.pattern.to_regexp(), g_regex_flags)
            except self.re.error:
                raise LexError("Cannot compile token %s: %s" % (t.name, t.pattern))

            if mre.match('') is not None:
                raise LexError("Lexer does not allow zero-width terminals. (%s: %s)" % (t.name, t.pattern))
            self.compiled.append((t, mre))

        assert set(ignore) <= {t.name for t in terminals}

        self.terminals = terminals
        self.newline_types = frozenset(t.name for t in terminals if _regexp_has_newline(t.pattern.to_regexp()))
        self.mres = build_mres(terminals, g_regex_flags, self.re)
        self.ignore_types = frozenset(ignore)
        self.callback = dict(callbacks or {})

    def match(self, stream, pos):
        best = None
        for t, mre in self.compiled:
            m = mre.match(stream, pos)
            if m and (best is None or m.end() > best[0].end()):
                best = m, t
        return best

    def next_match_pos(self, stream, pos):
        "Returns the first position after `pos` where any terminal matches"
        found = len(stream)
        for mre in self.mres:
            m = mre.search(stream, pos + 1)
            if m and m.start() < found:
                found = m.start()
        return found

    def _make_tokens(self, m, type_, line_ctr):
        value = m.group(0)
        line, column = line_ctr.line, line_ctr.column
        line_ctr.feed(value, type_ in self.newline_types)

        if type_ == 'REPEAT':
            keyword = m.group('keyword')
            yield Token(type_, keyword, line, column, line, column + len(keyword))
            # The count is placed where the whole match ends, newlines included
            count = m.group('count')
            yield Token('NUMBER', int(count), line_ctr.line, line_ctr.column, line_ctr.line, line_ctr.column)
        elif type_ == 'NUMBER':
            yield Token(type_, int(value), line, column, line_ctr.line, line_ctr.column)
        elif type_ in KEYWORDS:
            keyword = value[:-1]
            yield Token(type_, keyword, line, column, line, column + len(keyword))
        else:
            yield Token(type_, value, line, column, line_ctr.line, line_ctr.column)

    def lex(self, stream):
        stream = strip_comments(stream)
        line_ctr = LineCounter()
        last_token = None

        while line_ctr.char_pos < len(stream):
            res = self.match(stream, line_ctr.char_pos)
            if not res:
                end = self.next_match_pos(stream, line_ctr.char_pos)
                value = stream[line_ctr.char_pos:end]
                tokens = [Token(LEX_ERROR, value, line_ctr.line, line_ctr.column)]
                line_ctr.feed(value)
                tokens[0].end_line = line_ctr.line
                tokens[0].end_column = line_ctr.column
                logger.debug("Unmatched input %r at line %d", value, tokens[0].line)
            else:
                m, terminal = res
                if terminal.name in self.ignore_types:
                    line_ctr.feed(m.group(0), terminal.name in self.newline_types)
                    continue
                tokens = self._make_tokens(m, terminal.name, line_ctr)

            for t in tokens:
                if t.type in self.callback:
                    t = self.callback[t.type](t)
                    if not isinstance(t, Token):
                        raise ValueError("Callbacks must return a token (returned %r)" % t)
                yield t
                last_token = t

        if last_token is None:
            yield Token(END_OF_INPUT, '', 0)
        else:
            yield Token(END_OF_INPUT, '', last_token.line, last_token.end_column, last_token.line, last_token.end_column)


def tokenize(text, re_=re):
    """Converts program text into an immutable token sequence that always ends with ``END_OF_INPUT``"""
    return tuple(Lexer(re_=re_).lex(text))


class TokenStream:
    """Sequential, single-pass reader over a token sequence. Never moves backward."""

    def __init__(self, tokens):
        self.tokens = tuple(tokens)
        self.pos = 0

    def peek(self):
        return self.tokens[self.pos]

    def advance(self):
        t = self.peek()
        self.pos += 1
        return t

    def has_next(self):
        return self.pos < len(self.tokens)
