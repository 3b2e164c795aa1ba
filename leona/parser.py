"""Recursive-descent parser

Grammar::

    Program  := Expr
    Expr     := Stmt Expr | Stmt
    Stmt     := REPEAT NUMBER Loop
              | PEN_UP '.'
              | PEN_DOWN '.'
              | SET_COLOR HEX_COLOR '.'
              | Move NUMBER '.'
    Loop     := '"' Expr '"' | Stmt
    Move     := FORWARD | BACKWARD | TURN_LEFT | TURN_RIGHT
"""

from .utils import logger
from .lexer import TokenStream, END_OF_INPUT, LEX_ERROR
from .tree import Meta, Sequence, Repeat, Move, Single, MOVE_DIRECTIONS
from .exceptions import UnexpectedToken, UnexpectedEOF, UnexpectedCharacters


_STATEMENT_STARTS = ('REPEAT', 'PEN_UP', 'PEN_DOWN', 'SET_COLOR') + MOVE_DIRECTIONS


def _unexpected(token, expected):
    if token.type == LEX_ERROR:
        return UnexpectedCharacters(token, expected)
    elif token.type == END_OF_INPUT:
        return UnexpectedEOF(token, expected)
    return UnexpectedToken(token, expected)


class Parser:
    """Builds a parse tree from a token sequence.

    The tokens must end with ``END_OF_INPUT``, as produced by the lexer.
    The first mismatch raises a subclass of ``UnexpectedInput`` carrying the offending token.
    """

    def __init__(self, tokens):
        self.stream = TokenStream(tokens)

    def parse(self):
        tree = self.expr()
        self._expect(END_OF_INPUT)
        logger.debug("Parsed %d tokens", self.stream.pos)
        return tree

    def _expect(self, type_):
        token = self.stream.peek()
        if token.type != type_:
            raise _unexpected(token, [type_])
        return self.stream.advance()

    def expr(self):
        token = self.stream.peek()
        if token.type == END_OF_INPUT:
            return Single('END', meta=Meta(token.line))

        # Statements are chained tail first: the last one is wrapped first
        statements = []
        while True:
            statements.append(self.stmt())
            token = self.stream.peek()
            if token.type == END_OF_INPUT:
                rest = Single('END', meta=Meta(token.line))
                break
            elif token.type == 'QUOTE':
                rest = None
                break

        for stmt in reversed(statements):
            rest = Sequence(stmt, rest, meta=Meta(stmt.meta.line))
        return rest

    def stmt(self):
        token = self.stream.peek()
        meta = Meta(token.line)

        if token.type == 'REPEAT':
            self.stream.advance()
            count = self._expect('NUMBER')
            body = self.loop()
            return Repeat(count.value, body, meta=meta)

        elif token.type in ('PEN_UP', 'PEN_DOWN'):
            self.stream.advance()
            self._expect('PERIOD')
            return Single(token.type, meta=meta)

        elif token.type == 'SET_COLOR':
            self.stream.advance()
            color = self._expect('HEX_COLOR')
            self._expect('PERIOD')
            return Single('SET_COLOR', color.value, meta=meta)

        elif token.type in MOVE_DIRECTIONS:
            self.stream.advance()
            amount = self._expect('NUMBER')
            self._expect('PERIOD')
            return Move(token.type, amount.value, meta=meta)

        raise _unexpected(token, _STATEMENT_STARTS)

    def loop(self):
        if self.stream.peek().type == 'QUOTE':
            self.stream.advance()
            body = self.expr()
            self._expect('QUOTE')
            return body
        return self.stmt()


def parse(tokens):
    """Parses a token sequence into a tree, raising ``UnexpectedInput`` on the first syntax error"""
    return Parser(tokens).parse()
