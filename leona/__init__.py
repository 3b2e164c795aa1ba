from .utils import logger
from .tree import Tree, Sequence, Repeat, Move, Single
from .exceptions import (ParseError, LexError, UnexpectedToken, UnexpectedInput,
                         UnexpectedCharacters, UnexpectedEOF, LeonaError)
from .lexer import Token, tokenize
from .parser import parse
from .evaluator import evaluate
from .agent import Agent, Turtle, Segment
from .leona import Leona

__version__: str = "1.0.0"
