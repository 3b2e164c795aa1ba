import logging
import unittest

from leona import logger

from .test_agent import TestTurtle
from .test_evaluator import TestEvaluator
from .test_leona import TestLeona
from .test_lexer import TestLexer, TestToken, TestTokenStream
from .test_logger import Testlogger
from .test_parser import TestParser
from .test_regex import TestRegex
from .test_tools import TestRun, TestMain
from .test_trees import TestTrees

logger.setLevel(logging.INFO)

if __name__ == "__main__":
    unittest.main()
