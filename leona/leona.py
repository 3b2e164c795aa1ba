import re

from .utils import logger, regex
from .exceptions import ConfigurationError, assert_config
from .lexer import Lexer, TERMINALS, IGNORE
from .parser import Parser
from .evaluator import evaluate
from .agent import Turtle


class LeonaOptions:
    """Specifies the options for Leona

    """
    OPTIONS_DOC = """
    **===  General Options  ===**

    debug
            Log the token count and the parse tree of every program, at DEBUG level (default: False)
    regex
            When True, uses the ``regex`` module instead of the stdlib ``re``.
    lexer_callbacks
            Dictionary of callbacks for the lexer, keyed by token type. May alter tokens during lexing. Use with caution.
    agent_class
            The callable ``run()`` uses to create an agent when none is given (default: ``Turtle``)

    **=== End Options ===**
    """
    if __doc__:
        __doc__ += OPTIONS_DOC

    _defaults = {
        'debug': False,
        'regex': False,
        'lexer_callbacks': {},
        'agent_class': Turtle,
    }

    def __init__(self, options_dict):
        o = dict(options_dict)

        options = {}
        for name, default in self._defaults.items():
            if name in o:
                value = o.pop(name)
                if isinstance(default, bool):
                    value = bool(value)
            else:
                value = default

            options[name] = value

        self.__dict__['options'] = options

        if not callable(options['agent_class']):
            raise ConfigurationError("agent_class must be callable, got %r" % (options['agent_class'],))

        if o:
            raise ConfigurationError("Unknown options: %s" % o.keys())

    def __getattr__(self, name):
        try:
            return self.options[name]
        except KeyError as e:
            raise AttributeError(e)

    def __setattr__(self, name, value):
        assert_config(name, self.options.keys(), "%r isn't a valid option. Expected one of: %s")
        self.options[name] = value


class Leona:
    """Main interface for the library.

    It's mostly a thin wrapper that runs program text through the lexer, the parser and the evaluator.

    Parameters:
        options: a dictionary controlling various aspects of Leona.

    Example:
        >>> Leona().run('DOWN. FORWARD 10.').segments
        [Segment(color='#0000FF', start_x=0.0, start_y=0.0, end_x=10.0, end_y=0.0)]
    """

    def __init__(self, **options):
        self.options = LeonaOptions(options)

        if self.options.regex:
            if regex:
                re_module = regex
            else:
                raise ImportError('`regex` module must be installed if calling `Leona(regex=True)`.')
        else:
            re_module = re

        self.lexer = Lexer(TERMINALS, re_module, IGNORE, callbacks=self.options.lexer_callbacks)

    if __doc__:
        __doc__ += "\n\n" + LeonaOptions.OPTIONS_DOC

    def __repr__(self):
        return 'Leona(%s)' % ', '.join('%s=%r' % item for item in self.options.options.items())

    def lex(self, text):
        "Only lex the text, without parsing it. Returns the full token sequence."
        tokens = tuple(self.lexer.lex(text))
        if self.options.debug:
            logger.debug("Lexed %d tokens", len(tokens))
        return tokens

    def parse(self, text):
        """Parse the given text into a tree.

        Raises:
            UnexpectedInput: on the first syntax error. Its ``line`` is the line of the offending token.
        """
        tree = Parser(self.lex(text)).parse()
        if self.options.debug:
            logger.debug("Parse tree:\n%s", tree.pretty())
        return tree

    def run(self, text, agent=None):
        """Parse the text and run it against an agent. Returns the agent.

        Nothing is evaluated unless the whole program parses.
        """
        tree = self.parse(text)
        if agent is None:
            agent = self.options.agent_class()
        evaluate(tree, agent)
        return agent
