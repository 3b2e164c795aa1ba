import re
from setuptools import setup

__version__ ,= re.findall('__version__: str = "(.*)"', open('leona/__init__.py').read())

setup(
    name = "leona",
    version = __version__,
    packages = ['leona', 'leona.tools'],

    requires = [],
    install_requires = [],

    extras_require = {
        "regex": ["regex"],
        "tests": ["regex"],
    },

    test_suite = 'tests.__main__',

    # metadata for upload to PyPI
    description = "a batch interpreter for a tiny turtle-graphics language",
    license = "MIT",
    keywords = "turtle graphics interpreter lexer parser",
    long_description='''
Leona runs programs written in a tiny turtle-graphics language.

A program is a list of statements, each ending with a period:

    % draw a blue square
    DOWN.
    REPEAT 4 "FORWARD 10. LEFT 90."

Main Features:
 - Movement (FORWARD, BACKWARD), turns (LEFT, RIGHT), pen control (UP, DOWN)
 - Colors (COLOR #FF00AA.)
 - Counted repetition, nested with quotes
 - The first syntax error is reported with its line number
 - Pluggable drawing agents
''',

    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Interpreters",
        "License :: OSI Approved :: MIT License",
    ],
    entry_points = {
        'console_scripts': [
            'leona = leona.tools.run:main'
        ]
    },
)
