"Runs a program and prints every segment the turtle draws, one per line"

import logging
import sys
from argparse import ArgumentParser

from leona import Turtle, UnexpectedInput, logger
from leona.agent import format_segment
from leona.tools import base_argparser, build_leona


def run(leona, program, out):
    """Runs the program, writing segments to `out` once the whole program has parsed.

    Returns the process exit status.
    """
    turtle = Turtle(on_segment=lambda segment: print(format_segment(segment), file=out))
    try:
        leona.run(program, turtle)
    except UnexpectedInput as e:
        print("Syntax error on line %s" % e.line, file=sys.stderr)
        return 1
    return 0


def main(argv=None):
    parser = ArgumentParser(prog='leona', description="Run a Leona turtle program",
                            parents=[base_argparser])
    ns = parser.parse_args(argv)
    if ns.debug:
        logger.setLevel(logging.DEBUG)

    leona, out = build_leona(ns)
    try:
        if ns.program_file is parser.get_default('program_file'):
            program = ns.program_file.read()
        else:
            with ns.program_file:
                program = ns.program_file.read()
        return run(leona, program, out)
    finally:
        if out is parser.get_default('out'):
            out.flush()
        else:
            out.close()


if __name__ == '__main__':
    sys.exit(main())
