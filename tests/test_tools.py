import gc
import os
import tempfile
import warnings
from contextlib import redirect_stderr
from io import StringIO
from unittest import TestCase, main

from leona import Leona
from leona.tools import base_argparser, build_leona
from leona.tools.run import run, main as run_main


class TestRun(TestCase):

    def test_segments(self):
        out = StringIO()
        status = run(Leona(), 'DOWN. FORWARD 10. UP. FORWARD 1. DOWN. COLOR #00ff00. BACKWARD 2.', out)
        self.assertEqual(status, 0)
        self.assertEqual(out.getvalue(), '#0000FF 0.0 0.0 10.0 0.0\n#00FF00 11.0 0.0 9.0 0.0\n')

    def test_syntax_error(self):
        out = StringIO()
        err = StringIO()
        with redirect_stderr(err):
            status = run(Leona(), 'DOWN. FORWARD 10.\nFORWARD 10', out)
        self.assertEqual(status, 1)
        self.assertEqual(out.getvalue(), '')
        self.assertEqual(err.getvalue(), 'Syntax error on line 2\n')

    def test_lex_error(self):
        err = StringIO()
        with redirect_stderr(err):
            status = run(Leona(), 'DOWN.\n\nLEFT ten.', StringIO())
        self.assertEqual(status, 1)
        self.assertEqual(err.getvalue(), 'Syntax error on line 3\n')


class TestMain(TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.program = os.path.join(self.tmpdir, 'square.leona')
        self.out = os.path.join(self.tmpdir, 'out.txt')

    def tearDown(self):
        for name in os.listdir(self.tmpdir):
            os.remove(os.path.join(self.tmpdir, name))
        os.rmdir(self.tmpdir)

    def _write(self, text):
        with open(self.program, 'w', encoding='utf-8') as f:
            f.write(text)

    def _read_out(self):
        with open(self.out, encoding='utf-8') as f:
            return f.read()

    def test_main(self):
        self._write('% a square\nDOWN.\nREPEAT 4 "FORWARD 1. LEFT 90."\n')
        status = run_main([self.program, '-o', self.out])
        self.assertEqual(status, 0)
        lines = self._read_out().splitlines()
        self.assertEqual(len(lines), 4)
        self.assertEqual(lines[0], '#0000FF 0.0 0.0 1.0 0.0')
        self.assertTrue(all(line.startswith('#0000FF ') for line in lines))

    def test_main_syntax_error(self):
        self._write('DOWN.\nFORWARD 1.\nUP\n')
        err = StringIO()
        with redirect_stderr(err):
            status = run_main([self.program, '-o', self.out])
        self.assertEqual(status, 1)
        self.assertEqual(err.getvalue(), 'Syntax error on line 3\n')
        self.assertEqual(self._read_out(), '')

    def test_main_closes_files(self):
        self._write('DOWN. FORWARD 1.')
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always', ResourceWarning)
            self.assertEqual(run_main([self.program, '-o', self.out]), 0)
            gc.collect()
        self.assertEqual([w for w in caught if issubclass(w.category, ResourceWarning)], [])
        self.assertEqual(self._read_out(), '#0000FF 0.0 0.0 1.0 0.0\n')

    def test_example_program(self):
        example = os.path.join(os.path.dirname(__file__), '..', 'examples', 'square.leona')
        status = run_main([example, '-o', self.out])
        self.assertEqual(status, 0)
        lines = self._read_out().splitlines()
        self.assertEqual(len(lines), 8)
        self.assertEqual([line.split()[0] for line in lines], ['#0000FF'] * 4 + ['#FF0000'] * 4)

    def test_build_leona(self):
        self._write('UP.')
        ns = base_argparser.parse_args([self.program, '-d', '-o', self.out])
        try:
            leona, out = build_leona(ns)
            self.assertTrue(leona.options.debug)
            self.assertFalse(leona.options.regex)
            self.assertIs(out, ns.out)
        finally:
            ns.out.close()
            ns.program_file.close()


if __name__ == '__main__':
    main()
