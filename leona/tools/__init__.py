import sys
from argparse import ArgumentParser, FileType
from leona import Leona

base_argparser = ArgumentParser(add_help=False, epilog='Look at the Leona documentation for more info on the options')


flags = [
    ('d', 'debug'),
    'regex',
]

options = []

k = {'encoding': 'utf-8'}
base_argparser.add_argument('-o', '--out', type=FileType('w', **k), default=sys.stdout, help='the output file (default=stdout)')
base_argparser.add_argument('program_file', type=FileType('r', **k), nargs='?', default=sys.stdin, help='A program to run (default=stdin)')

for f in flags:
    if isinstance(f, tuple):
        options.append(f[1])
        base_argparser.add_argument('-' + f[0], '--' + f[1], action='store_true')
    else:
        options.append(f)
        base_argparser.add_argument('--' + f, action='store_true')

def build_leona(namespace):
    kwargs = {n: getattr(namespace, n) for n in options}
    return Leona(**kwargs), namespace.out
