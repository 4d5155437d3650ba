""" Run a Befunge-93 program.

The program is read from a source file, which must have the .bf extension.
Standard input and standard output are connected to the input and output
instructions of the program. Source files are read as latin-1, so every
byte is a character with a code from 0 to 255.

.. code::

    $ bef93 hello_world.bf
    Hello, World!

"""

import argparse
import logging
import os
import sys
from .base import base_parser, LogSetup
from ..common import BefungeError
from ..interpreter import Interpreter


source_extension = '.bf'

parser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.RawDescriptionHelpFormatter,
    parents=[base_parser])
parser.add_argument(
    'source', metavar='FILE', help='A file with Befunge-93 source code')
parser.add_argument(
    '--strict', action='store_true', default=False,
    help='Refuse programs larger than the 80x25 befunge-93 playfield')
parser.add_argument(
    '--trace', action='store_true', default=False,
    help='Log every executed instruction (use together with -v)')


def read_source(filename):
    """ Load the program text from a befunge source file """
    if os.path.splitext(filename)[1] != source_extension:
        raise BefungeError(
            '{} is not a befunge source file, expected a {} extension'.format(
                filename, source_extension))
    if os.path.isdir(filename):
        raise FileNotFoundError('{} is not a file'.format(filename))
    try:
        with open(filename, 'r', encoding='latin-1') as f:
            return f.read()
    except FileNotFoundError:
        raise
    except OSError as ex:
        raise BefungeError('Cannot read {}: {}'.format(filename, ex))


def run(args=None):
    """ Run a Befunge-93 program """
    args = parser.parse_args(args)
    with LogSetup(args):
        logger = logging.getLogger('bef93')
        source = read_source(args.source)
        logger.debug('Read %s characters from %s', len(source), args.source)
        interpreter = Interpreter(
            source, output=sys.stdout, input=sys.stdin,
            filename=args.source, verbose=args.trace)
        if args.strict:
            interpreter.playfield.check_size()
        interpreter.execute()


if __name__ == '__main__':
    run()
