""" Befunge-93 interpreter.

Epic esotheric language in 2D!

See also: https://en.wikipedia.org/wiki/Befunge

"""

import enum
import logging
import operator
import random
import re
import sys
from .common import DivisionError, RangeError, ParseError, DecodeError
from .playfield import Playfield, Direction, Position


hello_world = """\
>25*"!dlrow ,olleH":v
                 v:,_@
                 >  ^
"""

quine = """01->1# +# :# 0# g# ,# :# 5# 8# *# 4# +# -# _@"""

MAX_CHARACTER = 255

integer_pattern = re.compile(r'[+-]?[0-9]+')


def run_befunge(source, output=None, input=None, filename=None):
    """ Execute a slab of befunge and return the finished interpreter. """
    m = Interpreter(source, output=output, input=input, filename=filename)
    m.execute()
    return m


def convert_character(value, loc=None):
    """ Turn a stack value into a (latin-1) character """
    if value < 0 or value > MAX_CHARACTER:
        raise RangeError(
            'Character values must be between 0 and {}, got {}!'.format(
                MAX_CHARACTER, value), loc=loc)
    return chr(value)


def divide(b, a):
    """ Integer division truncating towards zero """
    quotient = abs(b) // abs(a)
    return quotient if (a < 0) == (b < 0) else -quotient


def modulo(b, a):
    """ Remainder with the sign of the dividend """
    return b - a * divide(b, a)


class Mode(enum.Enum):
    """ How the character under the pointer is interpreted """
    COMMAND = 'command'
    STRING = 'string'
    BRIDGE = 'bridge'


class Interpreter:
    """ Befunge machine. """
    logger = logging.getLogger('befunge')

    binary_operators = {
        '+': operator.add,
        '-': operator.sub,
        '*': operator.mul,
        '`': lambda b, a: 1 if b > a else 0,
    }

    directions = {
        '>': Direction.RIGHT,
        '<': Direction.LEFT,
        '^': Direction.UP,
        'v': Direction.DOWN,
    }

    def __init__(
            self, source, output=None, input=None, position=None,
            direction=Direction.RIGHT, filename=None, rng=None,
            verbose=False):
        self.playfield = Playfield(
            source, position=position, direction=direction,
            filename=filename)
        self.output = sys.stdout if output is None else output
        self.input = sys.stdin if input is None else input
        self.rng = random.Random() if rng is None else rng
        self.verbose = verbose
        self.reset()

    def reset(self):
        """ Reset machine state """
        self.stack = []
        self.mode = Mode.COMMAND
        self.running = True

    def execute(self):
        """ Run until finished. """
        self.logger.info(
            'Executing %s x %s program',
            self.playfield.width, self.playfield.height)
        while self.step():
            pass
        self.logger.info('Program ended')

    def step(self):
        """ Execute a single cell, returns False after termination. """
        op = self.playfield.current_character()
        if self.verbose:
            self.logger.debug(
                'at %s execute %r in %s mode, stack %s',
                tuple(self.playfield.position), op, self.mode.value,
                self.stack[-4:])

        if self.mode is Mode.BRIDGE:
            self.mode = Mode.COMMAND
        elif self.mode is Mode.STRING:
            if op == '"':
                self.mode = Mode.COMMAND
            else:
                self.push(ord(op))
        else:
            self.dispatch(op)
            if not self.running:
                return False

        self.playfield.advance()
        return True

    def dispatch(self, op):
        """ Execute a single opcode. """
        if op in "0123456789":
            self.push(int(op))
        elif op in self.binary_operators:
            a, b = self.pop(), self.pop()
            self.push(self.binary_operators[op](b, a))
        elif op == "/":
            a, b = self.pop(), self.pop()
            if a == 0:
                self.error(DivisionError, 'Cannot divide {} by 0!'.format(b))
            self.push(divide(b, a))
        elif op == "%":
            a, b = self.pop(), self.pop()
            if a == 0:
                self.error(DivisionError, 'Cannot mod {} by 0!'.format(b))
            self.push(modulo(b, a))
        elif op == "!":  # logical not
            self.push(1 if self.pop() == 0 else 0)
        elif op in self.directions:
            self.playfield.direction = self.directions[op]
        elif op == "?":  # Random direction!
            self.playfield.direction = self.rng.choice(list(Direction))
        elif op == "_":  # go left or right
            if self.pop() == 0:
                self.playfield.direction = Direction.RIGHT
            else:
                self.playfield.direction = Direction.LEFT
        elif op == "|":  # go up or down
            if self.pop() == 0:
                self.playfield.direction = Direction.DOWN
            else:
                self.playfield.direction = Direction.UP
        elif op == '"':  # Enable string mode!
            self.mode = Mode.STRING
        elif op == ":":  # Duplicate top of stack
            value = self.pop()
            self.push(value)
            self.push(value)
        elif op == "\\":
            a, b = self.pop(), self.pop()
            self.push(a)
            self.push(b)
        elif op == "$":  # Drop top of stack
            self.pop()
        elif op == ".":  # output number
            self.write('{} '.format(self.pop()))
        elif op == ",":  # output char
            value = self.pop()
            self.write(convert_character(value, loc=self.location()))
        elif op == "#":  # Skip next cell!
            self.mode = Mode.BRIDGE
        elif op == "g":
            y, x = self.pop(), self.pop()
            self.push(ord(self.playfield.read_at(Position(x, y))))
        elif op == "p":
            y, x, value = self.pop(), self.pop(), self.pop()
            char = convert_character(value, loc=self.location())
            self.playfield.write_at(Position(x, y), char)
        elif op == "&":  # ask number as input
            text = self.read_line().strip()
            if not integer_pattern.fullmatch(text):
                self.error(
                    ParseError, '{!r} is not a valid integer!'.format(text))
            self.push(int(text))
        elif op == "~":  # ask character as input
            text = self.read_line()
            if len(text) != 1:
                self.error(
                    ParseError, '{!r} is not a single character!'.format(
                        text))
            self.push(ord(text))
        elif op == "@":  # end program
            self.running = False
        elif op == " ":  # no-op
            pass
        else:
            self.error(DecodeError, '{!r} is not a valid command!'.format(op))

    def push(self, value):
        self.stack.append(value)

    def pop(self):
        if self.stack:
            return self.stack.pop()
        else:
            return 0

    def write(self, text):
        self.output.write(text)
        self.output.flush()

    def read_line(self):
        """ Read a line of input, without its line ending """
        line = self.input.readline()
        if not line:
            self.error(ParseError, 'Unexpected end of input!')
        return line.rstrip('\r\n')

    def location(self):
        return self.playfield.location()

    def error(self, cls, msg):
        """ Abort execution with an error at the current cell """
        raise cls(msg, loc=self.location())
