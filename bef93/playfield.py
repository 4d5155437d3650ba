""" The befunge playfield.

The playfield is the rectangular grid of characters that makes up a
program, together with the instruction pointer walking over it. The
pointer wraps around the edges, so the grid behaves like a torus.
"""

import enum
import logging
from collections import namedtuple
from .common import BoundsError
from .location import SourceLocation


Position = namedtuple('Position', ['x', 'y'])


def split_lines(source):
    """ Split source into lines on newlines only.

    A trailing newline does not start an extra line.
    """
    lines = source.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


class Direction(enum.Enum):
    """ Direction of travel of the instruction pointer """
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]


class Playfield:
    """ Grid of characters plus the instruction pointer.

    Every row is padded with spaces to the width of the longest line.
    The grid never changes size, but cells can be overwritten.
    """
    logger = logging.getLogger('befunge')

    def __init__(
            self, source, position=None, direction=Direction.RIGHT,
            filename=None):
        self.source = source
        self.filename = filename
        lines = split_lines(source)
        self.width = max((len(line) for line in lines), default=0)
        self.height = len(lines)
        self.grid = [list(line.ljust(self.width)) for line in lines]
        self.logger.debug(
            'Loaded playfield of %s x %s', self.width, self.height)

        if position is None:
            position = Position(0, 0)
        else:
            position = Position(*position)
            self.check_bounds(position)
        self.position = position
        self.direction = direction or Direction.RIGHT

    @property
    def rows(self):
        """ The padded rows of the grid as strings """
        return [''.join(row) for row in self.grid]

    def is_empty(self):
        return self.width == 0

    def in_bounds(self, position):
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def check_bounds(self, position, loc=None):
        if not self.in_bounds(position):
            raise BoundsError(
                'Location ({}, {}) is out of bounds!'.format(*position),
                loc=loc)

    def check_size(self, max_width=80, max_height=25):
        """ Verify the program fits the classic befunge-93 playfield """
        if self.width > max_width or self.height > max_height:
            raise BoundsError(
                'Befunge-93 programs must be within {}x{} characters, '
                'this one is {}x{}!'.format(
                    max_width, max_height, self.width, self.height))

    def current_character(self):
        """ Get the character under the instruction pointer """
        if self.is_empty():
            return ' '
        x, y = self.position
        return self.grid[y][x]

    def read_at(self, position):
        """ Get character at position """
        self.check_bounds(position, loc=self.location())
        x, y = position
        return self.grid[y][x]

    def write_at(self, position, char):
        """ Enable self modifying code! """
        self.check_bounds(position, loc=self.location())
        x, y = position
        self.grid[y][x] = char

    def advance(self):
        """ Move the pointer a single cell, wrapping around the edges """
        if self.is_empty():
            return
        x, y = self.position
        self.position = Position(
            (x + self.direction.dx) % self.width,
            (y + self.direction.dy) % self.height)

    def location(self):
        """ Source location of the instruction pointer """
        x, y = self.position
        return SourceLocation(
            self.filename, y + 1, x + 1, 1, source=self.source)
