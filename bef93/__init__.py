""" A Befunge-93 interpreter implemented in pure Python.

Example usage:

>>> import io
>>> from bef93 import run_befunge
>>> out = io.StringIO()
>>> _ = run_befunge('"!ih",,,@', output=out)
>>> out.getvalue()
'hi!'

"""

# Define version here. Used in the command line and the setup script:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))

from .common import BefungeError, BoundsError, DivisionError  # noqa: E402
from .common import RangeError, ParseError, DecodeError  # noqa: E402
from .playfield import Playfield, Direction, Position  # noqa: E402
from .interpreter import Interpreter, Mode, run_befunge  # noqa: E402
from .interpreter import convert_character  # noqa: E402

__all__ = [
    'BefungeError', 'BoundsError', 'DivisionError', 'RangeError',
    'ParseError', 'DecodeError', 'Playfield', 'Direction', 'Position',
    'Interpreter', 'Mode', 'run_befunge', 'convert_character',
]
