"""
   Error handling routines
   Diagnostic utils
"""

from .location import SourceLocation


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


class BefungeError(Exception):
    """ Base of all errors raised while loading or running a program """
    def __init__(self, msg, loc=None):
        super().__init__(msg)
        self.msg = msg
        self.loc = loc
        if loc:
            assert isinstance(loc, SourceLocation), \
                   '{0} must be SourceLocation'.format(type(loc))

    def __repr__(self):
        return '"{}"'.format(self.msg)

    def print(self, file=None):
        """ Print the error inside some nice context """
        if self.loc:
            self.loc.print_message(self.msg, file=file)
        else:
            print(self.msg, file=file)


class BoundsError(BefungeError):
    """ A position falls outside of the playfield """
    pass


class DivisionError(BefungeError):
    """ Division or modulo by zero """
    pass


class RangeError(BefungeError):
    """ A value cannot be converted into a character """
    pass


class ParseError(BefungeError):
    """ Input text could not be understood """
    pass


class DecodeError(BefungeError):
    """ An unknown instruction was encountered """
    pass
