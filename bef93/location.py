""" Locations inside a befunge program, used to point at failing cells. """

import os


class SourceLocation:
    """A location that refers to a cell of a befunge program.

    Rows and columns are counted from 1, like an editor does.
    """

    __slots__ = ["filename", "row", "col", "length", "source"]

    def __init__(self, filename, row, col, ln, source=None):
        self.filename = filename
        self.row = row
        self.col = col
        self.length = ln
        self.source = source

    def __repr__(self):
        return f"({self.filename}, {self.row}, {self.col}, {self.length})"

    def get_source_line(self):
        """Return the source line indicated by this location"""
        lines = self.get_lines()
        if lines and 1 <= self.row <= len(lines):
            return lines[self.row - 1]
        else:
            return "Could not load source"

    def get_lines(self):
        if self.source is None and self.filename:
            if os.path.exists(self.filename):
                with open(self.filename, "r", encoding="latin-1") as f:
                    self.source = f.read()

        if self.source is None:
            return []
        return [line.rstrip("\r") for line in self.source.split("\n")]

    def print_message(self, message: str, file=None):
        """Print a message at this location in the program source"""
        if self.filename:
            print('File : "{}"'.format(self.filename), file=file)

        print_message(
            self.get_lines(), self.row, self.col, self.length, message,
            file=file,
        )


def print_message(
    lines, row: int, col: int, length: int, message: str, file=None
):
    """Render a message nicely embedded in surrounding source"""
    prerow = max(row - 2, 1)
    afterrow = min(row + 3, len(lines))

    for r in range(prerow, afterrow + 1):
        txt = lines[r - 1]
        print("{:5} :{}".format(r, txt), file=file)

        # Mark the cell below the row containing it:
        if r == row:
            base_txt = "      :"
            if length < 1:
                length = 1
            marker = "^" * length
            indent1_txt = base_txt + " " * (col - 1)
            indent2_txt = indent1_txt + " " * (length // 2)
            print(f"{indent1_txt}{marker}", file=file)
            print(f"{indent2_txt}|", file=file)
            print(f"{indent2_txt}+---- {message}", file=file)

    if not lines:
        print(message, file=file)
