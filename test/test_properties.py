""" Property based tests using hypothesis.

Usage:

.. code::

    $ python -m pytest -v test_properties.py

"""

import io

import hypothesis
from hypothesis import strategies as st
from pytest import raises

from bef93 import Interpreter
from bef93.common import DivisionError
from bef93.playfield import Playfield, Direction

line_text = st.text(
    alphabet=st.characters(exclude_characters='\r\n'), max_size=20)
sources = st.lists(line_text, min_size=1, max_size=10).map('\n'.join)


@hypothesis.given(sources)
def test_rows_are_padded(source):
    playfield = Playfield(source)
    lines = source.split('\n')
    if lines[-1] == '':
        lines.pop()
    width = max((len(line) for line in lines), default=0)
    assert playfield.width == width
    assert playfield.height == len(lines)
    for line, row in zip(lines, playfield.rows):
        assert len(row) == width
        assert row == line + ' ' * (width - len(line))


@hypothesis.given(
    st.integers(min_value=1, max_value=20),
    st.integers(min_value=1, max_value=20),
    st.data())
def test_wrap_around(width, height, data):
    source = '\n'.join(['.' * width] * height)
    x = data.draw(st.integers(min_value=0, max_value=width - 1))
    y = data.draw(st.integers(min_value=0, max_value=height - 1))
    direction = data.draw(st.sampled_from(list(Direction)))
    playfield = Playfield(source, position=(x, y), direction=direction)
    playfield.advance()
    new_x, new_y = playfield.position
    assert 0 <= new_x < width and 0 <= new_y < height
    assert new_x == (x + direction.dx) % width
    assert new_y == (y + direction.dy) % height

    # A full lap ends where it started:
    lap = width if direction.dx else height
    for _ in range(lap - 1):
        playfield.advance()
    assert playfield.position == (x, y)


@hypothesis.given(
    st.lists(st.integers(), max_size=5),
    st.integers(min_value=0, max_value=20))
def test_pop_beyond_empty_stack_yields_zero(values, extra):
    m = Interpreter('@', output=io.StringIO(), input=io.StringIO())
    for value in values:
        m.push(value)
    popped = [m.pop() for _ in range(len(values) + extra)]
    assert popped == list(reversed(values)) + [0] * extra


@hypothesis.given(st.integers(), st.sampled_from('/%'))
def test_zero_divisor_always_fails(dividend, op):
    m = Interpreter('@', output=io.StringIO(), input=io.StringIO())
    m.push(dividend)
    m.push(0)
    with raises(DivisionError):
        m.dispatch(op)


@hypothesis.given(
    st.integers(min_value=-10 ** 6, max_value=10 ** 6),
    st.integers(min_value=-1000, max_value=1000).filter(lambda a: a != 0))
def test_division_identity(b, a):
    m = Interpreter('@', output=io.StringIO(), input=io.StringIO())
    m.push(b)
    m.push(a)
    m.dispatch('/')
    m.push(b)
    m.push(a)
    m.dispatch('%')
    remainder = m.pop()
    quotient = m.pop()
    assert quotient * a + remainder == b
    assert abs(remainder) < abs(a)
    assert remainder == 0 or (remainder < 0) == (b < 0)
