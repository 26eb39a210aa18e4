"""
Test restricting chebtechs to subintervals

"""

import sys, os

sys.path.insert(0,os.path.abspath(os.path.join(os.path.dirname(__file__),'..')))

import numpy as np
import pytest

from pychebops import Chebtech, InvalidArgument, restrict
from chebtools import chebpts

def smooth(x):
    return np.exp(x)*np.sin(5*x)

def test_whole_interval():
    """ Restricting to [-1,1] does nothing """
    f = Chebtech.from_function(smooth)
    assert restrict(f, [-1, 1]) is f
    assert f.restrict([-1., 1.]) is f

def test_two_pieces():
    """ The pieces agree with f on their subintervals """
    f = Chebtech.from_function(smooth)
    pieces = restrict(f, [-1, 0.2, 1])
    assert len(pieces) == 2
    assert pieces[0].domain == (-1., 0.2)
    assert pieces[1].domain == (0.2, 1.)
    for piece in pieces:
        xs = np.linspace(piece.domain[0], piece.domain[1], 200)
        np.testing.assert_allclose(piece(xs), f(xs), atol=1e-12)

def test_single_subinterval():
    f = Chebtech.from_function(smooth)
    piece, = restrict(f, [-0.5, 0.5])
    xs = np.linspace(-0.5, 0.5, 50)
    np.testing.assert_allclose(piece(xs), smooth(xs), atol=1e-12)

def test_length_is_kept():
    """ The output is not simplified """
    f = Chebtech.from_function(smooth)
    pieces = restrict(f, [-1, -0.9, 0, 1])
    assert [len(p) for p in pieces] == [len(f)]*3

def test_vscale():
    f = Chebtech.from_function(smooth)
    pieces = restrict(f, [-1, 0, 1])
    for piece in pieces:
        np.testing.assert_allclose(piece.vscale, np.abs(piece.values).max(axis=0))

def test_array_valued():
    """ Every piece keeps all the columns, in order """
    x = chebpts(33)
    f = Chebtech.from_values(np.column_stack([np.sin(x), np.cos(3*x)]))
    s = [-1, -0.5, 0, 1]
    pieces = restrict(f, s)
    assert len(pieces) == 3
    for k, piece in enumerate(pieces):
        assert piece.ncols == 2
        assert piece.domain == (s[k], s[k+1])
        xs = np.linspace(s[k], s[k+1], 40)
        np.testing.assert_allclose(piece(xs), f(xs), atol=1e-12)

def test_other_domain():
    """ Breakpoints are in the reference variable of f """
    f = Chebtech.from_function(np.cos, (0, 4))
    left, right = restrict(f, [-1, 0, 1])
    assert left.domain == (0., 2.)
    assert right.domain == (2., 4.)
    xs = np.linspace(2, 4, 30)
    np.testing.assert_allclose(right(xs), np.cos(xs), atol=1e-12)

@pytest.mark.parametrize("s", [[-2, 0], [0, 1.5], [0.5, 0.2], [-1, 0, 0, 1], [0]])
def test_bad_intervals(s):
    f = Chebtech.from_function(smooth)
    with pytest.raises(InvalidArgument):
        restrict(f, s)

def test_empty():
    f = Chebtech(np.zeros((0,1)))
    assert restrict(f, [-1, 0, 1]) is f
