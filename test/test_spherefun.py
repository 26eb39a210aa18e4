"""
Test the BMC-I symmetry projection of spherefuns

"""

import sys, os

sys.path.insert(0,os.path.abspath(os.path.join(os.path.dirname(__file__),'..')))

import numpy as np
import pytest
import scipy.linalg

from pychebops import (InvalidArgument, Spherefun, Trigtech, combine,
        partition, project_onto_bmci)
from spherefun import DOMAIN, project_onto_even_bmci, project_onto_odd_bmci
import trigtools

rng = np.random.default_rng(7)

def func(lam, th):
    x = np.sin(th)*np.cos(lam)
    y = np.sin(th)*np.sin(lam)
    z = np.cos(th)
    return np.exp(z) + x*y + x

def random_points(n=200):
    return rng.uniform(-np.pi, np.pi, n), rng.uniform(0, np.pi, n)

def random_spherefun(m, n, num_plus, num_minus, nonzero_poles=True):
    """ Real factors with no symmetry at all """
    rank = num_plus + num_minus
    cols = Trigtech.from_values(rng.standard_normal((m, rank)), DOMAIN)
    rows = Trigtech.from_values(rng.standard_normal((n, rank)), DOMAIN)
    return Spherefun(cols, rows, rng.uniform(1, 2, rank), np.arange(num_plus),
                     np.arange(num_plus, rank), nonzero_poles)

def test_from_function():
    f = Spherefun.from_function(func, 32, 32)
    assert f.nonzero_poles
    assert f.idx_plus.size and f.idx_minus.size
    lam, th = random_points()
    np.testing.assert_allclose(f(lam, th), func(lam, th), atol=1e-10)

def test_from_function_odd_grid():
    with pytest.raises(InvalidArgument):
        Spherefun.from_function(func, 31, 32)
    with pytest.raises(InvalidArgument):
        Spherefun.from_function(func, 32, 31)

def test_zero_at_poles():
    f = Spherefun.from_function(lambda lam, th: np.sin(th)*np.cos(lam), 16, 16)
    assert not f.nonzero_poles
    assert f.idx_plus.size == 0

def test_partition_combine():
    f = Spherefun.from_function(func, 16, 16)
    fp, fm = partition(f)
    assert fp.rank + fm.rank == f.rank
    assert fp.nonzero_poles and not fm.nonzero_poles
    g = combine(fp, fm)
    lam, th = random_points()
    np.testing.assert_allclose(g(lam, th), f(lam, th), atol=1e-13)

def test_projection_keeps_symmetric_function():
    """ A function with BMC-I symmetry is (nearly) unchanged """
    f = Spherefun.from_function(func, 32, 32)
    g = project_onto_bmci(f)
    lam, th = random_points()
    np.testing.assert_allclose(g(lam, th), f(lam, th), atol=1e-10)

    # single valued at the poles
    north = g(lam, np.zeros(lam.size))
    south = g(lam, np.full(lam.size, np.pi))
    np.testing.assert_allclose(north, np.e, atol=1e-12)
    np.testing.assert_allclose(south, 1/np.e, atol=1e-12)

@pytest.mark.parametrize("m,n", [(9, 8), (10, 8), (10, 11), (9, 9)])
def test_idempotent(m, n):
    f = random_spherefun(m, n, 3, 2)
    g = project_onto_bmci(f)
    h = project_onto_bmci(g)
    np.testing.assert_allclose(h.cols.coeffs, g.cols.coeffs, atol=1e-12)
    np.testing.assert_allclose(h.rows.coeffs, g.rows.coeffs, atol=1e-12)
    lam, th = random_points()
    np.testing.assert_allclose(h(lam, th), g(lam, th), atol=1e-12)

@pytest.mark.parametrize("m,n", [(9, 8), (10, 8), (10, 11)])
def test_symmetry(m, n):
    """ Even and odd in th, zero at the poles, one parity in lam """
    g = project_onto_bmci(random_spherefun(m, n, 3, 2))
    th = rng.uniform(0, np.pi, 50)
    C = g.cols(th)
    Cflip = g.cols(-th)
    plus, minus = g.idx_plus, g.idx_minus
    np.testing.assert_allclose(Cflip[:, plus], C[:, plus], atol=1e-12)
    np.testing.assert_allclose(Cflip[:, minus], -C[:, minus], atol=1e-12)

    # the first plus term carries the pole values, the others vanish there
    poles = g.cols(np.array([0., np.pi, -np.pi]))
    np.testing.assert_allclose(poles[:, plus[1:]], 0., atol=1e-12)
    np.testing.assert_allclose(poles[:, minus], 0., atol=1e-12)
    np.testing.assert_allclose(g.cols_pole_values, poles[[2, 1]], atol=1e-13)

    k = trigtools.wave_numbers(n)
    R = g.rows.coeffs
    np.testing.assert_allclose(R[k % 2 == 1][:, plus], 0., atol=1e-13)
    np.testing.assert_allclose(R[k % 2 == 0][:, minus], 0., atol=1e-13)


def test_minimum_norm_even():
    """ Compare with the projection onto the null space of the constraints """
    m = 9
    f = random_spherefun(m, 8, 3, 0, nonzero_poles=False)
    X = f.cols.coeffs
    k = np.arange(m) - (m-1)//2
    I = np.eye(m)
    A = np.vstack([np.ones(m), (-1.)**k, (I - np.fliplr(I))[:(m-1)//2]])
    N = scipy.linalg.null_space(A)
    expected = N.dot(N.T.dot(X))
    g = project_onto_bmci(f)
    np.testing.assert_allclose(g.cols.coeffs, expected, atol=1e-12)
    # any other correction that satisfies the constraints is larger
    other = expected + N[:, :1].dot(np.ones((1, 3)))
    assert (np.linalg.norm(X - g.cols.coeffs) < np.linalg.norm(X - other))

def test_minimum_norm_pole_term():
    """ The pole term only has to be even """
    m = 9
    f = random_spherefun(m, 8, 2, 0, nonzero_poles=True)
    X = f.cols.coeffs
    I = np.eye(m)
    N = scipy.linalg.null_space((I - np.fliplr(I))[:(m-1)//2])
    g = project_onto_bmci(f)
    np.testing.assert_allclose(g.cols.coeffs[:, 0], N.dot(N.T.dot(X[:, 0])),
            atol=1e-12)

def test_minimum_norm_odd():
    m = 9
    f = random_spherefun(m, 8, 0, 3)
    X = f.cols.coeffs
    I = np.eye(m)
    A = (I + np.fliplr(I))[:(m-1)//2+1]
    A[(m-1)//2, (m-1)//2] = 1
    N = scipy.linalg.null_space(A)
    g = project_onto_bmci(f)
    np.testing.assert_allclose(g.cols.coeffs, N.dot(N.T.dot(X)), atol=1e-12)

def test_empty():
    e = Spherefun(Trigtech(np.zeros((9,0)), DOMAIN), Trigtech(np.zeros((8,0)), DOMAIN))
    assert e.isempty()
    assert project_onto_even_bmci(e) is e
    assert project_onto_odd_bmci(e) is e
    assert project_onto_bmci(e).isempty()
