"""
Functions on the sphere in the double Fourier sphere representation

A Spherefun is a sum of rank one terms cols_j(th) * rows_j(lam) / pivot_j,
lam in [-pi,pi] the longitude and th in [-pi,pi] the doubled-up
colatitude. Both factors are Fourier series. The plus terms have only even
wave numbers in lam, the minus terms only odd ones.
"""

import logging

import numpy as np
import scipy.linalg

from chebtools import DEFAULT_TOL, InvalidArgument
from trigtech import Trigtech
import trigtools

logger = logging.getLogger(__name__)

DOMAIN = (-np.pi, np.pi)


class Spherefun(object):
    """ A function on the sphere, see the module docstring """

    def __init__(self, cols, rows, pivot_values=None, idx_plus=None,
                 idx_minus=None, nonzero_poles=False):
        if cols.ncols != rows.ncols:
            raise InvalidArgument("cols and rows must have the same rank")
        rank = cols.ncols
        if pivot_values is None:
            pivot_values = np.ones(rank)
        if idx_plus is None:
            idx_plus = np.arange(rank)
        if idx_minus is None:
            idx_minus = np.arange(0)
        self.cols = cols
        self.rows = rows
        self.pivot_values = np.asarray(pivot_values)
        self.idx_plus = np.asarray(idx_plus, dtype=int)
        self.idx_minus = np.asarray(idx_minus, dtype=int)
        self.nonzero_poles = nonzero_poles
        # values at the two ends of the domain
        ends = np.array(DOMAIN)
        self.cols_pole_values = self._factor(cols, ends)
        self.rows_pole_values = self._factor(rows, ends)

    def __repr__(self):
        return "Spherefun(rank=%d, size=%r, nonzero_poles=%r)" % (
            self.rank, (len(self.cols), len(self.rows)), self.nonzero_poles)

    @property
    def rank(self):
        return self.cols.ncols

    def isempty(self):
        return self.rank == 0

    def _factor(self, tech, x):
        x = np.asarray(x, dtype=float).ravel()
        return np.reshape(tech(x), (x.size, tech.ncols))

    def __call__(self, lam, th):
        lam, th = np.broadcast_arrays(np.asarray(lam, dtype=float),
                                      np.asarray(th, dtype=float))
        if self.isempty():
            return np.zeros(lam.shape)
        C = self._factor(self.cols, th)
        R = self._factor(self.rows, lam)
        vals = (C*R/self.pivot_values).sum(axis=1)
        return vals.real.reshape(lam.shape)

    @classmethod
    def from_function(cls, func, m, n, tol=DEFAULT_TOL):
        """ Sample func(lam, th) on an m by n doubled-up grid and build
        a low rank approximation. m and n must both be even. """
        if m % 2 or n % 2:
            raise InvalidArgument("the grid sizes must be even")
        lam = DOMAIN[1]*trigtools.trigpts(n)
        th = DOMAIN[1]*trigtools.trigpts(m)
        L, T = np.meshgrid(lam, th)
        # the doubled-up sphere: (lam, -th) is the point (lam + pi, th)
        F = np.where(T >= 0, func(L, np.abs(T)), func(L + np.pi, np.abs(T)))
        shifted = np.roll(F, n//2, axis=1)
        plus = 0.5*(F + shifted)
        minus = 0.5*(F - shifted)
        vscale = np.abs(F).max()

        cols, rows = [], []
        nonzero_poles = False
        pole_part = plus.mean(axis=1)
        if np.abs(pole_part[[0, m//2]]).max() > tol*vscale:
            nonzero_poles = True
            cols.append(pole_part)
            rows.append(np.ones(n))
            plus = plus - pole_part[:,None]
        for part in (plus, minus):
            U, S, Vh = np.linalg.svd(part)
            r = np.sum(S > tol*max(m, n)*max(vscale, S[0]))
            cols.extend((U[:, :r]*S[:r]).T)
            rows.extend(Vh[:r])
            if part is plus:
                num_plus = len(cols)
        rank = len(cols)
        logger.debug("sampled %dx%d grid, rank %d (%d plus terms)",
                     m, n, rank, num_plus)
        if rank == 0:
            C, R = np.zeros((m, 0)), np.zeros((n, 0))
        else:
            C, R = np.array(cols).T, np.array(rows).T
        return cls(Trigtech.from_values(C, DOMAIN),
                   Trigtech.from_values(R, DOMAIN),
                   np.ones(rank), np.arange(num_plus),
                   np.arange(num_plus, rank), nonzero_poles)


def _take(tech, idx):
    return Trigtech(tech.coeffs[:, idx], tech.domain, isreal=tech.isreal)

def partition(f):
    """ Split f into its plus (even wave number) and minus (odd wave
    number) terms """
    fp = Spherefun(_take(f.cols, f.idx_plus), _take(f.rows, f.idx_plus),
                   f.pivot_values[f.idx_plus],
                   nonzero_poles=f.nonzero_poles)
    n = f.idx_minus.size
    fm = Spherefun(_take(f.cols, f.idx_minus), _take(f.rows, f.idx_minus),
                   f.pivot_values[f.idx_minus], np.arange(0), np.arange(n))
    return fp, fm

def combine(fp, fm):
    """ Put the terms of a plus part and a minus part back together """
    r = fp.rank
    return Spherefun(_join(fp.cols, fm.cols), _join(fp.rows, fm.rows),
                     np.concatenate([fp.pivot_values, fm.pivot_values]),
                     np.arange(r), np.arange(r, r + fm.rank),
                     fp.nonzero_poles)

def _join(a, b):
    if len(a) == len(b):
        coeffs = np.hstack([a.coeffs, b.coeffs])
    else:
        # line the wave numbers up
        x = trigtools.pad_symmetric(a.coeffs)
        y = trigtools.pad_symmetric(b.coeffs)
        n = max(x.shape[0], y.shape[0])
        coeffs = np.hstack([trigtools.prolong(x, n), trigtools.prolong(y, n)])
    return Trigtech(coeffs, a.domain, isreal=a.isreal and b.isreal)

def _min_norm_correction(A, X):
    """ The smallest correction C, in Frobenius norm, with A (X - C) = 0 """
    if not A.size:
        return np.zeros_like(X)
    C = scipy.linalg.lstsq(A, A.dot(X))[0]
    return C

def project_onto_bmci(f):
    """ Orthogonal projection of f onto BMC-I symmetry

    The result is even in th for every even wave number in lam, odd in th
    for every odd wave number, and zero at the poles for every nonzero
    wave number. The correction to the coefficients has the smallest
    possible Frobenius norm.
    """
    fp, fm = partition(f)
    fp = project_onto_even_bmci(fp)
    fm = project_onto_odd_bmci(fm)
    return combine(fp, fm)

def project_onto_even_bmci(f):
    """ Project the plus terms of a Spherefun: pi-periodic in lam and
    even in th """
    if f.isempty():
        return f

    X = f.cols.coeffs.copy()
    m, n = X.shape
    padded = m % 2 == 0
    if padded:
        X = trigtools.pad_symmetric(X)
        m += 1
    wave_numbers = np.arange(m) - (m-1)//2
    logger.debug("even projection of %d columns of length %d", n, m)

    # even in th: c_k = c_-k
    I = np.eye(m)
    A = (I - np.fliplr(I))[:(m-1)//2]

    modes = np.arange(n)
    if f.nonzero_poles:
        # the first term carries the pole values, only make it even
        X[:, :1] -= _min_norm_correction(A, X[:, :1])
        modes = modes[1:]

    # the other terms also vanish at both poles
    A = np.vstack([np.ones(m), (-1.)**wave_numbers, A])
    if modes.size:
        X[:, modes] -= _min_norm_correction(A, X[:, modes])

    if padded:
        X = trigtools.unpad_symmetric(X)
    cols = Trigtech(X, f.cols.domain).real()

    # only even wave numbers in lam
    Y = f.rows.coeffs.copy()
    Y[trigtools.wave_numbers(Y.shape[0]) % 2 == 1] = 0
    rows = Trigtech(Y, f.rows.domain).real()

    return Spherefun(cols, rows, f.pivot_values, f.idx_plus, f.idx_minus,
                     f.nonzero_poles)

def project_onto_odd_bmci(f):
    """ Project the minus terms of a Spherefun: pi-antiperiodic in lam
    and odd in th """
    if f.isempty():
        return f

    X = f.cols.coeffs.copy()
    m = X.shape[0]
    padded = m % 2 == 0
    if padded:
        X = trigtools.pad_symmetric(X)
        m += 1
    logger.debug("odd projection of %d columns of length %d", X.shape[1], m)

    # odd in th: c_k = -c_-k and c_0 = 0
    mid = (m-1)//2
    I = np.eye(m)
    A = (I + np.fliplr(I))[:mid+1]
    A[mid, mid] = 1

    X -= _min_norm_correction(A, X)

    if padded:
        X = trigtools.unpad_symmetric(X)
    cols = Trigtech(X, f.cols.domain).real()

    # only odd wave numbers in lam
    Y = f.rows.coeffs.copy()
    Y[trigtools.wave_numbers(Y.shape[0]) % 2 == 0] = 0
    rows = Trigtech(Y, f.rows.domain).real()

    return Spherefun(cols, rows, f.pivot_values, f.idx_plus, f.idx_minus,
                     f.nonzero_poles)
