import logging

import numpy as np
import numpy.polynomial.chebyshev as npcheb

from chebtools import (DEFAULT_TOL, InvalidArgument, ccweights, chebpts,
        coeffs_to_vals, construct, gen_imapper, interp, trim_arr,
        vals_to_coeffs)
from fun import Fun

logger = logging.getLogger(__name__)


class Chebtech(Fun):
    """ A function represented by a Chebyshev series on (a,b) """

    @classmethod
    def from_values(cls, values, domain=(-1,1)):
        """ Build from samples on the chebyshev grid of domain """
        values = np.asarray(values)
        return cls(vals_to_coeffs(values), domain)

    @classmethod
    def from_function(cls, func, domain=(-1,1), rtol=DEFAULT_TOL):
        """ Adaptively build from a vectorized callable """
        info = construct(func, domain[0], domain[1], rtol=rtol)
        return cls(info.coeffs, info.domain)

    @property
    def points(self):
        return gen_imapper(*self.domain)(chebpts(len(self)))

    @property
    def values(self):
        return coeffs_to_vals(self.coeffs)

    def _feval(self, t):
        return interp(self.values, t)

    def deriv(self):
        """ The derivative, as a new Chebtech """
        a, b = self.domain
        if len(self) == 1:
            return Chebtech(np.zeros_like(self.coeffs), self.domain)
        coeffs = npcheb.chebder(self.coeffs, axis=0)*2./(b-a)
        return Chebtech(coeffs, self.domain)

    def _inner(self, other):
        a, b = self.domain
        N = len(self) + len(other)
        f = np.zeros((N, self.ncols), dtype=self.coeffs.dtype)
        f[:len(self)] = self.coeffs
        g = np.zeros((N, other.ncols), dtype=other.coeffs.dtype)
        g[:len(other)] = other.coeffs
        w = ccweights(N)*0.5*(b-a)
        return coeffs_to_vals(f).conj().T.dot(w[:,None]*coeffs_to_vals(g))

    def simplify(self, rtol=DEFAULT_TOL):
        """ Drop the trailing coefficients that are negligible """
        if self.isempty():
            return self
        scl = np.max(self.vscale)
        return Chebtech(trim_arr(self.coeffs, scl, rtol), self.domain)

    def restrict(self, s):
        return restrict(self, s)


def restrict(f, s):
    """ Restrict a Chebtech to subintervals of [-1,1]

    s holds breakpoints in the reference variable of f. The result is a
    list with one Chebtech per subinterval, a one-element list for two
    breakpoints [s0, s1], each keeping all the columns of an
    array-valued f. The pieces live on the matching
    part of the domain of f and keep the length of f: the output is
    not simplified.
    """
    if f.isempty():
        return f

    s = np.asarray(s, dtype=float).ravel()
    if s.size < 2 or s[0] < -1 or s[-1] > 1 or np.any(np.diff(s) <= 0):
        raise InvalidArgument("Not a valid interval.")
    elif s.size == 2 and s[0] == -1 and s[1] == 1:
        return f

    n, m = f.coeffs.shape
    num_ints = s.size - 1
    logger.debug("restricting %r to %d subintervals", f, num_ints)

    # new grid, one column per subinterval
    x = chebpts(n)
    y = 0.5*np.outer(1 - x, s[:-1]) + 0.5*np.outer(1 + x, s[1:])
    old = f.values
    values = np.hstack([interp(old[:,j], y.ravel()).reshape(n, num_ints)
                        for j in range(m)])

    # the columns come grouped by column of f, regroup them by subinterval:
    # [a1 b1 c1 a2 b2 c2] -> [a1 a2 b1 b2 c1 c2]
    if m > 1:
        index = np.arange(m*num_ints).reshape(m, num_ints).T.ravel()
        values = values[:, index]

    coeffs = vals_to_coeffs(values)
    vscale = np.abs(values).max(axis=0)

    imapper = gen_imapper(*f.domain)
    ends = imapper(s)
    return [Chebtech(coeffs[:, k*m:(k+1)*m], (ends[k], ends[k+1]),
                     vscale=vscale[k*m:(k+1)*m])
            for k in range(num_ints)]
