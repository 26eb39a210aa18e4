import numpy as np

import trigtools
from chebtools import gen_imapper
from fun import Fun


class Trigtech(Fun):
    """ A periodic function represented by a Fourier series on (a,b)

    The coefficients are in ascending wave number order (see trigtools).
    A real Trigtech evaluates to real values.
    """

    def __init__(self, coeffs, domain=(-1,1), vscale=None, isreal=False):
        self.isreal = isreal
        Fun.__init__(self, np.asarray(coeffs, dtype=complex), domain, vscale)

    @classmethod
    def from_values(cls, values, domain=(-1,1)):
        """ Build from samples on the equispaced grid of domain """
        values = np.asarray(values)
        return cls(trigtools.vals_to_coeffs(values), domain,
                   isreal=not np.iscomplexobj(values))

    @classmethod
    def from_function(cls, func, n, domain=(-1,1)):
        """ Sample a vectorized callable on n equispaced points """
        pts = gen_imapper(*domain)(trigtools.trigpts(n))
        return cls.from_values(func(pts), domain)

    @classmethod
    def constant(cls, c, domain=(-1,1)):
        return cls(np.atleast_1d(c), domain, isreal=np.isrealobj(c))

    @property
    def points(self):
        return gen_imapper(*self.domain)(trigtools.trigpts(len(self)))

    @property
    def values(self):
        vals = trigtools.coeffs_to_vals(self.coeffs)
        return vals.real if self.isreal else vals

    @property
    def wave_numbers(self):
        return trigtools.wave_numbers(len(self))

    def _feval(self, t):
        vals = trigtools.horner(self.coeffs, t)
        return vals.real if self.isreal else vals

    def real(self):
        """ The real part, as a new real Trigtech """
        vals = trigtools.coeffs_to_vals(self.coeffs).real
        return Trigtech(trigtools.vals_to_coeffs(vals), self.domain,
                        isreal=True)

    def deriv(self):
        """ The derivative, as a new Trigtech of odd length """
        a, b = self.domain
        X = trigtools.pad_symmetric(self.coeffs)
        n = X.shape[0]
        k = np.arange(n) - (n-1)//2
        X = X*(1j*np.pi*k*2./(b-a))[:,None]
        return Trigtech(X, self.domain, isreal=self.isreal)

    def _inner(self, other):
        a, b = self.domain
        f = trigtools.pad_symmetric(self.coeffs)
        g = trigtools.pad_symmetric(other.coeffs)
        n = max(f.shape[0], g.shape[0])
        f = trigtools.prolong(f, n)
        g = trigtools.prolong(g, n)
        return (b-a)*f.conj().T.dot(g)
