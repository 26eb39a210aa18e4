import numbers
import warnings

import numpy as np

from chebtools import DomainWarning, InvalidArgument, gen_mapper


class Fun(object):
    """ Represents a nonpiecewise function by a coefficient expansion on
    a domain (a,b). Subclasses provide the basis.

    The coefficients are a 2D array with one column per component of an
    array-valued function. Instances are not modified after construction.
    """

    def __init__(self, coeffs, domain=(-1,1), vscale=None):
        coeffs = np.asarray(coeffs)
        if coeffs.ndim == 1:
            coeffs = coeffs[:,None]
        if coeffs.ndim != 2:
            raise InvalidArgument("coefficients should be a vector or a matrix")
        a, b = domain
        if not a < b:
            raise InvalidArgument("not a valid domain: (%r, %r)" % (a, b))
        self.coeffs = coeffs
        self.domain = (float(a), float(b))
        if vscale is None and coeffs.size:
            vscale = np.abs(self.values).max(axis=0)
        self.vscale = vscale

    def __len__(self):
        return self.coeffs.shape[0]

    def __repr__(self):
        return "%s(length=%d, columns=%d, domain=%r)" % (
            type(self).__name__, len(self), self.ncols, self.domain)

    @property
    def ncols(self):
        return self.coeffs.shape[1]

    def isempty(self):
        return self.coeffs.size == 0

    @property
    def points(self):
        """ The grid the values live on, in the domain """
        raise NotImplementedError

    @property
    def values(self):
        raise NotImplementedError

    def _feval(self, t):
        """ Evaluate at points t of the reference interval [-1,1] """
        raise NotImplementedError

    def __call__(self, x):
        x = np.asarray(x, dtype=float)
        a, b = self.domain
        if np.any((x < a) | (x > b)):
            warnings.warn("evaluating outside of the domain (%g, %g)" % (a, b),
                    DomainWarning)
        vals = self._feval(gen_mapper(a, b)(x.ravel()))
        if self.ncols == 1:
            return vals[:,0].reshape(x.shape)
        return vals.reshape(x.shape + (self.ncols,))

    def _like(self, other):
        """ Coerce other into a function of this type on this domain """
        if isinstance(other, numbers.Number) or (
                isinstance(other, np.ndarray) and other.size == 1):
            return self.constant(np.asarray(other).item(), self.domain)
        if not isinstance(other, type(self)):
            raise InvalidArgument("cannot pair %s with %s" %
                    (type(self).__name__, type(other).__name__))
        if not np.allclose(self.domain, other.domain):
            raise InvalidArgument("domains do not match: %r and %r" %
                    (self.domain, other.domain))
        return other

    def inner(self, other):
        """ The inner product integral of conj(self)*other over the domain.

        Gives the matrix self' * other for array-valued functions and a
        scalar when both are scalar valued. """
        other = self._like(other)
        out = self._inner(other)
        if out.shape == (1,1):
            return out[0,0]
        return out

    def _inner(self, other):
        raise NotImplementedError

    @classmethod
    def constant(cls, c, domain=(-1,1)):
        return cls(np.atleast_1d(c), domain)
