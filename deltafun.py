"""
Distributions: a smooth function plus point masses (delta functions and
their derivatives), and their inner product with smooth functions.
"""

import logging
import numbers

import numpy as np

from chebtech import Chebtech
from chebtools import (DELTA_TOL, PROXIMITY_TOL, InvalidArgument,
        UnsupportedOperation)
from fun import Fun

logger = logging.getLogger(__name__)


class DeltaFun(object):
    """ A smooth function plus point masses

    impulses[i, j] is the weight of the i-th derivative of the delta
    function at location[j]. A 1D impulses array gives plain deltas.
    """

    def __init__(self, funpart, impulses=None, location=None):
        if impulses is None:
            impulses = np.zeros((1, 0))
        if location is None:
            location = np.zeros(0)
        impulses = np.asarray(impulses)
        if impulses.ndim == 1:
            impulses = impulses[None,:]
        location = np.atleast_1d(np.asarray(location, dtype=float))
        if impulses.ndim != 2 or impulses.shape[1] != location.size:
            raise InvalidArgument("impulses need one column per location")
        a, b = funpart.domain
        if np.any((location < a) | (location > b)):
            raise InvalidArgument("delta functions must lie in the domain")
        self.funpart = funpart
        self.impulses = impulses
        self.location = location

    def __repr__(self):
        return "DeltaFun(%r, location=%r)" % (self.funpart, self.location)

    @property
    def domain(self):
        return self.funpart.domain

    def isempty(self):
        return self.funpart.isempty()

    def any_delta(self, tol=DELTA_TOL):
        """ Whether any point mass is not negligible """
        return bool(self.impulses.size) and np.abs(self.impulses).max() > tol

    def simplify(self, tol=DELTA_TOL, proximity=PROXIMITY_TOL):
        """ Merge coincident deltas and drop negligible ones """
        order = np.argsort(self.location, kind='stable')
        location = self.location[order]
        impulses = self.impulses[:, order]

        # merge locations that are closer than proximity
        loc, cols = [], []
        for x, col in zip(location, impulses.T):
            if loc and abs(x - loc[-1]) < proximity:
                cols[-1] = cols[-1] + col
            else:
                loc.append(x)
                cols.append(col)
        location = np.array(loc)
        impulses = np.array(cols).T.reshape(self.impulses.shape[0], len(loc))

        # negligible columns, then negligible trailing rows
        keep = np.abs(impulses).max(axis=0) > tol if loc else np.zeros(0, bool)
        location = location[keep]
        impulses = impulses[:, keep]
        rows, = np.where(np.any(np.abs(impulses) > tol, axis=1))
        m = rows[-1]+1 if rows.size else 1
        impulses = impulses[:m]

        funpart = self.funpart
        if isinstance(funpart, Chebtech):
            funpart = funpart.simplify()
        return DeltaFun(funpart, impulses, location)

    def __call__(self, x):
        x = np.asarray(x, dtype=float)
        vals = self.funpart(x)
        vals = np.array(vals, dtype=np.result_type(vals, float))
        for x0, weight in zip(self.location, self.impulses[0]):
            if abs(weight) > DELTA_TOL:
                vals[x == x0] = np.copysign(np.inf, weight)
        return vals

    def deriv(self):
        """ The derivative: the smooth part is differentiated and every
        point mass moves up one derivative order """
        impulses = np.vstack([np.zeros((1, self.location.size)),
                              self.impulses])
        return DeltaFun(self.funpart.deriv(), impulses, self.location)


def _isempty(f):
    if f is None:
        return True
    if isinstance(f, (DeltaFun, Fun)):
        return f.isempty()
    return np.size(f) == 0

def _isnumeric(g):
    return isinstance(g, (numbers.Number, np.ndarray, np.generic))

def _operands(f, g):
    """ Order the operands so that the first one is a DeltaFun, carrying
    the point masses if either operand does, and the second one is the
    smooth Fun it is paired with, on the same domain. """
    if isinstance(f, Fun):
        f = DeltaFun(f)
    if isinstance(g, Fun):
        g = DeltaFun(g)
    if not isinstance(f, DeltaFun) and not isinstance(g, DeltaFun):
        raise InvalidArgument("unsupported operand types: %s and %s" %
                (type(f).__name__, type(g).__name__))

    if isinstance(g, DeltaFun) and (g.any_delta() or
                                    not isinstance(f, DeltaFun)):
        F, g = g, f
    else:
        F = f

    if isinstance(g, DeltaFun):
        g = g.funpart
    elif _isnumeric(g):
        if np.size(g) > 1:
            raise InvalidArgument("if g is numeric, it should be a scalar")
        g = type(F.funpart).constant(np.asarray(g).item(), F.domain)
    else:
        raise InvalidArgument("unsupported operand type: %s" %
                type(g).__name__)
    if not np.allclose(g.domain, F.domain):
        raise InvalidArgument("domains do not match: %r and %r" %
                (F.domain, g.domain))
    return F, g

def inner_product(f, g):
    """ The inner product of a distribution with a smooth function

    Either operand may be a DeltaFun, a Chebtech, a Trigtech or a scalar;
    at most one of them may carry point masses. Returns None when either
    is empty.
    """
    if _isempty(f) or _isempty(g):
        return None

    if isinstance(f, DeltaFun) and isinstance(g, DeltaFun):
        if not f.any_delta() and not g.any_delta():
            return f.funpart.inner(g.funpart)
        if f.any_delta() and g.any_delta():
            raise UnsupportedOperation(
                "at most one operand may be a non-trivial distribution")

    F, g = _operands(f, g)

    if not F.any_delta():
        return F.funpart.inner(g)

    # TODO: add the smooth part F.funpart' * g once conjugating a
    # distribution is defined; until then it contributes nothing.
    smooth_ip = 0.

    F = F.simplify()
    location = F.location
    impulses = F.impulses
    m = impulses.shape[0]
    logger.debug("pairing %d deltas of order up to %d", location.size, m-1)

    # G[k, j] is the k-th derivative of g at location j
    G = [g(location)]
    for k in range(1, m):
        g = g.deriv()
        G.append(g(location))
    G = np.array(G)

    v = (-1.)**np.arange(m)
    delta_ip = 0.
    for k in range(location.size):
        delta_ip += (v*impulses[:, k]).dot(G[:, k])

    return delta_ip + smooth_ip
