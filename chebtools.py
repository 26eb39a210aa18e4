import logging
import warnings
from collections import namedtuple

import numpy as np
from numpy import max, abs, where
import numpy.polynomial.chebyshev as npcheb

from scipy.fftpack import dct

logger = logging.getLogger(__name__)

#A simple convergence warning
class ConvergenceWarning(Warning): pass
class DomainWarning(Warning): pass

class InvalidArgument(ValueError): pass
class UnsupportedOperation(TypeError): pass

EPS = np.finfo(float).eps
MAXPOW = 15
DEFAULT_TOL = 3.*EPS
DELTA_TOL = 1e-9
PROXIMITY_TOL = 1e-11

def chebpts(N):
    """ Chebyshev points of the second kind, in ascending order """
    if N == 1:
        return np.array([0.])
    return npcheb.chebpts2(N)

def vals_to_coeffs(f):
    """ Given the samples of a function on
    a chebyshev grid, return the coefficients.

    Columns of a 2D array are transformed independently. """
    f = np.asarray(f)
    N = f.shape[0]-1
    if N == 0:
        return f.copy()
    if np.iscomplexobj(f):
        return vals_to_coeffs(f.real) + 1j*vals_to_coeffs(f.imag)
    out = dct(f[::-1],type=1,axis=0)/N
    out[0] /= 2.
    out[-1] /= 2.
    return out

def coeffs_to_vals(coeffs):
    """ Given the coefficients, give the
    values of a function """
    coeffs = np.asarray(coeffs)
    if coeffs.shape[0] == 1:
        return coeffs.copy()
    if np.iscomplexobj(coeffs):
        return coeffs_to_vals(coeffs.real) + 1j*coeffs_to_vals(coeffs.imag)
    foo = coeffs.copy()
    foo[0] *= 2
    foo[-1] *= 2
    vals = dct(foo,type=1,axis=0)/2
    return vals[::-1]

def ccweights(N):
    """ Clenshaw-Curtis weights on the N point chebyshev grid of [-1,1] """
    if N == 1:
        return np.array([2.])
    n = N-1
    theta = np.pi*np.arange(N)/n
    w = np.ones(N)
    for k in range(1, n//2+1):
        b = 1. if 2*k == n else 2.
        w -= b*np.cos(2*k*theta)/(4.*k*k-1)
    c = np.full(N, 2.)
    c[0] = c[-1] = 1.
    return c*w/n

def gen_mapper(a,b):
    """ Returns a function that mapps from (a,b) to (-1,1) """
    return lambda x: (2.*x - (a+b))/(b-a)

def gen_imapper(a,b):
    """ Returns a function that maps from (-1,1) to (a,b) """
    return lambda x: 0.5*(a+b) + 0.5*(b-a)*x

def trim_arr(arr,scl,rtol=DEFAULT_TOL):
    """ trim an array by rtol, along the first axis """
    big = abs(arr) > scl*rtol
    if big.ndim > 1:
        big = big.any(axis=tuple(range(1, big.ndim)))
    ind, = where(big)
    if len(ind) == 0:
        return arr[:1] * 0
    return arr[:ind[-1]+1].copy()

chebinfo = namedtuple('chebinfo','pts vals coeffs N scl domain func')

def construct(func,a=-1,b=1,rtol=DEFAULT_TOL):
    """ Construct the chebyshev polynomial

        Starts with N=4 points and evaluates the function on a set of
        chebyshev points, determining the chebyshev coefficients

        At that point, check to see if the last two coefficients are small
        compared to the largest

        If not, increment N, if yes, trim as many coefs as possible
    """
    #map to the interval (-1,1)
    imapper = gen_imapper(a,b)
    mapped_func = lambda x: func(imapper(x))
    power = 2
    done = False
    while not done:
        N = 2**power

        pts = chebpts(N)
        vals = np.asarray(mapped_func(pts))
        coeffs = vals_to_coeffs(vals)
        scl = max(abs(coeffs))

        if np.all(abs(coeffs[-2:]) <= scl*rtol):
            done = True

        power += 1
        if power > MAXPOW and not done:
            warnings.warn("we've hit the maximum power",ConvergenceWarning)
            done = True

    coeffs = trim_arr(coeffs, scl, rtol)
    N = len(coeffs)
    logger.debug("constructed on (%g, %g) with %d coefficients", a, b, N)
    vals = coeffs_to_vals(coeffs)
    pts = chebpts(N)
    return chebinfo(pts=pts, vals=vals, coeffs=coeffs,
            scl=scl, domain=(a,b), func=func, N=N)

def interp(vals,xs,pts=None,domain=(-1,1)):
    """ interpolate the function represented by the modal points f, on the points xs

    vals may be 2D, one column per function; the result then has one
    row per point. """
    vals = np.asarray(vals)
    xs = np.atleast_1d(np.asarray(xs, dtype=float))
    N = vals.shape[0]
    if N == 1:
        return np.repeat(vals[:1], xs.size, axis=0)
    if pts is None:
        pts = chebpts(N)
    mapper = gen_mapper(*domain)
    mapxs = mapper(xs)
    weights = np.r_[ 1./2, np.ones(N-2), 1./2 ] * (-1)**np.arange(N)
    diff = mapxs[:,None] - pts[None,:]
    hit = diff == 0
    diff[hit] = 1.
    mid = ( weights / diff )
    top = mid.dot(vals)
    bottom = mid.sum(-1)
    out = top/(bottom if vals.ndim == 1 else bottom[:,None])
    # points that land on the grid take the grid value
    rows, cols = where(hit)
    out[rows] = vals[cols]
    return out
