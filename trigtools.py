"""
Helpers for trigonometric (Fourier) expansions on [-1,1)

Coefficients are stored in ascending wave number order: -(n-1)/2..(n-1)/2
for odd n and -n/2..n/2-1 for even n. For even n the -n/2 coefficient is
a cosine mode, shared equally by the -n/2 and n/2 exponentials.
"""

import numpy as np
from scipy import fft


def trigpts(n):
    """ Equispaced points on [-1,1) """
    return -1. + 2.*np.arange(n)/n

def wave_numbers(n):
    """ Wave numbers of an n-term coefficient vector """
    return np.arange(n) - n//2

def vals_to_coeffs(vals):
    """ Samples on trigpts(n) to coefficients """
    vals = np.asarray(vals)
    n = vals.shape[0]
    coeffs = fft.fftshift(fft.fft(vals, axis=0), axes=0)/n
    sign = (-1.)**wave_numbers(n)
    return coeffs*sign.reshape((n,) + (1,)*(vals.ndim-1))

def coeffs_to_vals(coeffs):
    """ Coefficients to samples on trigpts(n) """
    coeffs = np.asarray(coeffs)
    n = coeffs.shape[0]
    sign = (-1.)**wave_numbers(n)
    coeffs = coeffs*sign.reshape((n,) + (1,)*(coeffs.ndim-1))
    return fft.ifft(fft.ifftshift(coeffs, axes=0), axis=0)*n

def pad_symmetric(coeffs):
    """ Split the cosine mode of an even-length coefficient array, giving
    an odd-length array indexed -n/2..n/2 """
    X = np.array(coeffs, dtype=complex)
    if X.shape[0] % 2:
        return X
    X[0] = 0.5*X[0]
    return np.concatenate([X, X[:1]])

def unpad_symmetric(coeffs):
    """ Fold the last mode back onto the first and drop it """
    X = np.array(coeffs, dtype=complex)
    X[0] = X[0] + X[-1]
    return X[:-1]

def prolong(coeffs, n):
    """ Zero-pad an odd-length symmetric coefficient array to odd length n """
    coeffs = np.asarray(coeffs)
    extra = (n - coeffs.shape[0])//2
    if extra <= 0:
        return coeffs
    pad = [(extra, extra)] + [(0, 0)]*(coeffs.ndim-1)
    return np.pad(coeffs, pad)

def horner(coeffs, x):
    """ Evaluate sum_k c_k exp(i pi k x) at the points x, one column
    of the result per column of coeffs """
    X = pad_symmetric(coeffs)
    n = X.shape[0]
    k = np.arange(n) - (n-1)//2
    x = np.atleast_1d(np.asarray(x, dtype=float))
    return np.exp(1j*np.pi*np.outer(x, k)).dot(X)
