"""
pychebops is a python implementation of a few chebfun operators:
inner products of delta functions with smooth functions, the BMC-I
symmetry projection of spherefuns and the restriction of chebtechs to
subintervals
"""

__author__ = "Alex Alemi"
__version__ = "0.3"

from chebtools import (ConvergenceWarning, DomainWarning, InvalidArgument,
        UnsupportedOperation)
from fun import Fun
from chebtech import Chebtech, restrict
from trigtech import Trigtech
from deltafun import DeltaFun, inner_product
from spherefun import Spherefun, combine, partition, project_onto_bmci
