"""
Tolerant floating point comparisons shared by the lattice reduction
and symmetry search routines, together with the default precisions.
"""
import logging

import numpy as np

LOG = logging.getLogger(__name__)

#: Default tolerance for lattice and position comparisons
SYMMETRY_PRECISION = 1e-5
#: Iteration cap for the Niggli and Delaunay reductions
MAX_REDUCTION_ITERATIONS = 10000
#: Catalog translations are multiples of 1/TRANSLATION_DENOMINATOR
TRANSLATION_DENOMINATOR = 12
#: Slack used when testing points against asymmetric unit boundaries
ASYMMETRIC_UNIT_PRECISION = 1e-8
#: Tolerance for fractional coordinates that should be exact rationals
FRACTIONAL_PRECISION = 1e-6


class Tolerance:
    """
    Comparator for floating point quantities with an absolute
    tolerance `eps`, i.e. two values closer than `eps` compare
    as equal.

    Attributes:
        eps (float): the absolute tolerance
    """

    def __init__(self, eps=SYMMETRY_PRECISION):
        if eps <= 0:
            raise ValueError("Tolerance must be positive, got {}".format(eps))
        self.eps = eps

    def smaller(self, x, y) -> bool:
        "x < y, beyond tolerance"
        return x < y - self.eps

    def larger(self, x, y) -> bool:
        "x > y, beyond tolerance"
        return self.smaller(y, x)

    def smaller_equal(self, x, y) -> bool:
        "x <= y, within tolerance"
        return not (y < x - self.eps)

    def larger_equal(self, x, y) -> bool:
        "x >= y, within tolerance"
        return not (x < y - self.eps)

    def equal(self, x, y) -> bool:
        "x == y, within tolerance"
        return not (self.smaller(x, y) or self.smaller(y, x))

    def is_zero(self, x) -> bool:
        "every entry of x is zero, within tolerance"
        return bool(np.all(np.abs(x) <= self.eps))

    def is_integer(self, x) -> bool:
        "every entry of x is an integer, within tolerance"
        return self.is_zero(np.asarray(x) - np.rint(x))

    def snap(self, x):
        """
        Round the entries of x lying within tolerance of an integer
        onto that integer, leaving the others unchanged.

        Args:
            x (array_like): values of any shape

        Returns:
            np.ndarray: the snapped values
        """
        x = np.asarray(x, dtype=np.float64)
        nearest = np.rint(x)
        return np.where(np.abs(x - nearest) <= self.eps, nearest, x)

    def __repr__(self):
        return "<{}: {:g}>".format(self.__class__.__name__, self.eps)
