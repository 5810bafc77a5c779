"""
Smith normal form of integer matrices, and its use in solving linear
systems of congruences modulo 1, as needed when searching for the
origin shift between two settings of a space group.
"""
import logging

import numpy as np

from .tolerance import TRANSLATION_DENOMINATOR, Tolerance

LOG = logging.getLogger(__name__)


def _pivot(matrix, t):
    "Index of the smallest non-zero (in magnitude) entry of matrix[t:, t:]"
    sub = matrix[t:, t:]
    nonzero = np.argwhere(sub != 0)
    if len(nonzero) == 0:
        return None
    magnitudes = np.abs(sub[nonzero[:, 0], nonzero[:, 1]])
    i, j = nonzero[np.argmin(magnitudes)]
    return i + t, j + t


def smith_normal_form(matrix):
    """
    Compute the Smith normal form D of an integer matrix M, along with
    the unimodular matrices P and Q such that P M Q = D.

    D is diagonal with non-negative entries, and each diagonal entry
    divides the next.

    >>> P, D, Q = smith_normal_form([[2, 4], [6, 8]])
    >>> D.tolist()
    [[2, 0], [0, 4]]

    Args:
        matrix (array_like): (m, n) integer matrix

    Returns:
        Tuple[np.ndarray, np.ndarray, np.ndarray]: P (m, m), D (m, n) and Q (n, n)
    """
    d = np.array(matrix, dtype=np.int64)
    if d.ndim != 2:
        raise ValueError("Smith normal form requires a 2D matrix")
    m, n = d.shape
    p = np.eye(m, dtype=np.int64)
    q = np.eye(n, dtype=np.int64)

    for t in range(min(m, n)):
        while True:
            pivot = _pivot(d, t)
            if pivot is None:
                return p, d, q
            i, j = pivot
            d[[t, i]] = d[[i, t]]
            p[[t, i]] = p[[i, t]]
            d[:, [t, j]] = d[:, [j, t]]
            q[:, [t, j]] = q[:, [j, t]]

            cleared = True
            for i in range(t + 1, m):
                factor = d[i, t] // d[t, t]
                d[i] -= factor * d[t]
                p[i] -= factor * p[t]
                cleared &= d[i, t] == 0
            for j in range(t + 1, n):
                factor = d[t, j] // d[t, t]
                d[:, j] -= factor * d[:, t]
                q[:, j] -= factor * q[:, t]
                cleared &= d[t, j] == 0
            if not cleared:
                continue

            # the pivot must divide every remaining entry
            remainder = d[t + 1 :, t + 1 :] % d[t, t]
            bad = np.argwhere(remainder != 0)
            if len(bad) == 0:
                break
            i = bad[0][0] + t + 1
            d[t] += d[i]
            p[t] += p[i]

        if d[t, t] < 0:
            d[t] = -d[t]
            p[t] = -p[t]
    return p, d, q


def solve_mod_one(matrix, rhs, tolerance=0.5 / TRANSLATION_DENOMINATOR):
    """
    Find a vector s with `matrix @ s = rhs (mod 1)`, for an integer
    matrix and a real right hand side.

    Using the Smith normal form P M Q = D, the system becomes
    D z = P rhs (mod 1) with s = Q z. Rows of D that are zero only
    admit a solution when the corresponding entry of P rhs is (within
    tolerance) an integer.

    Args:
        matrix (array_like): (m, n) integer matrix
        rhs (array_like): (m,) right hand side
        tolerance (float, optional): allowed deviation of the
            unconstrained entries from integers

    Returns:
        Optional[np.ndarray]: (n,) solution, or None if there is none
    """
    matrix = np.asarray(matrix)
    rhs = np.asarray(rhs, dtype=np.float64)
    if matrix.shape[0] != rhs.shape[0]:
        raise ValueError(
            "Incompatible shapes for system: {} and {}".format(matrix.shape, rhs.shape)
        )
    p, d, q = smith_normal_form(matrix)
    m, n = d.shape
    y = np.dot(p, rhs)
    z = np.zeros(n, dtype=np.float64)
    tol = Tolerance(tolerance)
    for i in range(m):
        diagonal = d[i, i] if i < n else 0
        if diagonal == 0:
            if not tol.is_integer(y[i]):
                LOG.debug("Congruence %d has no solution (residual %.4f)", i, y[i])
                return None
        else:
            z[i] = y[i] / diagonal
    return np.dot(q, z)
