"""
Niggli reduction of a lattice, following the unified algorithm of
I. Krivy and B. Gruber, Acta Cryst. A32, 297-298 (1976).

The reduction works on the six Niggli parameters

    A = a.a, B = b.b, C = c.c, xi = 2 b.c, eta = 2 a.c, zeta = 2 a.b

and tracks an integer change of basis alongside, so the reduced lattice
is always an exact unimodular transform of the input.
"""
import enum
import logging

import numpy as np

from .tolerance import MAX_REDUCTION_ITERATIONS, SYMMETRY_PRECISION, Tolerance

LOG = logging.getLogger(__name__)


class _NiggliState(enum.Enum):
    SWAP_AXES = 1
    FIX_SIGNS = 2
    BOUNDARY_CORRECT = 3
    DONE = 4


def _columns(*columns):
    return np.array(columns, dtype=int).T


_SWAP_AB = _columns((0, -1, 0), (-1, 0, 0), (0, 0, -1))
_SWAP_BC = _columns((-1, 0, 0), (0, 0, -1), (0, -1, 0))
_ADD_ALL = _columns((1, 0, 0), (0, 1, 0), (1, 1, 1))


def _sign(x):
    return 1 if x > 0 else -1


def niggli_parameters(lattice):
    """
    The Niggli parameters (A, B, C, xi, eta, zeta) of a lattice.

    Args:
        lattice (array_like): (3, 3) row major lattice vectors

    Returns:
        Tuple[float]: A, B, C, xi, eta, zeta
    """
    g = np.dot(lattice, np.transpose(lattice))
    return g[0, 0], g[1, 1], g[2, 2], 2 * g[1, 2], 2 * g[0, 2], 2 * g[0, 1]


def _all_positive(tol, xi, eta, zeta):
    terms = (xi, eta, zeta)
    n_positive = sum(1 for x in terms if tol.smaller(0.0, x))
    n_zero = sum(1 for x in terms if not (tol.smaller(0.0, x) or tol.smaller(x, 0.0)))
    return (n_positive == 3) or (n_zero == 0 and n_positive == 1)


def _check_unimodular(matrix):
    assert abs(round(np.linalg.det(matrix))) == 1, "Change of basis is not unimodular"


def niggli_reduce(lattice, tolerance=SYMMETRY_PRECISION, max_iterations=MAX_REDUCTION_ITERATIONS):
    """
    Compute the Niggli reduced cell of a lattice.

    The reduced lattice is `change_of_basis.T @ lattice`, i.e. the columns
    of the change of basis are the reduced vectors expressed in the
    input basis.

    Args:
        lattice (array_like): (3, 3) row major lattice vectors
        tolerance (float, optional): absolute tolerance used in comparisons
            of the Niggli parameters
        max_iterations (int, optional): the reduction is abandoned after
            this many passes

    Returns:
        Optional[Tuple[np.ndarray, np.ndarray]]: the reduced lattice and the
        integer change of basis, or None if the reduction did not converge
        or the lattice is degenerate.
    """
    lattice = np.asarray(lattice, dtype=np.float64)
    if lattice.shape != (3, 3):
        raise ValueError("Lattice must be a (3, 3) array, got {}".format(lattice.shape))
    if abs(np.linalg.det(lattice)) < tolerance:
        LOG.debug("Degenerate lattice passed to niggli_reduce")
        return None
    tol = Tolerance(tolerance)
    A, B, C, xi, eta, zeta = niggli_parameters(lattice)
    cob = np.eye(3, dtype=int)

    def apply(step):
        nonlocal cob
        cob = np.dot(cob, step)
        _check_unimodular(cob)

    state = _NiggliState.SWAP_AXES
    iterations = 0
    while state is not _NiggliState.DONE:
        if state is _NiggliState.SWAP_AXES:
            iterations += 1
            if iterations > max_iterations:
                LOG.warning("Niggli reduction did not converge in %d iterations", max_iterations)
                return None
            if tol.larger(A, B) or (tol.equal(A, B) and tol.larger(abs(xi), abs(eta))):
                A, B = B, A
                xi, eta = eta, xi
                apply(_SWAP_AB)
            if tol.larger(B, C) or (tol.equal(B, C) and tol.larger(abs(eta), abs(zeta))):
                B, C = C, B
                eta, zeta = zeta, eta
                apply(_SWAP_BC)
                continue
            state = _NiggliState.FIX_SIGNS

        elif state is _NiggliState.FIX_SIGNS:
            f = [1, 1, 1]
            if _all_positive(tol, xi, eta, zeta):
                for i, x in enumerate((xi, eta, zeta)):
                    if tol.smaller(x, 0.0):
                        f[i] = -1
                xi, eta, zeta = abs(xi), abs(eta), abs(zeta)
            else:
                zero_index = None
                for i, x in enumerate((xi, eta, zeta)):
                    if tol.larger(x, 0.0):
                        f[i] = -1
                    elif not tol.smaller(x, 0.0):
                        zero_index = i
                if f[0] * f[1] * f[2] < 0 and zero_index is not None:
                    f[zero_index] = -1
                xi, eta, zeta = -abs(xi), -abs(eta), -abs(zeta)
            apply(np.diag(f))
            state = _NiggliState.BOUNDARY_CORRECT

        else:
            state = _NiggliState.SWAP_AXES
            if (
                tol.larger(abs(xi), B)
                or (tol.equal(xi, B) and tol.smaller(2 * eta, zeta))
                or (tol.equal(xi, -B) and tol.smaller(zeta, 0))
            ):
                s = _sign(xi)
                C = B + C - xi * s
                eta = eta - zeta * s
                xi = xi - 2 * B * s
                apply(_columns((1, 0, 0), (0, 1, 0), (0, -s, 1)))
            elif (
                tol.larger(abs(eta), A)
                or (tol.equal(eta, A) and tol.smaller(2 * xi, zeta))
                or (tol.equal(eta, -A) and tol.smaller(zeta, 0))
            ):
                s = _sign(eta)
                C = A + C - eta * s
                xi = xi - zeta * s
                eta = eta - 2 * A * s
                apply(_columns((1, 0, 0), (0, 1, 0), (-s, 0, 1)))
            elif (
                tol.larger(abs(zeta), A)
                or (tol.equal(zeta, A) and tol.smaller(2 * xi, eta))
                or (tol.equal(zeta, -A) and tol.smaller(eta, 0))
            ):
                s = _sign(zeta)
                B = A + B - zeta * s
                xi = xi - eta * s
                zeta = zeta - 2 * A * s
                apply(_columns((1, 0, 0), (-s, 1, 0), (0, 0, 1)))
            elif tol.smaller(xi + eta + zeta + A + B, 0) or (
                tol.equal(xi + eta + zeta + A + B, 0) and tol.larger(2 * (A + eta) + zeta, 0)
            ):
                C = A + B + C + xi + eta + zeta
                xi = 2 * B + xi + zeta
                eta = 2 * A + eta + zeta
                apply(_ADD_ALL)
            else:
                state = _NiggliState.DONE

    LOG.debug("Niggli reduction converged after %d iterations", iterations)
    return np.dot(cob.T, lattice), cob


def is_niggli_reduced(lattice, tolerance=SYMMETRY_PRECISION) -> bool:
    """
    Check whether a lattice satisfies the Niggli conditions, including
    the special conditions on the boundaries of the reduced domain.

    Args:
        lattice (array_like): (3, 3) row major lattice vectors
        tolerance (float, optional): absolute tolerance used in comparisons

    Returns:
        bool: True if the lattice is Niggli reduced
    """
    tol = Tolerance(tolerance)
    g1, g2, g3, g4, g5, g6 = niggli_parameters(np.asarray(lattice, dtype=np.float64))
    all_positive = tol.larger(g4, 0) and tol.larger(g5, 0) and tol.larger(g6, 0)
    none_positive = (
        tol.smaller_equal(g4, 0) and tol.smaller_equal(g5, 0) and tol.smaller_equal(g6, 0)
    )
    # interior of the reduced domain
    if (
        tol.smaller(g1, g2)
        and tol.smaller(g2, g3)
        and tol.smaller(abs(g4), g2)
        and tol.smaller(abs(g5), g1)
        and tol.smaller(abs(g6), g1)
        and (all_positive or none_positive)
    ):
        return True
    total = g1 + g2 + g3 + g4 + g5 + g6
    conditions = (
        tol.smaller_equal(0, g1) and tol.smaller_equal(g1, g2) and tol.smaller_equal(g2, g3),
        not tol.equal(g1, g2) or tol.smaller_equal(abs(g4), abs(g5)),
        not tol.equal(g2, g3) or tol.smaller_equal(abs(g5), abs(g6)),
        all_positive or none_positive,
        tol.smaller_equal(abs(g4), g2),
        tol.smaller_equal(abs(g5), g1),
        tol.smaller_equal(abs(g6), g1),
        tol.smaller_equal(g3, total),
        not tol.equal(g4, g2) or tol.smaller_equal(g6, 2 * g5),
        not tol.equal(g5, g1) or tol.smaller_equal(g6, 2 * g4),
        not tol.equal(g6, g1) or tol.smaller_equal(g5, 2 * g4),
        not tol.equal(g4, -g2) or tol.equal(g6, 0),
        not tol.equal(g5, -g1) or tol.equal(g6, 0),
        not tol.equal(g6, -g1) or tol.equal(g5, 0),
        not tol.equal(g3, total) or tol.smaller_equal(2 * g1 + 2 * g5 + g6, 0),
    )
    return all(conditions)
