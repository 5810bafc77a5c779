import logging
import numpy as np
from numpy import zeros, allclose as close

LOG = logging.getLogger(__name__)


def _columns(*columns, scale=1):
    return np.array(columns, dtype=np.float64).T / scale


#: Transformations from a centered conventional basis to a primitive basis,
#: the columns being the primitive vectors in the conventional basis
CENTERING_TO_PRIMITIVE = {
    "P": np.eye(3),
    "I": _columns((-1, 1, 1), (1, -1, 1), (1, 1, -1), scale=2),
    "F": _columns((0, 1, 1), (1, 0, 1), (1, 1, 0), scale=2),
    "A": _columns((-2, 0, 0), (0, -1, 1), (0, 1, 1), scale=2),
    "B": _columns((-1, 0, 1), (0, -2, 0), (1, 0, 1), scale=2),
    "C": _columns((1, 1, 0), (1, -1, 0), (0, 0, -2), scale=2),
    "R": _columns((2, 1, 1), (-1, 1, 1), (-1, -2, 1), scale=3),
    "H": _columns((2, 1, 0), (-1, 1, 0), (0, 0, 3), scale=3),
}

#: Integer inverses of `CENTERING_TO_PRIMITIVE`
PRIMITIVE_TO_CENTERING = {
    k: np.rint(np.linalg.inv(v)).astype(int) for k, v in CENTERING_TO_PRIMITIVE.items()
}


class UnitCell:
    """
    Storage class for the lattice vectors of a crystal i.e. its unit cell.

    Attributes:
        direct (np.ndarray): the direct matrix of this unit cell
            i.e. the lattice vectors
        reciprocal_lattice (np.ndarray): the reciprocal matrix of
            this unit cell i.e. the reciprocal lattice vectors
        inverse (np.ndarray): the inverse matrix of this unit
            cell i.e. the transpose of `reciprocal_lattice`
        lattice (np.ndarray): an alias for `direct`
    """

    def __init__(self, vectors):
        """
        Create a UnitCell object from a list of lattice vectors or
        a row major direct matrix. Unless otherwise specified, length
        units are Angstroms, and angular units are radians.

        Args:
            vectors (array_like): (3, 3) array of lattice vectors, row major i.e. vectors[0, :] is
                lattice vector A etc.
        """
        self.set_vectors(vectors)

    @property
    def lattice(self) -> np.ndarray:
        "The direct matrix of this unit cell i.e. vectors of the lattice"
        return self.direct

    @property
    def reciprocal_lattice(self) -> np.ndarray:
        "The reciprocal matrix of this unit cell i.e. vectors of the reciprocal lattice"
        return self.inverse.T

    @property
    def metric_tensor(self) -> np.ndarray:
        "The metric tensor G of this unit cell, G_ij = v_i . v_j"
        return np.dot(self.direct, self.direct.T)

    def to_cartesian(self, coords: np.ndarray) -> np.ndarray:
        """
        Transform coordinates from fractional space (a, b, c)
        to Cartesian space (x, y, z). The x-direction will be aligned
        along lattice vector A.

        Args:
            coords (array_like): (N, 3) array of fractional coordinates

        Returns:
            np.ndarray: (N, 3) array of Cartesian coordinates
        """
        return np.dot(coords, self.direct)

    def to_fractional(self, coords: np.ndarray) -> np.ndarray:
        """
        Transform coordinates from Cartesian space (x, y, z)
        to fractional space (a, b, c).

        Args:
            coords (array_like): an (N, 3) array of Cartesian coordinates

        Returns:
            np.ndarray: (N, 3) array of fractional coordinates
        """
        return np.dot(coords, self.inverse)

    def set_lengths_and_angles(self, lengths, angles):
        """
        Modify this unit cell by setting the lattice vectors
        according to lengths a, b, c and angles alpha, beta, gamma of
        a parallelipiped. Vector a lies along x, b in the xy-plane.

        Args:
            lengths (array_like): array of (a, b, c), the unit cell side lengths in Angstroms.
            angles (array_like): array of (alpha, beta, gamma), the unit cell angles
                in radians.
        """
        self.lengths = list(lengths)
        self.angles = list(angles)
        a, b, c = self.lengths
        ca, cb, cg = np.cos(self.angles)
        sg = np.sin(self.angles[2])
        v = self.volume()
        if not v > 0:
            raise ValueError(
                "Lengths {} and angles {} do not describe a valid cell".format(
                    lengths, angles
                )
            )
        self.direct = np.array((
            (a, 0, 0),
            (b * cg, b * sg, 0),
            (c * cb, c * (ca - cb * cg) / sg, v / (a * b * sg))
        ))
        self.inverse = np.array((
            (1.0 / a, 0.0, 0.0),
            (-cg / (a * sg), 1 / (b * sg), 0),
            (
                b * c * (ca * cg - cb) / v / sg,
                a * c * (cb * cg - ca) / v / sg,
                a * b * sg / v,
            )
        ))
        self._set_cell_type()

    def set_vectors(self, vectors):
        """
        Modify this unit cell by setting the lattice vectors
        according to those provided, updating the lattice parameters
        (lengths and angles) to match.

        Args:
            vectors (array_like): (3, 3) array of lattice vectors, row major i.e. vectors[0, :] is
                lattice vector A etc.
        """
        vectors = np.asarray(vectors, dtype=np.float64)
        if vectors.shape != (3, 3):
            raise ValueError(
                "Lattice vectors must be a (3, 3) array, got shape {}".format(
                    vectors.shape
                )
            )
        self.direct = vectors
        a, b, c = np.linalg.norm(self.direct, axis=1)
        u_a = vectors[0, :] / a
        u_b = vectors[1, :] / b
        u_c = vectors[2, :] / c
        alpha = np.arccos(np.clip(np.vdot(u_b, u_c), -1, 1))
        beta = np.arccos(np.clip(np.vdot(u_c, u_a), -1, 1))
        gamma = np.arccos(np.clip(np.vdot(u_a, u_b), -1, 1))
        self.lengths = [a, b, c]
        self.angles = [alpha, beta, gamma]
        self.inverse = np.linalg.inv(self.direct)
        self._set_cell_type()

    def _set_cell_type(self):
        if self.is_cubic:
            self.cell_type_index = 6
            self.cell_type = "cubic"
            self.unique_parameters = (self.a,)
        elif self.is_rhombohedral:
            self.cell_type_index = 4
            self.cell_type = "rhombohedral"
            self.unique_parameters = self.a, self.alpha
        elif self.is_hexagonal:
            self.cell_type_index = 5
            self.cell_type = "hexagonal"
            self.unique_parameters = self.a, self.c
        elif self.is_tetragonal:
            self.cell_type_index = 3
            self.cell_type = "tetragonal"
            self.unique_parameters = self.a, self.c
        elif self.is_orthorhombic:
            self.cell_type_index = 2
            self.cell_type = "orthorhombic"
            self.unique_parameters = self.a, self.b, self.c
        elif self.is_monoclinic:
            self.cell_type_index = 1
            self.cell_type = "monoclinic"
            self.unique_parameters = self.a, self.b, self.c, self.beta
        else:
            self.cell_type_index = 0
            self.cell_type = "triclinic"
            self.unique_parameters = (
                self.a,
                self.b,
                self.c,
                self.alpha,
                self.beta,
                self.gamma,
            )

    def volume(self) -> float:
        """The volume of the unit cell, in cubic Angstroms"""
        a, b, c = self.lengths
        ca, cb, cg = np.cos(self.angles)
        return a * b * c * np.sqrt(1 - ca * ca - cb * cb - cg * cg + 2 * ca * cb * cg)

    @property
    def abc_equal(self) -> bool:
        "are the lengths a, b, c all equal?"
        return close(np.array(self.lengths) - self.lengths[0], zeros(3))

    @property
    def abc_different(self) -> bool:
        "are all of the lengths a, b, c different?"
        return not (
            close(self.a, self.b) or close(self.a, self.c) or close(self.b, self.c)
        )

    @property
    def orthogonal(self) -> bool:
        "returns true if the lattice vectors are orthogonal"
        return close(np.abs(self.angles) - np.pi / 2, zeros(3))

    @property
    def angles_different(self) -> bool:
        "are all of the angles alpha, beta, gamma different?"
        return not (
            close(self.alpha, self.beta)
            or close(self.alpha, self.gamma)
            or close(self.beta, self.gamma)
        )

    @property
    def is_triclinic(self) -> bool:
        """Returns true if and lengths are different"""
        return self.abc_different and self.angles_different

    @property
    def is_monoclinic(self) -> bool:
        """Returns true if angles alpha and gamma are equal"""
        return close(self.alpha, self.gamma) and self.abc_different

    @property
    def is_cubic(self) -> bool:
        """Returns true if all lengths are equal and all angles are 90 degrees"""
        return self.abc_equal and self.orthogonal

    @property
    def is_orthorhombic(self) -> bool:
        """Returns true if all angles are 90 degrees"""
        return self.orthogonal and self.abc_different

    @property
    def is_tetragonal(self) -> bool:
        """Returns true if a, b are equal and all angles are 90 degrees"""
        return close(self.a, self.b) and (not close(self.a, self.c)) and self.orthogonal

    @property
    def is_rhombohedral(self) -> bool:
        """Returns true if all lengths are equal and all angles are equal"""
        return (
            self.abc_equal
            and close(np.array(self.angles) - self.angles[0], zeros(3))
            and (not close(self.alpha, np.pi / 2))
        )

    @property
    def is_hexagonal(self) -> bool:
        """Returns true if lengths a == b, a != c, alpha and beta == 90 and gamma == 120"""
        return (
            close(self.a, self.b)
            and (not close(self.a, self.c))
            and close(self.angles[:2], np.pi / 2)
            and close(self.gamma, 2 * np.pi / 3)
        )

    @property
    def a(self) -> float:
        "Length of lattice vector a"
        return self.lengths[0]

    @property
    def v_a(self) -> np.ndarray:
        "lattice vector a"
        return self.direct[0]

    @property
    def alpha(self) -> float:
        "Angle between lattice vectors b and c"
        return self.angles[0]

    @property
    def b(self) -> float:
        "Length of lattice vector b"
        return self.lengths[1]

    @property
    def v_b(self) -> np.ndarray:
        "lattice vector b"
        return self.direct[1]

    @property
    def beta(self) -> float:
        "Angle between lattice vectors a and c"
        return self.angles[1]

    @property
    def c(self) -> float:
        "Length of lattice vector c"
        return self.lengths[2]

    @property
    def v_c(self) -> np.ndarray:
        "lattice vector c"
        return self.direct[2]

    @property
    def gamma(self) -> float:
        "Angle between lattice vectors a and b"
        return self.angles[2]

    @property
    def alpha_deg(self) -> float:
        "Angle between lattice vectors b and c in degrees"
        return np.degrees(self.angles[0])

    @property
    def beta_deg(self) -> float:
        "Angle between lattice vectors a and c in degrees"
        return np.degrees(self.angles[1])

    @property
    def gamma_deg(self) -> float:
        "Angle between lattice vectors a and b in degrees"
        return np.degrees(self.angles[2])

    @property
    def parameters(self) -> np.ndarray:
        "single vector of lattice side lengths and angles in degrees"
        atol = 1e-6
        l = np.array(self.lengths)
        deg = np.degrees(self.angles)
        len_diffs = np.abs(l[:, np.newaxis] - l[np.newaxis, :]) < atol
        ang_diffs = np.abs(deg[:, np.newaxis] - deg[np.newaxis, :]) < atol
        for i in range(3):
            l[len_diffs[i]] = l[i]
            deg[ang_diffs[i]] = deg[i]
        return np.hstack((l, deg))

    def transformed(self, change_of_basis):
        """
        A new unit cell spanned by the columns of `change_of_basis`,
        expressed in the basis of this cell i.e. the new lattice is
        `change_of_basis.T @ self.direct`.

        Args:
            change_of_basis (array_like): (3, 3) transformation matrix

        Returns:
            UnitCell: the transformed unit cell
        """
        return UnitCell(np.dot(np.asarray(change_of_basis).T, self.direct))

    def conventional(self, holohedry, choice=""):
        """
        Construct the conventional cell for the given holohedry from
        the lattice parameters of this cell, enforcing the
        metric constraints of the crystal family and orienting the
        cell in the standard way.

        Args:
            holohedry (str): one of 'triclinic', 'monoclinic', 'orthorhombic',
                'tetragonal', 'trigonal', 'hexagonal' or 'cubic'
            choice (str, optional): setting choice, 'R' places a trigonal cell
                with rhombohedral axes

        Returns:
            UnitCell: the conventional unit cell
        """
        a, b, c = self.lengths
        alpha, beta, gamma = self.angles
        if holohedry == "triclinic":
            return UnitCell.from_lengths_and_angles(self.lengths, self.angles)
        elif holohedry == "monoclinic":
            return UnitCell(
                ((a, 0, 0), (0, b, 0), (c * np.cos(beta), 0, c * np.sin(beta)))
            )
        elif holohedry == "orthorhombic":
            return UnitCell(np.diag((a, b, c)))
        elif holohedry == "tetragonal":
            avg = 0.5 * (a + b)
            return UnitCell(np.diag((avg, avg, c)))
        elif holohedry == "trigonal" and choice == "R":
            avg = (a + b + c) / 3
            angle = np.arccos(np.mean(np.cos(self.angles)))
            ahex = 2 * avg * np.sin(0.5 * angle)
            chex = avg * np.sqrt(3 * (1 + 2 * np.cos(angle)))
            s3 = np.sqrt(3)
            return UnitCell(
                (
                    (0.5 * ahex, -0.5 * ahex / s3, chex / 3),
                    (0.0, ahex / s3, chex / 3),
                    (-0.5 * ahex, -0.5 * ahex / s3, chex / 3),
                )
            )
        elif holohedry in ("trigonal", "hexagonal"):
            avg = 0.5 * (a + b)
            return UnitCell(
                ((avg, 0, 0), (-0.5 * avg, 0.5 * avg * np.sqrt(3), 0), (0, 0, c))
            )
        elif holohedry == "cubic":
            return UnitCell(np.eye(3) * (a + b + c) / 3)
        raise ValueError("Unknown holohedry '{}'".format(holohedry))

    @classmethod
    def from_lengths_and_angles(cls, lengths, angles, unit="radians"):
        """
        Construct a new UnitCell from the provided lengths and angles.

        Args:
            lengths (array_like): Lattice side lengths (a, b, c) in Angstroms.
            angles (array_like): Lattice angles (alpha, beta, gamma) in provided units (default radians)
            unit (str, optional): Unit for angles i.e. 'radians' or 'degrees' (default radians).

        Returns:
            UnitCell: A new unit cell object representing the provided lattice.
        """
        uc = cls(np.eye(3))
        if unit == "radians":
            if np.any(np.abs(angles) > np.pi):
                LOG.warning(
                    "Large angle in UnitCell.from_lengths_and_angles, "
                    "are you sure your angles are not in degrees?"
                )
            uc.set_lengths_and_angles(lengths, angles)
        else:
            uc.set_lengths_and_angles(lengths, np.radians(angles))
        return uc

    @classmethod
    def from_metric_tensor(cls, metric):
        """
        Construct a new UnitCell (in the standard orientation) from
        a metric tensor.

        Args:
            metric (array_like): (3, 3) symmetric positive definite metric tensor

        Returns:
            UnitCell: A new unit cell object with the provided metric.
        """
        metric = np.asarray(metric, dtype=np.float64)
        lengths = np.sqrt(np.diag(metric))
        angles = np.arccos(
            np.clip(
                (
                    metric[1, 2] / (lengths[1] * lengths[2]),
                    metric[0, 2] / (lengths[0] * lengths[2]),
                    metric[0, 1] / (lengths[0] * lengths[1]),
                ),
                -1,
                1,
            )
        )
        return cls.from_lengths_and_angles(lengths, angles)

    @classmethod
    def cubic(cls, length):
        """
        Construct a new cubic UnitCell from the provided side length.

        Args:
            length (float): Lattice side length a in Angstroms.

        Returns:
            UnitCell: A new unit cell object representing the provided lattice.
        """
        return cls(np.eye(3) * length)

    @classmethod
    def from_unique_parameters(cls, params, cell_type="triclinic", **kwargs):
        """
        Construct a new unit cell from the unique parameters and
        the specified cell type.

        Args:
            params (Tuple): tuple of floats of unique parameters
            cell_type (str, optional): the desired cell type
        """
        return getattr(cls, cell_type)(*params)

    @classmethod
    def triclinic(cls, *params, **kwargs):
        """
        Construct a new UnitCell from the provided side lengths and angles.

        Args:
            params (array_like): Lattice side lengths and angles (a, b, c, alpha, beta, gamma)

        Returns:
            UnitCell: A new unit cell object representing the provided lattice.
        """

        assert len(params) == 6, "Requre three lengths and angles for Triclinic cell"
        return cls.from_lengths_and_angles(params[:3], params[3:], **kwargs)

    @classmethod
    def monoclinic(cls, *params, **kwargs):
        """
        Construct a new UnitCell from the provided side lengths and angle.

        Args:
            params (array_like): Lattice side lengths and angles (a, b, c, beta)

        Returns:
            UnitCell: A new unit cell object representing the provided lattice.
        """

        assert (
            len(params) == 4
        ), "Requre three lengths and one angle for Monoclinic cell"
        unit = kwargs.get("unit", "radians")
        if unit != "radians":
            alpha, gamma = 90, 90
        else:
            alpha, gamma = np.pi / 2, np.pi / 2
        return cls.from_lengths_and_angles(
            params[:3], (alpha, params[3], gamma), **kwargs
        )

    @classmethod
    def tetragonal(cls, *params, **kwargs):
        """
        Construct a new UnitCell from the provided side lengths.

        Args:
            params (array_like): Lattice side lengths (a, c)

        Returns:
            UnitCell: A new unit cell object representing the provided lattice.
        """
        assert len(params) == 2, "Requre 2 lengths for Tetragonal cell"
        return cls(np.diag((params[0], params[0], params[1])))

    @classmethod
    def hexagonal(cls, *params, **kwargs):
        """
        Construct a new UnitCell from the provided side lengths.

        Args:
            params (array_like): Lattice side lengths (a, c)

        Returns:
            UnitCell: A new unit cell object representing the provided lattice.
        """
        assert len(params) == 2, "Requre 2 lengths for Hexagonal cell"
        angles = [np.pi / 2, np.pi / 2, 2 * np.pi / 3]
        return cls.from_lengths_and_angles(
            (params[0], params[0], params[1]), angles, unit="radians"
        )

    @classmethod
    def rhombohedral(cls, *params, **kwargs):
        """
        Construct a new UnitCell from the provided side length and angle.

        Args:
            params (array_like): Lattice side length a and angle alpha

        Returns:
            UnitCell: A new unit cell object representing the provided lattice.
        """
        assert len(params) == 2, "Requre 1 length and 1 angle for Rhombohedral cell"
        return cls.from_lengths_and_angles([params[0]] * 3, [params[1]] * 3, **kwargs)

    @classmethod
    def orthorhombic(cls, *lengths, **kwargs):
        """
        Construct a new orthorhombic UnitCell from the provided side lengths.

        Args:
            lengths (array_like): Lattice side lengths (a, b, c) in Angstroms.

        Returns:
            UnitCell: A new unit cell object representing the provided lattice.
        """

        assert len(lengths) == 3, "Requre three lengths for Orthorhombic cell"
        return cls(np.diag(lengths))

    def to_mesh(self):
        "A triangulated box spanning this unit cell, as a `trimesh.Trimesh`"
        from trimesh import Trimesh
        verts = np.array([
            np.zeros(3),
            self.v_c,
            self.v_b,
            self.v_b + self.v_c,
            self.v_a,
            self.v_a + self.v_c,
            self.v_a + self.v_b,
            self.v_a + self.v_b + self.v_c,
        ])

        faces = np.array([
            [1, 3, 0],
            [4, 1, 0],
            [0, 3, 2],
            [2, 4, 0],
            [1, 7, 3],
            [5, 1, 4],
            [5, 7, 1],
            [3, 7, 2],
            [6, 4, 2],
            [2, 7, 6],
            [6, 5, 4],
            [7, 5, 6]
        ])
        return Trimesh(vertices=verts, faces=faces)

    def __repr__(self):
        cell = self.cell_type
        unique = self.unique_parameters
        s = "<{{}}: {{}} ({})>".format(",".join("{:.3f}" for p in unique))
        return s.format(self.__class__.__name__, cell, *unique)
