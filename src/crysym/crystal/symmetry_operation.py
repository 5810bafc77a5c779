from fractions import Fraction
import logging
import numpy as np
import re

from .tolerance import TRANSLATION_DENOMINATOR

LOG = logging.getLogger(__name__)


SYMM_STR_SYMBOL_REGEX = re.compile(r".*?([+-]*[xyz0-9\/\.]+)")

#: Centering translations in units of 1/12, excluding the zero translation
CENTERING_TRANSLATIONS = {
    "P": (),
    "A": ((0, 6, 6),),
    "B": ((6, 0, 6),),
    "C": ((6, 6, 0),),
    "I": ((6, 6, 6),),
    "R": ((8, 4, 4), (4, 8, 8)),
    "H": ((8, 4, 0), (0, 8, 4)),
    "F": ((0, 6, 6), (6, 0, 6), (6, 6, 0)),
}


def wrap_to_unit_cell(coords):
    """
    Wrap fractional coordinates into [0, 1).

    Args:
        coords (array_like): fractional coordinates of any shape

    Returns:
        np.ndarray: the wrapped coordinates
    """
    return np.fmod(np.fmod(coords, 1.0) + 1.0, 1.0)


def centering_translations(centering):
    """
    The lattice translations (including the zero translation) of a
    centering type as fractional vectors.

    Args:
        centering (str): one of 'P', 'A', 'B', 'C', 'I', 'R', 'H', 'F'

    Returns:
        np.ndarray: (N, 3) array of translations
    """
    if centering not in CENTERING_TRANSLATIONS:
        raise ValueError("Unknown centering '{}'".format(centering))
    return np.array(
        ((0, 0, 0),) + CENTERING_TRANSLATIONS[centering], dtype=np.float64
    ) / TRANSLATION_DENOMINATOR


def encode_symm_str(rotation, translation):
    """
    Encode a rotation matrix (of -1, 0, 1s) and (rational) translation vector
    into string form e.g. 1/2-x,z-1/3,-y-1/6

    >>> encode_symm_str(((-1, 0, 0), (0, 0, 1), (0, 1, 0)), (0, 0.5, 1/3))
    '-x,1/2+z,1/3+y'
    >>> encode_symm_str(((1, 1, 1), (1, 0, 1), (0, 1, 0)), (0, 0.5, 1/3))
    '+x+y+z,1/2+x+z,1/3+y'

    Args:
        rotation (array_like): (3,3) matrix of -1, 0, or 1s encoding the rotation component
            of the symmetry operation
        translation (array_like): (3) vector of rational numbers encoding the translation component
            of the symmetry operation

    Returns:
        str: the encoded symmetry operation
    """
    symbols = "xyz"
    res = []
    for i in (0, 1, 2):
        t = Fraction(float(translation[i])).limit_denominator(TRANSLATION_DENOMINATOR)
        v = ""
        if t != 0:
            v += str(t)
        for j in range(0, 3):
            c = rotation[i][j]
            if c != 0:
                s = "-" if c < 0 else "+"
                v += s + symbols[j]
        res.append(v)
    res = ",".join(res)
    return res


def decode_symm_str(s):
    """
    Decode a symmetry operation represented in the string
    form e.g. '1/2 + x, y, -z -0.25' into a rotation matrix
    and translation vector.

    >>> encode_symm_str(*decode_symm_str("x,y,z"))
    '+x,+y,+z'
    >>> encode_symm_str(*decode_symm_str("1/2 - x,y-0.3333333,z"))
    '1/2-x,2/3+y,+z'

    Args:
        s (str): the encoded symmetry operation string

    Returns:
        Tuple[np.ndarray, np.ndarray]: a (3,3) rotation matrix and a (3) translation vector
    """
    rotation = np.zeros((3, 3), dtype=int)
    translation = np.zeros((3,), dtype=np.float64)
    tokens = s.lower().replace(" ", "").split(",")
    if len(tokens) != 3:
        raise ValueError("Could not decode symmetry operation '{}'".format(s))
    for i, row in enumerate(tokens):
        row = row.strip()
        symbols = re.findall(SYMM_STR_SYMBOL_REGEX, row)
        for symbol in symbols:
            for idx, axis in enumerate("xyz"):
                if axis in symbol:
                    rotation[i, idx] = -1 if "-" + axis in symbol else 1
                    break
            else:
                if "/" in symbol:
                    numerator, denominator = symbol.split("/")
                    translation[i] += float(
                        Fraction(Fraction(numerator), Fraction(denominator))
                    )
                else:
                    translation[i] += float(Fraction(symbol))
    return rotation, wrap_to_unit_cell(translation)


def decode_symm_int(coded_integer):
    """
    Decode an integer encoded symmetry operation.

    A space group operation is compressed using ternary numerical system for
    rotation and duodecimal system for translation. This is achieved because
    each element of rotation matrix can have only one of {-1,0,1}, and the
    translation can have one of {0,2,3,4,6,8,9,10} divided by 12.  Therefore
    3^9 * 12^3 = 34012224 different values can map space group operations.

    >>> encode_symm_str(*decode_symm_int(16484))
    '+x,+y,+z'

    Args:
        coded_integer (int): integer encoding a symmetry operation

    Returns:
        Tuple[np.ndarray, np.ndarray]: (3,3) rotation matrix, (3) translation vector
    """
    r = coded_integer % 19683  # 19683 = 3**9
    shift = 6561  # 6561 = 3**8
    rotation = np.empty((3, 3), dtype=int)
    translation = np.empty(3, dtype=np.float64)
    for i in (0, 1, 2):
        for j in (0, 1, 2):
            rotation[i, j] = (r % (shift * 3)) // shift - 1
            shift //= 3

    t = coded_integer // 19683
    shift = 144
    for i in (0, 1, 2):
        translation[i] = ((t % (shift * 12)) // shift) / 12
        shift //= 12
    return rotation, translation


def encode_symm_int(rotation, translation):
    """
    Encode an integer encoded symmetry from a rotation matrix and translation
    vector. Translations are rounded to the nearest multiple of 1/12.

    >>> encode_symm_int(((1, 0, 0), (0, 1, 0), (0, 0, 1)), (0, 0, 0))
    16484
    >>> encode_symm_int(((1, 0, 0), (0, 1, 0), (0, 1, 1)), (0, 0.5, 0))
    1433663

    Args:
        rotation (array_like): (3,3) matrix of -1, 0, or 1s encoding the rotation component
            of the symmetry operation
        translation (array_like): (3) vector of rational numbers encoding the translation component
            of the symmetry operation

    Returns:
        int: the encoded symmetry operation
    """

    r = 0
    shift = 1
    rotation = np.round(np.array(rotation)).astype(int) + 1
    for i in (2, 1, 0):
        for j in (2, 1, 0):
            r += int(rotation[i, j]) * shift
            shift *= 3
    t = 0
    shift = 1
    translation = np.round(np.array(translation) * 12).astype(int) % 12
    for i in (2, 1, 0):
        t += int(translation[i]) * shift
        shift *= 12
    return r + t * 19683


class SymmetryOperation:
    """
    Class to represent a crystallographic symmetry operation (a Seitz
    operation), composed of an integer rotation matrix and a translation,
    both acting on fractional coordinates. Translations are kept in [0, 1).

    Operations compare and hash by their integer code, i.e. with
    translations rounded to multiples of 1/12.

    Attributes:
        rotation (np.ndarray): (3, 3) integer rotation matrix in fractional coordinates
        translation (np.ndarray): (3) translation vector in fractional coordinates
    """

    rotation: np.ndarray
    translation: np.ndarray

    def __init__(self, rotation, translation):
        """
        Construct a new symmetry operation from a rotation matrix and
        a translation vector

        Arguments:
            rotation (np.ndarray): (3, 3) rotation matrix
            translation (np.ndarray): (3) translation vector
        """
        self.rotation = np.rint(np.asarray(rotation)).astype(int)
        self.translation = wrap_to_unit_cell(np.asarray(translation, dtype=np.float64))

    @property
    def seitz_matrix(self) -> np.ndarray:
        "The Seitz matrix form of this SymmetryOperation"
        s = np.eye(4, dtype=np.float64)
        s[:3, :3] = self.rotation
        s[:3, 3] = self.translation
        return s

    @property
    def integer_code(self) -> int:
        "Represent this SymmetryOperation as a packed integer"
        if not hasattr(self, "_integer_code"):
            setattr(
                self, "_integer_code", encode_symm_int(self.rotation, self.translation)
            )
        return getattr(self, "_integer_code")

    @property
    def cif_form(self) -> str:
        "Represent this SymmetryOperation in string form e.g. '+x,+y,+z'"
        return str(self)

    def inverted(self):
        """
        A copy of this symmetry operation under inversion

        Returns:
            SymmetryOperation: an inverted copy of this symmetry operation
        """
        return SymmetryOperation(-self.rotation, -self.translation)

    def inverse(self):
        """
        The inverse operation i.e. (R^-1, -R^-1 t)

        Returns:
            SymmetryOperation: the inverse of this symmetry operation
        """
        rinv = np.rint(np.linalg.inv(self.rotation)).astype(int)
        return SymmetryOperation(rinv, -np.dot(rinv, self.translation))

    def changed_basis(self, change_of_basis):
        """
        Express this operation in a new basis, whose vectors are the
        columns of `change_of_basis` in the current basis, i.e.
        coordinates transform as x' = M^-1 x and the operation becomes
        (M^-1 R M, M^-1 t).

        Args:
            change_of_basis (array_like): (3, 3) transformation matrix M

        Returns:
            SymmetryOperation: the operation in the new basis
        """
        m = np.asarray(change_of_basis, dtype=np.float64)
        minv = np.linalg.inv(m)
        rotation = np.dot(minv, np.dot(self.rotation, m))
        return SymmetryOperation(rotation, np.dot(minv, self.translation))

    def __mul__(self, other):
        """
        Compose two symmetry operations, such that (self * other)(x)
        is self(other(x)).

        Returns:
            SymmetryOperation: the composed operation
        """
        return SymmetryOperation(
            np.dot(self.rotation, other.rotation),
            np.dot(self.rotation, other.translation) + self.translation,
        )

    def __add__(self, value: np.ndarray):
        """
        Add a vector to this symmetry operation's translation vector.

        Returns:
            SymmetryOperation: a copy of this symmetry operation under additional translation
        """
        return SymmetryOperation(self.rotation, self.translation + value)

    def __sub__(self, value: np.ndarray):
        """
        Subtract a vector from this symmetry operation's translation.

        Returns:
            SymmetryOperation: a copy of this symmetry operation under additional translation
        """
        return SymmetryOperation(self.rotation, self.translation - value)

    def apply(self, coordinates: np.ndarray) -> np.ndarray:
        """
        Apply this symmetry operation to a set of fractional coordinates.

        Args:
            coordinates (np.ndarray): (N,3) or (N,4) array of fractional coordinates or homogeneous
                fractional coordinates.

        Returns:
            np.ndarray: (N, 3) array of transformed coordinates
        """
        if coordinates.shape[1] == 4:
            return np.dot(coordinates, self.seitz_matrix.T)
        else:
            return np.dot(coordinates, self.rotation.T) + self.translation

    def __str__(self):
        if not hasattr(self, "_string_code"):
            setattr(
                self, "_string_code", encode_symm_str(self.rotation, self.translation)
            )
        return getattr(self, "_string_code")

    def __lt__(self, other):
        return self.integer_code < other.integer_code

    def __eq__(self, other):
        return self.integer_code == other.integer_code

    def __hash__(self):
        return int(self.integer_code)

    def __repr__(self):
        return "<{}: {}>".format(self.__class__.__name__, self)

    def __call__(self, coordinates):
        return self.apply(coordinates)

    @classmethod
    def from_integer_code(cls, code: int):
        """
        Alternative constructor from an integer-encoded
        symmetry operation e.g. 16484

        See also  the `encode_symm_int`, `decode_symm_int` methods.

        Args:
            code (int): integer-encoded symmetry operation

        Returns:
            SymmetryOperation: a new symmetry operation from the provided integer code
        """

        rot, trans = decode_symm_int(code)
        s = SymmetryOperation(rot, trans)
        setattr(s, "_integer_code", code)
        return s

    @classmethod
    def from_string_code(cls, code: str):
        """
        Alternative constructor from a string encoded
        symmetry operation e.g. '+x,+y,+z'.

        See also the `encode_symm_str`, `decode_symm_str` methods.

        Args:
            code (str): string-encoded symmetry operation

        Returns:
            SymmetryOperation: a new symmetry operation from the provided string code
        """
        rot, trans = decode_symm_str(code)
        return SymmetryOperation(rot, trans)

    def is_identity(self) -> bool:
        "Returns true if this is the identity symmetry operation '+x,+y,+z'"
        return self.integer_code == 16484

    @classmethod
    def identity(cls):
        "Alternative constructor for the the identity symop i.e. x,y,z"
        return cls.from_integer_code(16484)


def add_centering_operations(operations, centering):
    """
    Expand a list of symmetry operations with the lattice translations
    of a centering type.

    Args:
        operations (List[SymmetryOperation]): symmetry operations
        centering (str): one of 'P', 'A', 'B', 'C', 'I', 'R', 'H', 'F'

    Returns:
        List[SymmetryOperation]: the operations combined with every centering translation
    """
    translations = centering_translations(centering)
    expanded = []
    for t in translations:
        for op in operations:
            expanded.append(op + t)
    LOG.debug(
        "Expanded %d operations to %d with %s centering",
        len(operations), len(expanded), centering
    )
    return expanded
