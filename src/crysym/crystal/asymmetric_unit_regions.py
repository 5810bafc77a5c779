"""
Fractional-coordinate regions bounding the asymmetric unit of each of the
530 Hall settings, after the International Tables for Crystallography
Vol. A. Each entry maps a Hall number to a predicate taking the
fractional coordinates ``x, y, z`` of a point and a tolerance ``eps``.

Some regions extend outside of [0, 1); callers are expected to test
the lattice translates of a point (see
`crysym.crystal.asymmetric_unit.is_inside_asymmetric_unit`).
"""

ASYMMETRIC_UNIT_REGIONS = {
    # [1] P 1 (P 1)
    1: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [2] P -1 (-P 1)
    2: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [3] P 1 2 1 unique b axis (P 2y)
    3: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [3] P 1 1 2 unique c axis (P 2)
    4: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [3] P 2 1 1 unique a axis (P 2x)
    5: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [4] P 1 21 1 unique b axis (P 2yb)
    6: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [4] P 1 1 21 unique c axis (P 2c)
    7: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [4] P 21 1 1 unique a axis (P 2xa)
    8: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [5] C 1 2 1 unique b axis: cell choice 1 (C 2y)
    9: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [5] A 1 2 1 unique b axis: cell choice 2 (A 2y)
    10: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [5] I 1 2 1 unique b axis: cell choice 3 (I 2y)
    11: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [5] A 1 1 2 unique c axis: cell choice 1 (A 2)
    12: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [5] B 1 1 2 unique c axis: cell choice 2 (B 2)
    13: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [5] I 1 1 2 unique c axis: cell choice 3 (I 2)
    14: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [5] B 2 1 1 unique a axis: cell choice 1 (B 2x)
    15: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [5] C 2 1 1 unique a axis: cell choice 2 (C 2x)
    16: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [5] I 2 1 1 unique a axis: cell choice 3 (I 2x)
    17: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [6] P 1 m 1 unique b axis (P -2y)
    18: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [6] P 1 1 m unique c axis (P -2)
    19: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [6] P m 1 1 unique a axis (P -2x)
    20: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [7] P 1 c 1 unique b axis: cell choice 1 (P -2yc)
    21: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [7] P 1 n 1 unique b axis: cell choice 2 (P -2yac)
    22: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [7] P 1 a 1 unique b axis: cell choice 3 (P -2ya)
    23: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [7] P 1 1 a unique c axis: cell choice 1 (P -2a)
    24: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [7] P 1 1 n unique c axis: cell choice 2 (P -2ab)
    25: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [7] P 1 1 b unique c axis: cell choice 3 (P -2b)
    26: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [7] P b 1 1 unique a axis: cell choice 1 (P -2xb)
    27: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [7] P n 1 1 unique a axis: cell choice 2 (P -2xbc)
    28: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [7] P c 1 1 unique a axis: cell choice 3 (P -2xc)
    29: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [8] C 1 m 1 unique b axis: cell choice 1 (C -2y)
    30: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [8] A 1 m 1 unique b axis: cell choice 2 (A -2y)
    31: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [8] I 1 m 1 unique b axis: cell choice 3 (I -2y)
    32: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [8] A 1 1 m unique c axis: cell choice 1 (A -2)
    33: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [8] B 1 1 m  unique c axis: cell choice 2 (B -2)
    34: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [8] I 1 1 m unique c axis: cell choice 3 (I -2)
    35: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [8] B m 1 1 unique a axis: cell choice 1 (B -2x)
    36: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [8] C m 1 1 unique a axis: cell choice 2 (C -2x)
    37: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < (1/2 + eps)) and (-eps <= z <= 1 + eps),
    # [8] I m 1 1 unique a axis: cell choice 3 (I -2x)
    38: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < (1/2 + eps)) and (-eps <= z <= 1 + eps),
    # [9] C 1 c 1 unique b axis: cell choice 1 (C -2yc)
    39: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [9] A 1 n 1 unique b axis: cell choice 2 (A -2yab)
    40: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [9] I 1 a 1 unique b axis: cell choice 3 (I -2ya)
    41: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [9] A 1 a 1 unique -b axis: cell choice 1 (A -2ya)
    42: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [9] C 1 n 1 unique -b axis: cell choice 2 (C -2yac)
    43: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [9] I 1 c 1 unique -b axis: cell choice 3 (I -2yc)
    44: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [9] A 1 1 a unique c axis: cell choice 1 (A -2a)
    45: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [9] B 1 1 n unique c axis: cell choice 2 (B -2ab)
    46: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [9] I 1 1 b unique c axis: cell choice 3 (I -2b)
    47: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [9] B 1 1 b unique -c axis: cell choice 1 (B -2b)
    48: lambda x, y, z, eps: (-eps <= x < (1/2 + eps)) and (-eps <= y < (1/2 + eps)) and (-eps <= z <= 1 + eps),
    # [9] A 1 1 n unique -c axis: cell choice 2 (A -2ab)
    49: lambda x, y, z, eps: (-eps <= x < (1/2 + eps)) and (-eps <= y < (1/2 + eps)) and (-eps <= z <= (1 + eps)),
    # [9] I 1 1 a unique -c axis: cell choice 3 (I -2a)
    50: lambda x, y, z, eps: (-eps <= x < (1/2 + eps)) and (-eps <= y < (1/2 + eps)) and (-eps <= z <= 1 + eps),
    # [9] B b 1 1 unique a axis: cell choice 1 (B -2xb)
    51: lambda x, y, z, eps: (-eps <= x < (1/2 + eps)) and (-eps <= y < (1/2 + eps)) and (-eps <= z <= 1 + eps),
    # [9] C n 1 1 unique a axis: cell choice 2 (C -2xac)
    52: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [9] I c 1 1 unique a axis: cell choice 3 (I -2xc)
    53: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < (1/2 + eps)) and (-eps <= z <= 1 + eps),
    # [9] C c 1 1 unique -a axis: cell choice 1 (C -2xc)
    54: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < (1/2 + eps)) and (-eps <= z <= 1 + eps),
    # [9] B n 1 1 unique -a axis: cell choice 2 (B -2xab)
    55: lambda x, y, z, eps: (-eps <= x < (1/2 + eps)) and (-eps <= y < (1/2 + eps)) and (-eps <= z <= 1 + eps),
    # [9] I b 1 1 unique -a axis: cell choice 3 (I -2xb)
    56: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [10] P 1 2/m 1 unique b axis (-P 2y)
    57: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [10] P 1 1 2/m unique c axis (-P 2)
    58: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [10] P 2/m 1 1 unique a axis (-P 2x)
    59: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [11] P 1 21/m 1 unique axis b (-P 2yb)
    60: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [11] P 1 1 21/m unique c axis (-P 2c)
    61: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [11] P 21/m 1 1 unique a axis (-P 2xa)
    62: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [12] C 1 2/m 1 unique b axis: cell choice 1 (-C 2y)
    63: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [12] A 1 2/m 1 unique b axis: cell choice 2 (-A 2y)
    64: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [12] I 1 2/m 1 unique b axis: cell choice 3 (-I 2y)
    65: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [12] A 1 1 2/m unique c axis: cell choice 1 (-A 2)
    66: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [12] B 1 1 2/m unique c axis: cell choice 2 (-B 2)
    67: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [12] I 1 1 2/m unique c axis: cell choice 3 (-I 2)
    68: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [12] B 2/m 1 1 unique a axis: cell choice 1 (-B 2x)
    69: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [12] C 2/m 1 1 unique a axis: cell choice 2 (-C 2x)
    70: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [12] I 2/m 1 1 unique a axis: cell choice 3 (-I 2x)
    71: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [13] P 1 2/c 1 unique b axis: cell choice 1 (-P 2yc)
    72: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [13] P 1 2/n 1 unique b axis: cell choice 2 (-P 2yac)
    73: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [13] P 1 2/a 1 unique b axis: cell choice 3 (-P 2ya)
    74: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [13] P 1 1 2/a unique c axis: cell choice 1 (-P 2a)
    75: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [13] P 1 1 2/n unique c axis: cell choice 2 (-P 2ab)
    76: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [13] P 1 1 2/b unique c axis: cell choice 3 (-P 2b)
    77: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [13] P 2/b 1 1 unique a axis: cell choice 1 (-P 2xb)
    78: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [13] P 2/n 1 1 unique a axis: cell choice 2 (-P 2xbc)
    79: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [13] P 2/c 1 1 unique a axis: cell choice 3 (-P 2xc)
    80: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [14] P 1 21/c 1 unique b axis: cell choice 1 (-P 2ybc)
    81: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [14] P 1 21/n 1 unique b axis: cell choice 2 (-P 2yn)
    82: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [14] P 1 21/a 1 unique b axis: cell choice 3 (-P 2yab)
    83: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [14] P 1 1 21/a unique c axis: cell choice 1 (-P 2ac)
    84: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [14] P 1 1 21/n unique c axis: cell choice 2 (-P 2n)
    85: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [14] P 1 1 21/b unique c axis: cell choice 3 (-P 2bc)
    86: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [14] P 21/b 1 1 unique a axis: cell choice 1 (-P 2xab)
    87: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [14] P 21/n 1 1 unique a axis: cell choice 2 (-P 2xn)
    88: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [14] P 21/c 1 1 unique a axis: cell choice 3 (-P 2xac)
    89: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [15] C 1 2/c 1 unique b axis: cell choice 1 (-C 2yc)
    90: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [15] A 1 2/n 1 unique b axis: cell choice 2 (-A 2yab)
    91: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [15] I 1 2/a 1 unique b axis: cell choice 3 (-I 2ya)
    92: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [15] A 1 2/a 1 unique -b axis: cell choice 1 (-A 2ya)
    93: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [15] C 1 2/n 1 unique -b axis: cell choice 2 (-C 2yac)
    94: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (1/4 - eps <= y <= 3/4 + eps) and (-eps <= z <= 1 + eps),
    # [15] I 1 2/c 1 unique -b axis: cell choice 3 (-I 2yc)
    95: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [15] A 1 1 2/a unique c axis: cell choice 1 (-A 2a)
    96: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [15] B 1 1 2/n unique c axis: cell choice 2 (-B 2ab)
    97: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [15] I 1 1 2/b unique c axis: cell choice 3 (-I 2b)
    98: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [15] B 1 1 2/b unique -c axis: cell choice 1 (-B 2b)
    99: lambda x, y, z, eps: (-eps <= x < (1/2 + eps)) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [15] A 1 1 2/n unique -c axis: cell choice 2 (-A 2ab)
    100: lambda x, y, z, eps: (-eps <= x < (1/2 + eps)) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [15] I 1 1 2/a unique -c axis: cell choice 3 (-I 2a)
    101: lambda x, y, z, eps: (-eps <= x < (1/2 + eps)) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [15] B 2/b 1 1 unique a axis: cell choice 1 (-B 2xb)
    102: lambda x, y, z, eps: (-eps <= x < (1/2 + eps)) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [15] C 2/n 1 1 unique a axis: cell choice 2 (-C 2xac)
    103: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (1/4 - eps <= y <= 3/4 + eps) and (-eps <= z <= 1 + eps),
    # [15] I 2/c 1 1 unique a axis: cell choice 3 (-I 2xc)
    104: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [15] C 2/c 1 1 unique -a axis: cell choice 1 (-C 2xc)
    105: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [15] B 2/n 1 1 unique -a axis: cell choice 2 (-B 2xab)
    106: lambda x, y, z, eps: (-eps <= x < (1/2 + eps)) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [15] I 2/b 1 1 unique -a axis: cell choice 3 (-I 2xb)
    107: lambda x, y, z, eps: (1/4 - eps <= x <= 3/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [16] P 2 2 2 (P 2 2)
    108: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [17] P 2 2 21 Origin-1,abc (P 2c 2)
    109: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [17] P 21 2 2 Origin-1,cab (P 2a 2a)
    110: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [17] P 2 21 2 Origin-1,bca (P 2 2b)
    111: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [18] P 21 21 2 Origin-1,abc (P 2 2ab)
    112: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [18] P 2 21 21 Origin-1,cab (P 2bc 2)
    113: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [18] P 21 2 21 Origin-1,bca (P 2ac 2ac)
    114: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [19] P 21 21 21 (P 2ac 2ab)
    115: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [20] C 2 2 21  Origin-1,abc (C 2c 2)
    116: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [20] A 21 2 2  Origin-1,cba (A 2a 2a)
    117: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [20] B 2 21 2  Origin-1,bca (B 2 2b)
    118: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [21] C 2 2 2 Origin-1,abc (C 2 2)
    119: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [21] A 2 2 2 Origin-1,cab (A 2 2)
    120: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [21] B 2 2 2 Origin-1,bca (B 2 2)
    121: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [22] F 2 2 2 (F 2 2)
    122: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [23] I 2 2 2 (I 2 2)
    123: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [24] I 21 21 21 (I 2b 2c)
    124: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [25] P m m 2 (P 2 -2)
    125: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [25] P 2 m m (P -2 2)
    126: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [25] P m 2 m (P -2 -2)
    127: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [26] P m c 21 (P 2c -2)
    128: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [26] P c m 21 (P 2c -2c)
    129: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [26] P 21 m a (P -2a 2a)
    130: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [26] P 21 a m (P -2 2a)
    131: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [26] P b 21 m (P -2 -2b)
    132: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [26] P m 21 b (P -2b -2)
    133: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [27] P c c 2 (P 2 -2c)
    134: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [27] P 2 a a (P -2a 2)
    135: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [27] P b 2 b (P -2b -2b)
    136: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [28] P m a 2 (P 2 -2a)
    137: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [28] P b m 2 (P 2 -2b)
    138: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [28] P 2 m b (P -2b 2)
    139: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [28] P 2 c m (P -2c 2)
    140: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [28] P c 2 m (P -2c -2c)
    141: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [28] P m 2 a (P -2a -2a)
    142: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [29] P c a 21 (P 2c -2ac)
    143: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [29] P b c 21 (P 2c -2b)
    144: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [29] P 21 a b (P -2b 2a)
    145: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [29] P 21 c a (P -2ac 2a)
    146: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [29] P c 21 b (P -2bc -2c)
    147: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [29] P b 21 a (P -2a -2ab)
    148: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [30] P n c 2 (P 2 -2bc)
    149: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [30] P c n 2 (P 2 -2ac)
    150: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [30] P 2 n a (P -2ac 2)
    151: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [30] P 2 a n (P -2ab 2)
    152: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [30] P b 2 n (P -2ab -2ab)
    153: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [30] P n 2 b (P -2bc -2bc)
    154: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [31] P m n 21 (P 2ac -2)
    155: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [31] P n m 21 (P 2bc -2bc)
    156: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [31] P 21 m n (P -2ab 2ab)
    157: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [31] P 21 n m (P -2 2ac)
    158: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [31] P n 21 m (P -2 -2bc)
    159: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [31] P m 21 n (P -2ab -2)
    160: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [32] P b a 2 (P 2 -2ab)
    161: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [32] P 2 c b (P -2bc 2)
    162: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [32] P c 2 a (P -2ac -2ac)
    163: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [33] P n a 21 (P 2c -2n)
    164: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [33] P b n 21 (P 2c -2ab)
    165: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [33] P 21 n b (P -2bc 2a)
    166: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [33] P 21 c n (P -2n 2a)
    167: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [33] P c 21 n (P -2n -2ac)
    168: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps),
    # [33] P n 21 a (P -2ac -2n)
    169: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [34] P n n 2 (P 2 -2n)
    170: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [34] P 2 n n (P -2n 2)
    171: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [34] P n 2 n (P -2n -2n)
    172: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [35] C m m 2 (C 2 -2)
    173: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [35] A 2 m m (A -2 2)
    174: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [35] B m 2 m (B -2 -2)
    175: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [36] C m c 21 (C 2c -2)
    176: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [36] C c m 21 (C 2c -2c)
    177: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [36] A 21 m a (A -2a 2a)
    178: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [36] A 21 a m (A -2 2a)
    179: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [36] B b 21 m (B -2 -2b)
    180: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [36] B m 21 b (B -2b -2)
    181: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [37] C c c 2 (C 2 -2c)
    182: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [37] A 2 a a (A -2a 2)
    183: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [37] B b 2 b (B -2b -2b)
    184: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [38] A m m 2 (A 2 -2)
    185: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [38] B m m 2 (B 2 -2)
    186: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [38] B 2 m m (B -2 2)
    187: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [38] C 2 m m (C -2 2)
    188: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [38] C m 2 m (C -2 -2)
    189: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [38] A m 2 m (A -2 -2)
    190: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [39] A b m 2 (A 2 -2b)
    191: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [39] B m a 2 (B 2 -2a)
    192: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [39] B 2 c m (B -2a 2)
    193: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [39] C 2 m b (C -2a 2)
    194: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [39] C m 2 a (C -2a -2a)
    195: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [39] A c 2 m (A -2b -2b)
    196: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < 1/2 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [40] A m a 2 (A 2 -2a)
    197: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [40] B b m 2 (B 2 -2b)
    198: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [40] B 2 m b (B -2b 2)
    199: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [40] C 2 c m (C -2c 2)
    200: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [40] C c 2 m (C -2c -2c)
    201: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < 1/2 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [40] A m 2 a (A -2a -2a)
    202: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [41] A b a 2 (A 2 -2ab)
    203: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [41] B b a 2 (B 2 -2ab)
    204: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [41] B 2 c b (B -2ab 2)
    205: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [41] C 2 c b (C -2ac 2)
    206: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [41] C c 2 a (C -2ac -2ac)
    207: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [41] A c 2 a (A -2ab -2ab)
    208: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [42] F m m 2 (F 2 -2)
    209: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [42] F 2 m m (F -2 2)
    210: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [42] F m 2 m (F -2 -2)
    211: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [43] F d d 2 (F 2 -2d)
    212: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [43] F 2 d d (F -2d 2)
    213: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/8 + eps) and (-eps <= z <= 1 + eps),
    # [43] F d 2 d (F -2d -2d)
    214: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [44] I m m 2 (I 2 -2)
    215: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [44] I 2 m m (I -2 2)
    216: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [44] I m 2 m (I -2 -2)
    217: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [45] I b a 2 (I 2 -2c)
    218: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [45] I 2 c b (I -2a 2)
    219: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [45] I c 2 a (I -2b -2b)
    220: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [46] I m a 2 (I 2 -2a)
    221: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [46] I b m 2 (I 2 -2b)
    222: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (1/4 - eps <= y <= 3/4 + eps) and (-eps <= z <= 1 + eps),
    # [46] I 2 m b (I -2b 2)
    223: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [46] I 2 c m (I -2c 2)
    224: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [46] I c 2 m (I -2c -2c)
    225: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y < 1/2 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [46] I m 2 a (I -2a -2a)
    226: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [47] P m m m (-P 2 2)
    227: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [48] P n n n Origin choice 1 (P 2 2 -1n)
    228: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [48] P n n n Origin choice 2 (-P 2ab 2bc)
    229: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [49] P c c m  (-P 2 2c)
    230: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [49] P m a a (-P 2a 2)
    231: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [49] P b m b (-P 2b 2b)
    232: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [50] P b a n Origin choice 1 (P 2 2 -1ab)
    233: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [50] P b a n Origin choice 2 (-P 2ab 2b)
    234: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [50] P n c b Origin choice 1 (P 2 2 -1bc)
    235: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [50] P n c b Origin choice 2 (-P 2b 2bc)
    236: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [50] P c n a Origin choice 1 (P 2 2 -1ac)
    237: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [50] P c n a Origin choice 2 (-P 2a 2c)
    238: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [51] P m m a (-P 2a 2a)
    239: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [51] P m m b (-P 2b 2)
    240: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [51] P b m m (-P 2 2b)
    241: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [51] P c m m (-P 2c 2c)
    242: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [51] P m c m (-P 2c 2)
    243: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [51] P m a m (-P 2 2a)
    244: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [52] P n n a (-P 2a 2bc)
    245: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [52] P n n b (-P 2b 2n)
    246: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [52] P b n n (-P 2n 2b)
    247: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (1/4 - eps <= y <= 3/4 + eps) and (-eps <= z <= 1 + eps),
    # [52] P c n n (-P 2ab 2c)
    248: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [52] P n c n (-P 2ab 2n)
    249: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [52] P n a n (-P 2n 2bc)
    250: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (1/4 - eps <= y <= 3/4 + eps) and (-eps <= z <= 1 + eps),
    # [53] P m n a (-P 2ac 2)
    251: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [53] Pnmb (-P 2bc 2bc)
    252: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [53] P b m n (-P 2ab 2ab)
    253: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [53] P c n m (-P 2 2ac)
    254: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [53] P n c m (-P 2 2bc)
    255: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [53] P m a n (-P 2ab 2)
    256: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [54] P c c a (-P 2a 2ac)
    257: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [54] P c c b (-P 2b 2c)
    258: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [54] P b a a (-P 2a 2b)
    259: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [54] P c a a (-P 2ac 2c)
    260: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [54] P b c b (-P 2bc 2b)
    261: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [54] P b a b (-P 2b 2ab)
    262: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [55] P b a m (-P 2 2ab)
    263: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [55] P m c b (-P 2bc 2)
    264: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [55] P c m a (-P 2ac 2ac)
    265: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [56] P c c n (-P 2ab 2ac)
    266: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps),
    # [56] P n a a (-P 2ac 2bc)
    267: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [56] P b n b (-P 2bc 2ab)
    268: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [57] P b c m (-P 2c 2b)
    269: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [57] P c a m (-P 2c 2ac)
    270: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [57] P m c a (-P 2ac 2a)
    271: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [57] P m a b (-P 2b 2a)
    272: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [57] P b m a (-P 2a 2ab)
    273: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [57] P c m b (-P 2bc 2c)
    274: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [58] P n n m (-P 2 2n)
    275: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [58] P m n n (-P 2n 2)
    276: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [58] P n m n (-P 2n 2n)
    277: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [59] P m m n Origin choice 1 (P 2 2ab -1ab)
    278: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [59] P m m n Origin choice 2 (-P 2ab 2a)
    279: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [59] P n m m Origin choice 1 (P 2bc 2 -1bc)
    280: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [59] P n m m Origin choice 2 (-P 2c 2bc)
    281: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [59] P m n m Origin choice 1 (P 2ac 2ac -1ac)
    282: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [59] P m n m Origin choice 2 (-P 2c 2a)
    283: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [60] P b c n (-P 2n 2ab)
    284: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [60] P c a n (-P 2n 2c)
    285: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [60] P n c a (-P 2a 2n)
    286: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [60] P n a b (-P 2bc 2n)
    287: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [60] P b n a (-P 2ac 2b)
    288: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [60] P c n b (-P 2b 2ac)
    289: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [61] P b c a (-P 2ac 2ab)
    290: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [61] P c a b (-P 2bc 2ac)
    291: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [62] P n m a (-P 2ac 2n)      zeolites: MFI
    292: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [62] P m n b (-P 2bc 2a)
    293: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [62] P b n m (-P 2c 2ab)
    294: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [62] P c m n (-P 2n 2ac)
    295: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (1/4 - eps <= y <= 3/4 + eps) and (-eps <= z <= 1 + eps),
    # [62] P m c n (-P 2n 2a)
    296: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (1/4 - eps <= y <= 3/4 + eps) and (-eps <= z <= 1 + eps),
    # [62] P n a m (-P 2c 2n)
    297: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/4 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [63] C m c m (-C 2c 2)
    298: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [63] C c m m (-C 2c 2c)
    299: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [63] A m m a (-A 2a 2a)
    300: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [63] A m a m (-A 2 2a)
    301: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [63] B b m m (-B 2 2b)
    302: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [63] B m m b (-B 2b 2)
    303: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [64] C m c a (-C 2ac 2)
    304: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [64] C c m b (-C 2ac 2ac)
    305: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [64] A b m a (-A 2ab 2ab)
    306: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [64] A c a m (-A 2 2ab)
    307: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y < 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [64] B b c m (-B 2 2ab)
    308: lambda x, y, z, eps: (-eps <= x < 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [64] B m a b (-B 2ab 2)
    309: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [65] C m m m (-C 2 2)
    310: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [65] A m m m (-A 2 2)
    311: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [65] B m m m (-B 2 2)
    312: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [66] C c c m (-C 2 2c)
    313: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [66] A m a a (-A 2a 2)
    314: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [66] B b m b (-B 2b 2b)
    315: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [67] C m m a (-C 2a 2)
    316: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [67] C m m b (-C 2a 2a)
    317: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [67] A b m m (-A 2b 2b)
    318: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [67] A c m m (-A 2 2b)
    319: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [67] B m c m (-B 2 2a)
    320: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [67] B m a m (-B 2a 2)
    321: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [68] C c c a Origin choice 1 (C 2 2 -1ac)
    322: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [68] C c c a Origin choice 2 (-C 2a 2ac)
    323: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [68] C c c b Origin choice 1 (C 2 2 -1bc)
    324: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [68] C c c b Origin choice 2 (-C 2b 2c)
    325: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [68] A b a a Origin choice 1 (A 2 2 -1ac)
    326: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [68] A b a a Origin choice 2 (-A 2a 2b)
    327: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [68] A c a a Origin choice 1 (A 2 2 -1ab)
    328: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [68] A c a a Origin choice 2 (-A 2ab 2b)
    329: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [68] B b c b Origin choice 1 (B 2 2 -1ab)
    330: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [68] B b c b Origin choice 2 (-B 2ab 2b)
    331: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [68] B b a b Origin choice 1 (B 2 2 -1ab)
    332: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [68] B b a b Origin choice 2 (-B 2b 2ab)
    333: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [69] F m m m (-F 2 2)
    334: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [70] F d d d:1 Origin choice 1 (F 2 2 -1d)
    335: lambda x, y, z, eps: (-eps <= x <= 1/8 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [70] F d d d:2 Origin choice 2 (-F 2uv 2vw)
    336: lambda x, y, z, eps: (-eps <= x <= 1/8 + eps) and (-1/8 - eps <= y <= 1/8 + eps) and (-eps <= z <= 1 + eps),
    # [71] I m m m (-I 2 2)
    337: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [72] I b a m (-I 2 2c)
    338: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [72] I m c b (-I 2a 2)
    339: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [72] I c m a (-I 2b 2b)
    340: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [73] I b c a (-I 2b 2c)
    341: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [73] I c a b (-I 2a 2b)
    342: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [74] I m m a (-I 2b 2)
    343: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [74] I m m b (-I 2a 2a)
    344: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [74] I b m m (-I 2c 2c)
    345: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [74] I c m m (-I 2 2b)
    346: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (1/4 - eps <= y <= 3/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [74] I m c m (-I 2 2a)
    347: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (1/4 - eps <= y <= 3/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [74] I m a m (-I 2c 2)
    348: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (1/4 - eps <= z <= 3/4 + eps),
    # [75] P 4 (P 4)
    349: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [76] P 41 (P 4w)
    350: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [77] P 42 (P 4c)
    351: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [78] P 43 (P 4cw)
    352: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [79] I 4 (I 4)
    353: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [80] I 41 (I 4bw)
    354: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [81] P -4 (P -4)
    355: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps),
    # [82] I -4 (I -4)
    356: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [83] P 4/m (-P 4)
    357: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [84] P 42/m (-P 4c)
    358: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [85] P 4/n Origin choice 1 (P 4ab -1ab)
    359: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [85] P 4/n Origin choice 2 (-P 4a)
    360: lambda x, y, z, eps: (-1/4 - eps <= x <= 1/4 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [86] P 42/n Origin choice 1 (P 4n -1n)
    361: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [86] P 42/n Origin choice 2 (-P 4bc)
    362: lambda x, y, z, eps: (-1/4 - eps <= x <= 1/4 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps),
    # [87] I 4/m (-I 4)
    363: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [88] I 41/a Origin choice 1 (I 4bw -1bw)
    364: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [88] I 41/a Origin choice 2 (-I 4ad)
    365: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1 + eps),
    # [89] P 4 2 2 (P 4 2)
    366: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [90] P 4 21 2 (P 4ab 2ab)
    367: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [91] P 41 2 2 (P 4w 2c)
    368: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/8 + eps),
    # [92] P 41 21 2 (P 4abw 2nw)
    369: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/8 + eps),
    # [93] P 42 2 2 (P 4c 2)
    370: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [94] P 42 21 2 (P 4n 2n)
    371: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [95] P 43 2 2 (P 4cw 2c)
    372: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/8 + eps),
    # [96] P 43 21 2 (P 4nw 2abw)
    373: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/8 + eps),
    # [97] I 4 2 2 (I 4 2)
    374: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [98] I 41 2 2 (I 4bw 2bw)
    375: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/8 + eps),
    # [99] P 4 m m (P 4 -2)
    376: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps) and (x <= y + eps),
    # [100] P 4 b m (P 4 -2ab)
    377: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps) and (y <= 1/2 - x + eps),
    # [101] P 42 c m (P 4c -2c)
    378: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps) and (x <= y + eps),
    # [102] P 42 n m (P 4n -2n)
    379: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps) and (x <= y + eps),
    # [103] P 4 c c (P 4 -2c)
    380: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [104] P 4 n c (P 4 -2n)
    381: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [105] P 42 m c (P 4c -2)
    382: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [106] P 42 b c (P 4c -2ab)
    383: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [107] I 4 m m (I 4 -2)
    384: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (x <= y + eps),
    # [108] I 4 c m (I 4 -2c)
    385: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (y <= 1/2 - x + eps),
    # [109] I 41 m d (I 4bw -2)
    386: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [110] I 41 c d (I 4bw -2c)
    387: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [111] P -4 2 m (P -4 2)
    388: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps) and (x <= y + eps),
    # [112] P -4 2 c (P -4 2c)
    389: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [113] P -4 21 m (P -4 2ab)
    390: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps) and (y <= 1/2 - x + eps),
    # [114] P -4 21 c (P -4 2n)
    391: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [115] P -4 m 2 (P -4 -2)
    392: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [116] P -4 c 2 (P -4 -2c)
    393: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [117] P -4 b 2 (P -4 -2ab)
    394: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps),
    # [118] P -4 n 2 (P -4 -2n)
    395: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps),
    # [119] I -4 m 2 (I -4 -2)
    396: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [120] I -4 c 2 (I -4 -2c)
    397: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [121] I -4 2 m (I -4 2)
    398: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (x <= y + eps),
    # [122] I -4 2 d (I -4 2bw)
    399: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/8 + eps),
    # [123] P 4/m m m (-P 4 2)
    400: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (x <= y + eps),
    # [124] P 4/m c c (-P 4 2c)
    401: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [125] P 4/n b m Origin choice 1 (P 4 2 -1ab)
    402: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (y <= 1/2 - x + eps),
    # [125] P 4/n b m Origin choice 2 (-P 4a 2b)
    403: lambda x, y, z, eps: (-1/4 - eps <= x <= 1/4 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps) and (x <= -y + eps),
    # [126] P 4/n n c Origin choice 1 (P 4 2 -1n)
    404: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [126] P 4/n n c Origin choice 2 (-P 4a 2bc)
    405: lambda x, y, z, eps: (-1/4 - eps <= x <= 1/4 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-eps <= z <= 1/4 + eps),
    # [127] P 4/m b m (-P 4 2ab)
    406: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (y <= 1/2 - x + eps),
    # [128] P 4/m n c (-P 4 2n)
    407: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [129] P 4/n m m Origin choice 1 (P 4ab 2ab -1ab)
    408: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (y <= 1/2 - x + eps),
    # [129] P 4/n m m Origin choice 2 (-P 4a 2a)
    409: lambda x, y, z, eps: (-1/4 - eps <= x <= 1/4 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps) and (x <= y + eps),
    # [130] P 4/n c c Origin choice 1 (P 4ab 2n -1ab)
    410: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [130] P 4/n c c Origin choice 2 (-P 4a 2ac)
    411: lambda x, y, z, eps: (-1/4 - eps <= x <= 1/4 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-eps <= z <= 1/4 + eps),
    # [131] P 42/m m c (-P 4c 2)
    412: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [132] P 42/m c m (-P 4c 2c)
    413: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (x <= y + eps),
    # [133] P 42/n b c Origin choice 1 (P 4n 2c -1n)
    414: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [133] P 42/n b c Origin choice 2 (-P 4ac 2b)
    415: lambda x, y, z, eps: (-1/4 - eps <= x <= 1/4 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-eps <= z <= 1/4 + eps),
    # [134] P 42/n n m Origin choice 1 (P 4n 2 -1n)
    416: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/4 + eps) and (x <= y + eps) and (y <= 1 - x + eps),
    # [134] P 42/n n m Origin choice 2 (-P 4ac 2bc)
    417: lambda x, y, z, eps: (-1/4 - eps <= x <= 1/4 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps) and (x <= -y + eps),
    # [135] P 42/m b c (-P 4c 2ab)
    418: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [136] P 42/m n m (-P 4n 2n)
    419: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (x <= y + eps),
    # [137] P 42/n m c Origin choice 1 (P 4n 2n -1n)
    420: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps),
    # [137] P 42/n m c Origin choice 2 (-P 4ac 2a)
    421: lambda x, y, z, eps: (-1/4 - eps <= x <= 1/4 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-eps <= z <= 1/4 + eps),
    # [138] P 42/n c m Origin choice 1 (P 4n 2ab -1n)
    422: lambda x, y, z, eps: (-eps <= x <= 1/4 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps) and (x <= y + eps) and (y <= 1/2 - x + eps),
    # [138] P 42/n c m Origin choice 2 (-P 4ac 2ac)
    423: lambda x, y, z, eps: (-1/4 - eps <= x <= 1/4 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-eps <= z <= 1/2 + eps) and (x <= y + eps),
    # [139] I 4/m m m (-I 4 2)
    424: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps) and (x <= y + eps),
    # [140] I 4/m c m (-I 4 2c)
    425: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps) and (y <= 1/2 - x + eps),
    # [141] I 41/a m d Origin choice 1 (I 4bw 2bw -1bw)
    426: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/8 + eps),
    # [141] I 41/a m d Origin choice 2 (-I 4bd 2)
    427: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-eps <= z <= 1/8 + eps),
    # [142] I 41/a c d Origin choice 1 (I 4bw 2aw -1bw)
    428: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/8 + eps),
    # [142] I 41/a c d Origin choice 2 (-I 4bd 2c)
    429: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-eps <= z <= 1/8 + eps),
    # [143] P 3 (P 3)
    430: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [144] P 31 (P 31)
    431: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/3 + eps),
    # [145] P 32 (P 32)
    432: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/3 + eps),
    # [146] R 3 hexagonal axes (R 3)
    433: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/3 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [146] R 3 Rhombohedral axes (P 3*)
    434: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps) and (z <= min(x, y) + eps),
    # [147] P -3 (P -3)
    435: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/2 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [148] R-3 hexagonal axes (-R 3)
    436: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/6 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [148] R -3 Rhombohedral axes (-P 3*)
    437: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps) and (z <= min(x, y, 1 - x, 1 - y) + eps),
    # [149] P 3 1 2 (P 3 2)
    438: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/2 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [150] P 3 2 1 (P 3 2")
    439: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/2 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [151] P 31 1 2 (P 31 2 (0 0 4))
    440: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/6 + eps),
    # [152] P 31 2 1 (P 31 2")
    441: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/6 + eps),
    # [153] P 32 1 2 (P 32 2 (0 0 2))
    442: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/6 + eps),
    # [154] P 32 2 1 (P 32 2")
    443: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/6 + eps),
    # [155] R 3 2 Hexagonal axes (R 3 2")
    444: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/6 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [155] R 3 2 Rhombohedral axes (P 3* 2)
    445: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps) and (z <= min(x, y, 1 - x, 1 - y) + eps),
    # [156] P 3 m 1 (P 3 -2")
    446: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1 + eps) and (x <= 2 * y + eps) and (y <= min(1 - x, 2 * x) + eps),
    # [157] P 3 1 m (P 3 -2)
    447: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps) and (x <= (y + 1)/2 + eps) and (y <= min(1 - x, x) + eps),
    # [158] P 3 c 1 (P 3 -2"c)
    448: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/2 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [159] P 3 1 c (P 3 -2c)
    449: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/2 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [160] R 3 m Hexagonal axes (R 3 -2")
    450: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/3 + eps) and (x <= 2 * y + eps) and (y <= min(1 - x, 2 * x) + eps),
    # [160] R 3 m Rhombohedral axes (P 3* -2)
    451: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps) and (y <= x + eps) and (z <= y + eps),
    # [161] R 3 c Hexagonal axes (R 3 -2"c)
    452: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/6 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [161] R 3 c Rhombohedral axes (P 3* -2n)
    453: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1 + eps) and (y <= x + eps) and (z <= y + eps),
    # [162] P -3 1 m (-P 3 2)
    454: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, x) + eps),
    # [163] P -3 1 c (-P 3 2c)
    455: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/4 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [164] P -3 m 1 (-P 3 2")
    456: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 1/3 + eps) and (-eps <= z <= 1 + eps) and (x <= (1 + y)/2 + eps) and (y <= x/2 + eps),
    # [165] P -3 c 1 (-P 3 2"c)
    457: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/4 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [166] R -3 m Hexagonal axes (-R 3 2")  zeolites: CHA
    458: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/6 + eps) and (x <= 2 * y + eps) and (y <= min(1 - x, 2 * x) + eps),
    # [166] R -3 m Rhombohedral axes (-P 3* 2)
    459: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps) and (y <= x + eps) and (z <= min(y, 1 - x) + eps),
    # [167] R -3 c Hexagonal axes (-R 3 2"c)
    460: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/12 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [167] R -3 c Rhombohedral axes (-P 3* 2n)
    461: lambda x, y, z, eps: (1/4 - eps <= x <= 5/4 + eps) and (1/4 - eps <= y <= 5/4 + eps) and (1/4 - eps <= z <= 3/4 + eps) and (y <= x + eps) and (z <= min(y, 3/2 - x) + eps),
    # [168] P 6 (P 6)
    462: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, x) + eps),
    # [169] P 61 (P 61)
    463: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/6 + eps),
    # [170] P 65 (P 65)
    464: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/6 + eps),
    # [171] P 62 (P 62)
    465: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/3 + eps) and (y <= x + eps),
    # [172] P 64 (P 64)
    466: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/3 + eps) and (y <= x + eps),
    # [173] P 63 (P 6c)
    467: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/2 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [174] P -6 (P -6)
    468: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/2 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [175] P6/m (-P 6)
    469: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, x) + eps),
    # [176] P 63/m (-P 6c)
    470: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/4 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [177] P 6 2 2 (P 6 2)
    471: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, x) + eps),
    # [178] P 61 2 2 (P 61 2 (0 0 5))
    472: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/12 + eps),
    # [179] P 65 2 2 (P 65 2 (0 0 1))
    473: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/12 + eps),
    # [180] P 62 2 2 (P 62 2 (0 0 4))
    474: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/6 + eps) and (y <= x + eps),
    # [181] P 64 2 2 (P 64 2 (0 0 2))
    475: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/6 + eps) and (y <= x + eps),
    # [182] P 63 2 2 (P 6c 2c)
    476: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/4 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [183] P 6 m m (P 6 -2)
    477: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 1/3 + eps) and (-eps <= z <= 1 + eps) and (x <= (1 + y)/2 + eps) and (y <= x/2 + eps),
    # [184] P 6 c c (P 6 -2c)
    478: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, x) + eps),
    # [185] P 63 c m (P 6c -2)
    479: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, x) + eps),
    # [186] P 63 m c (P 6c -2c)
    480: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 1/3 + eps) and (-eps <= z <= 1 + eps) and (x <= (1 + y)/2 + eps) and (y <= x/2 + eps),
    # [187] P -6 m 2 (P -6 2)
    481: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/2 + eps) and (x <= 2 * y + eps) and (y <= min(1 - x, 2 * x) + eps),
    # [188] P -6 c 2 (P -6c 2)
    482: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/4 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [189] P -6 2 m (P -6 -2)
    483: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, x) + eps),
    # [190] P -6 2 c (P -6c -2c)
    484: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/4 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, (1 + x)/2) + eps),
    # [191] P 6/m m m (-P 6 2)
    485: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 1/3 + eps) and (-eps <= z <= 1/2 + eps) and (x <= (1 + y)/2 + eps) and (y <= x/2 + eps),
    # [192] P 6/m c c (-P 6 2c)
    486: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, x) + eps),
    # [193] P 63/m c m (-P 6c 2)
    487: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps) and (x <= (1 + y)/2 + eps) and (y <= min(1 - x, x) + eps),
    # [194] P 63/m m c (-P 6c 2c)
    488: lambda x, y, z, eps: (-eps <= x <= 2/3 + eps) and (-eps <= y <= 2/3 + eps) and (-eps <= z <= 1/4 + eps) and (x <= 2 * y + eps) and (y <= min(1 - x, 2 * x) + eps),
    # [195] P 2 3 (P 2 2 3)
    489: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1 + eps) and (-eps <= z <= 1/2 + eps) and (y <= 1 - x + eps) and (z <= min(x, y) + eps),
    # [196] F 2 3 (F 2 2 3)
    490: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-1/4 - eps <= z <= 1/4 + eps) and (y <= x + eps) and (max(x - 1/2, -y) - eps <= z <= min(1/2 - x, y) + eps),
    # [197] I 2 3 (I 2 2 3)
    491: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (y <= min(x, 1 - x) + eps) and (z <= y + eps),
    # [198] P 21 3 (P 2ac 2ab 3)
    492: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-1/2 - eps <= z <= 1/2 + eps) and (max(x - 1/2, -y) - eps <= z <= min(x, y) + eps),
    # [199] I 21 3 (I 2b 2c 3)
    493: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (z <= min(x, y) + eps),
    # [200] P m -3 (-P 2 2 3)
    494: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (z <= min(x, y) + eps),
    # [201] P n -3 Origin choice 1 (P 2 2 3 -1n)
    495: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (y <= min(x, 1 - x) + eps) and (z <= y + eps),
    # [201] P n -3 Origin choice 2 (-P 2ab 2bc 3)
    496: lambda x, y, z, eps: (-1/4 - eps <= x <= 3/4 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-1/4 - eps <= z <= 1/4 + eps) and (y <= min(x, 1 - x) + eps) and (z <= y + eps),
    # [202] F m -3 (-F 2 2 3)
    497: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps) and (y <= x + eps) and (z <= min(1/2 - x, y) + eps),
    # [203] F d -3 Origin choice 1 (F 2 2 3 -1d)
    498: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-1/4 - eps <= z <= 1/4 + eps) and (y <= min(x, 1/2 - x) + eps) and (-y - eps <= z <= y + eps),
    # [203] F d -3 Origin choice 2 (-F 2uv 2vw 3)
    499: lambda x, y, z, eps: (-1/8 - eps <= x <= 3/8 + eps) and (-1/8 - eps <= y <= 1/8 + eps) and (-3/8 - eps <= z <= 1/8 + eps) and (y <= min(x, 1/4 - x) + eps) and (-y - 1/4 - eps <= z <= y + eps),
    # [204] I m -3 (-I 2 2 3)
    500: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps) and (z <= min(x, 1/2 - x, y, 1/2 - y) + eps),
    # [205] P a -3 (-P 2ac 2ab 3)
    501: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (z <= min(x, y) + eps),
    # [206] I a -3 (-I 2b 2c 3)
    502: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps) and (z <= min(x, 1/2 - x, 1/2 - y) + eps),
    # [207] P 4 3 2 (P 4 2 3)
    503: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (y <= min(x, 1 - x) + eps) and (z <= y + eps),
    # [208] P 42 3 2 (P 4n 2 3)
    504: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-1/4 - eps <= z <= 1/4 + eps) and (max(-x, x - 1/2, -y, y - 1/2) - eps <= z <= min(x, 1/2 - x, 1/2 - y) + eps),
    # [209] F 4 3 2 (F 4 2 3)
    505: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-1/4 - eps <= z <= 1/4 + eps) and (y <= min(x, 1/2 - x) + eps) and (-y - eps <= z <= y + eps),
    # [210] F 41 3 2 (F 4d 2 3)
    506: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-1/8 - eps <= y <= 1/8 + eps) and (-1/8 - eps <= z <= 1/8 + eps) and (y <= min(x, 1/2 - x) + eps) and (-y - eps <= z <= min(x, 1/2 - x) + eps),
    # [211] I 4 3 2 (I 4 2 3)
    507: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps) and (z <= min(x, 1/2 - x, y, 1/2 - y) + eps),
    # [212] P 43 3 2 (P 4acd 2ab 3)
    508: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 3/4 + eps) and (-1/2 - eps <= z <= 1/4 + eps) and (max(-y, x - 1/2) - eps <= z <= min(-y + 1/2, 2 * x - y, 2 * y - x, y - 2 * x + 1/2) + eps),
    # [213] P 41 3 2 (P 4bd 2ab 3)
    509: lambda x, y, z, eps: (-1/4 - eps <= x <= 1/2 + eps) and (-eps <= y <= 3/4 + eps) and (-eps <= z <= 1/2 + eps) and (x - eps <= y <= x + 1/2 + eps) and ((y - x)/2 - eps <= z <= min(y, (-4 * x - 2 * y + 3)/2, (3 - 2 * x - 2 * y)/4) + eps),
    # [214] I 41 3 2 (I 4bd 2c 3)
    510: lambda x, y, z, eps: (-3/8 - eps <= x <= 1/8 + eps) and (-1/8 - eps <= y <= 1/8 + eps) and (-1/8 - eps <= z <= 3/8 + eps) and (max(x, y, y - x - 1/8) - eps <= z <= y + 1/4 + eps),
    # [215] P -4 3 m (P -4 2 3)
    511: lambda x, y, z, eps: (-eps <= x <= 1 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (y <= min(x, 1 - x) + eps) and (z <= y + eps),
    # [216] F -4 3 m (F -4 2 3)
    512: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-1/4 - eps <= z <= 1/4 + eps) and (y <= min(x, 1 - x) + eps) and (-y - eps <= z <= y + eps),
    # [217] I -4 3 m (I -4 2 3)
    513: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (y <= x + eps) and (z <= y + eps),
    # [218] P -4 3 n (P -4n 2 3)
    514: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (z <= min(x, y) + eps),
    # [219] F -4 3 c (F -4a 2 3)
    515: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-1/4 - eps <= z <= 1/4 + eps) and (y <= min(x, 1/2 - x) + eps) and (-y - eps <= z <= y + eps),
    # [220] I -4 3 d (I -4bd 2c 3)
    516: lambda x, y, z, eps: (1/4 - eps <= x <= 1/2 + eps) and (1/4 - eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (z <= min(x, y) + eps),
    # [221] P m -3 m (-P 4 2 3)
    517: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (y <= x + eps) and (z <= y + eps),
    # [222] P n -3 n Origin choice 1 (P 4 2 3 -1n)
    518: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-1/4 - eps <= z <= 1/4 + eps) and (y <= x + eps) and (max(x - 1/2, -y) - eps <= z <= min(1/2 - x, y) + eps),
    # [222] P n -3 n Origin choice 2 (-P 4a 2bc 3)
    519: lambda x, y, z, eps: (-1/4 - eps <= x <= 1/4 + eps) and (-1/4 - eps <= y <= 1/4 + eps) and (-1/2 - eps <= z <= eps) and (y <= x + eps) and (max(x - 1/2, -y - 1/2) - eps <= z <= min(-x, y) + eps),
    # [223] P m -3 n (-P 4n 2 3)
    520: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/2 + eps) and (z <= min(x, 1/2 - x, 1/2 - y) + eps),
    # [224] P n -3 m Origin choice 1 (P 4n 2 3 -1n)
    521: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-1/4 - eps <= z <= 1/4 + eps) and (y <= x + eps) and (max(x - 1/2, -y) - eps <= z <= min(1/2 - x, y) + eps),
    # [224] P n -3 m Origin choice 2 (-P 4bc 2bc 3)
    522: lambda x, y, z, eps: (1/4 - eps <= x <= 3/4 + eps) and (1/4 - eps <= y <= 3/4 + eps) and (-eps <= z <= 1/2 + eps) and (y <= x + eps) and (max(x - 1/2, 1/2 - y) - eps <= z <= min(y, 1 - x) + eps),
    # [225] F m -3 m (-F 4 2 3)
    523: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/4 + eps) and (y <= min(x, 1/2 - x) + eps) and (z <= y + eps),
    # [226] F m -3 c (-F 4a 2 3)
    524: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/4 + eps) and (-eps <= z <= 1/4 + eps) and (y <= min(x, 1/2 - x) + eps) and (z <= y + eps),
    # [227] F d -3 m Origin choice 1 (F 4d 2 3 -1d)
    525: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/8 + eps) and (-1/8 - eps <= z <= 1/8 + eps) and (y <= min(1/2 - x, x) + eps) and (-y - eps <= z <= y + eps),
    # [227] F d -3 m Origin choice 2 (-F 4vw 2vw 3)      e.g. FAU, MIL-100, 101
    526: lambda x, y, z, eps: (-1/8 - eps <= x <= 3/8 + eps) and (-1/8 - eps <= y <= eps) and (-1/4 - eps <= z <= eps) and (y <= min(1/4 - x, x) + eps) and (-y - 1/4 - eps <= z <= y + eps),
    # [228] F d -3 c Origin choice 1 (F 4d 2 3 -1ad)
    527: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/8 + eps) and (-1/8 - eps <= z <= 1/8 + eps) and (y <= min(1/2 - x, x) + eps) and (-y - eps <= z <= y + eps),
    # [228] F d -3 c Origin choice 2 (-F 4ud 2vw 3)
    528: lambda x, y, z, eps: (-1/8 - eps <= x <= 3/8 + eps) and (-1/8 - eps <= y <= eps) and (-1/4 - eps <= z <= eps) and (y <= min(1/4 - x, x) + eps) and (-y - 1/4 - eps <= z <= y + eps),
    # [229] I m -3 m (-I 4 2 3)
    529: lambda x, y, z, eps: (-eps <= x <= 1/2 + eps) and (-eps <= y <= 1/2 + eps) and (-eps <= z <= 1/4 + eps) and (y <= x + eps) and (z <= min(1/2 - x, y) + eps),
    # [230] I a -3 d (-I 4bd 2c 3)
    530: lambda x, y, z, eps: (-1/8 - eps <= x <= 1/8 + eps) and (-1/8 - eps <= y <= 1/8 + eps) and (-eps <= z <= 1/4 + eps) and (max(x, -x, y, -y) <= z + eps),
}
