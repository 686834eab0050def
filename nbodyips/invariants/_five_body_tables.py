"""
Orbit tables of the 5-body invariants. Edges are indexed in lexicographic
order 12, 13, 14, 15, 23, 24, 25, 34, 35, 45 -> 0, ..., 9. Each table is a
tuple of index columns, the invariant is sum_k prod_c x[table[c][k]], i.e.
the sum over one orbit of edge monomials under S5. Generated offline.
"""

# Pairs of edges sharing a vertex, degree 2
ADJACENT_PAIRS = (
    (
        0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 2, 2, 2, 2, 3, 3, 3, 4, 4, 4, 4, 5, 5,
        5, 6, 6, 7, 7, 8,
    ),
    (
        1, 2, 3, 4, 5, 6, 2, 3, 4, 7, 8, 3, 5, 7, 9, 6, 8, 9, 5, 6, 7, 8, 6, 7,
        9, 8, 9, 8, 9, 9,
    ),
)

# Three edges meeting at a vertex, degree 3
STARS_3 = (
    (
        0, 0, 0, 1, 0, 0, 0, 1, 1, 2, 3, 2, 3, 1, 2, 3, 4, 4, 5, 6,
    ),
    (
        1, 1, 2, 2, 4, 4, 5, 4, 4, 5, 6, 5, 6, 7, 7, 8, 5, 7, 7, 8,
    ),
    (
        3, 2, 3, 3, 6, 5, 6, 8, 7, 9, 9, 7, 8, 8, 9, 9, 6, 8, 9, 9,
    ),
)

# Degree 4
PRIMARY_4 = (
    (
        0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 0, 0, 0, 0, 0, 0, 1, 1, 2, 3, 2, 3,
        1, 1, 2, 3, 2, 3, 1, 1, 2, 3, 2, 3, 0, 0, 0, 1, 1, 2, 2, 1, 1, 0, 0, 0,
        3, 2, 1, 3, 2, 3, 2, 1, 1, 0, 0, 0,
    ),
    (
        1, 1, 1, 1, 2, 2, 1, 1, 2, 2, 2, 2, 4, 4, 4, 4, 5, 5, 4, 4, 5, 6, 5, 6,
        4, 4, 5, 5, 4, 4, 6, 5, 6, 5, 4, 4, 3, 2, 1, 3, 2, 3, 3, 2, 3, 1, 2, 3,
        4, 4, 4, 4, 4, 5, 6, 5, 6, 4, 5, 6,
    ),
    (
        2, 3, 2, 3, 3, 3, 2, 3, 3, 3, 3, 3, 5, 6, 5, 6, 6, 6, 7, 8, 7, 7, 8, 7,
        6, 5, 6, 6, 5, 6, 7, 7, 7, 8, 7, 8, 4, 4, 5, 4, 4, 5, 6, 5, 6, 7, 7, 8,
        5, 5, 5, 7, 7, 7, 8, 7, 8, 7, 7, 8,
    ),
    (
        9, 9, 8, 7, 8, 7, 6, 5, 4, 6, 5, 4, 9, 9, 8, 7, 8, 7, 9, 9, 8, 8, 9, 9,
        7, 8, 7, 8, 9, 9, 8, 8, 9, 9, 9, 9, 5, 6, 6, 7, 8, 7, 8, 9, 9, 8, 9, 9,
        6, 6, 6, 8, 8, 9, 9, 9, 9, 8, 9, 9,
    ),
)

# Degree 5
PRIMARY_5 = (
    (
        0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 2, 3, 2, 3, 1, 2, 3, 0, 0, 0, 1, 1, 1,
        1, 2, 2, 0, 0, 0,
    ),
    (
        1, 1, 1, 1, 1, 1, 4, 4, 4, 4, 4, 4, 4, 5, 5, 4, 5, 6, 2, 3, 1, 2, 3, 2,
        3, 3, 3, 1, 2, 3,
    ),
    (
        2, 2, 2, 2, 2, 2, 5, 5, 5, 5, 6, 5, 6, 6, 6, 7, 7, 7, 4, 4, 4, 4, 4, 5,
        6, 5, 6, 4, 5, 6,
    ),
    (
        3, 3, 3, 3, 3, 3, 6, 6, 6, 7, 7, 7, 8, 7, 8, 8, 8, 8, 5, 5, 5, 7, 7, 7,
        8, 7, 8, 7, 7, 8,
    ),
    (
        7, 8, 9, 5, 6, 4, 7, 8, 9, 8, 8, 9, 9, 9, 9, 9, 9, 9, 6, 6, 6, 8, 8, 9,
        9, 9, 9, 8, 9, 9,
    ),
)

# ------------------- secondary invariants (provisional) -------------------

TRIANGLES = (
    (
        0, 0, 0, 1, 1, 2, 4, 4, 5, 7,
    ),
    (
        1, 2, 3, 2, 3, 3, 5, 6, 6, 8,
    ),
    (
        4, 5, 6, 7, 8, 9, 7, 8, 9, 9,
    ),
)

PATHS_3 = (
    (
        0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1,
        1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3,
        4, 4, 4, 4, 4, 4, 5, 5, 5, 5, 6, 6,
    ),
    (
        1, 1, 1, 1, 2, 2, 2, 2, 3, 3, 3, 3, 4, 4, 5, 5, 6, 6, 2, 2, 2, 2, 3, 3,
        3, 3, 4, 4, 5, 6, 7, 8, 3, 3, 3, 3, 4, 4, 5, 6, 7, 8, 4, 4, 5, 5, 7, 7,
        5, 5, 6, 6, 7, 8, 6, 6, 7, 8, 7, 7,
    ),
    (
        5, 6, 7, 8, 4, 6, 7, 9, 4, 5, 8, 9, 7, 8, 7, 9, 8, 9, 4, 5, 8, 9, 4, 6,
        7, 9, 5, 6, 7, 8, 9, 9, 5, 6, 7, 8, 5, 7, 6, 9, 8, 9, 6, 8, 6, 9, 8, 9,
        8, 9, 7, 9, 9, 9, 7, 8, 8, 9, 8, 9,
    ),
)

CYCLES_4 = (
    (
        0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 4, 4, 5,
    ),
    (
        1, 1, 2, 2, 3, 3, 2, 2, 3, 3, 3, 3, 5, 6, 6,
    ),
    (
        5, 6, 4, 6, 4, 5, 4, 8, 4, 7, 5, 7, 8, 7, 7,
    ),
    (
        7, 8, 7, 9, 8, 9, 5, 9, 6, 9, 6, 8, 9, 9, 8,
    ),
)

PATHS_4 = (
    (
        0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
        1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 2,
        2, 2, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3,
    ),
    (
        1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 4, 4, 5, 5, 6, 6,
        2, 2, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 4, 4, 5, 5, 5, 6, 3, 3, 3, 3, 3, 3,
        4, 4, 4, 4, 5, 6, 4, 4, 4, 4, 5, 5,
    ),
    (
        5, 5, 6, 6, 7, 8, 4, 4, 6, 6, 7, 8, 4, 4, 5, 5, 7, 7, 7, 8, 7, 8, 7, 7,
        4, 4, 5, 5, 6, 6, 4, 4, 5, 5, 5, 6, 5, 6, 6, 6, 8, 7, 4, 4, 4, 4, 5, 6,
        5, 6, 6, 8, 6, 7, 5, 5, 6, 7, 6, 7,
    ),
    (
        8, 9, 7, 9, 9, 9, 8, 9, 7, 8, 8, 9, 7, 9, 7, 8, 8, 9, 9, 9, 8, 9, 8, 9,
        6, 9, 6, 8, 8, 9, 5, 9, 6, 7, 9, 7, 9, 9, 7, 8, 9, 9, 5, 6, 7, 8, 8, 7,
        8, 7, 9, 9, 8, 8, 8, 9, 7, 9, 7, 8,
    ),
)

PAWS = (
    (
        0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
        1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 2, 2, 3, 3, 3,
        4, 4, 4, 4, 4, 4, 4, 4, 5, 5, 5, 6,
    ),
    (
        1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 2, 2, 3, 3, 3, 3, 4, 4, 5,
        2, 2, 2, 2, 2, 2, 2, 3, 3, 3, 3, 4, 4, 7, 3, 3, 3, 3, 4, 5, 7, 4, 5, 7,
        5, 5, 5, 5, 5, 6, 6, 7, 6, 6, 7, 7,
    ),
    (
        2, 2, 2, 3, 3, 3, 4, 4, 4, 4, 3, 3, 3, 4, 5, 5, 5, 4, 5, 6, 6, 5, 6, 6,
        3, 3, 3, 4, 5, 7, 7, 4, 6, 7, 8, 5, 6, 8, 5, 6, 7, 8, 5, 6, 8, 6, 6, 8,
        6, 6, 6, 7, 7, 7, 8, 8, 7, 8, 8, 8,
    ),
    (
        4, 5, 7, 4, 6, 8, 5, 6, 7, 8, 5, 6, 9, 5, 6, 7, 9, 6, 6, 8, 9, 7, 8, 9,
        7, 8, 9, 7, 7, 8, 9, 8, 8, 8, 9, 7, 8, 9, 9, 9, 9, 9, 7, 9, 9, 8, 9, 9,
        7, 8, 9, 8, 9, 8, 9, 9, 9, 9, 9, 9,
    ),
)

CYCLES_5 = (
    (
        0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 2, 2,
    ),
    (
        1, 1, 2, 2, 3, 3, 2, 2, 3, 3, 3, 3,
    ),
    (
        5, 6, 4, 6, 4, 5, 4, 5, 4, 5, 4, 4,
    ),
    (
        8, 7, 8, 7, 7, 7, 6, 6, 5, 6, 5, 6,
    ),
    (
        9, 9, 9, 8, 9, 8, 9, 8, 9, 7, 8, 7,
    ),
)
