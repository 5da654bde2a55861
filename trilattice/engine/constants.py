"""Numerical thresholds and search defaults.

The two epsilons are independent. PIVOT_EPSILON decides when elimination
treats a pivot column as zero; NONDEGENERACY_EPSILON decides whether a finished
minor counts as nonzero.
"""

# Largest remaining |pivot| below this makes the determinant exactly 0
PIVOT_EPSILON = 1e-10

# Every principal minor must exceed this in magnitude for a coloring to pass
NONDEGENERACY_EPSILON = 1e-4

# Candidates processed per controller step
DEFAULT_CHUNK_SIZE = 1000
