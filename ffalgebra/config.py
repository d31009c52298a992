# (C) 2024 Irreducible Inc.

import os

# Largest field order representable by an element code.
MAX_FIELD_ORDER = 2**63 - 1

# Prime fields up to this order precompute a full table of inverses.
INVERSE_TABLE_LIMIT = int(os.environ.get("FFALGEBRA_INVERSE_TABLE_LIMIT", 1 << 16))

# Consecutive unsuccessful random draws tolerated by equal-degree splitting.
EDF_MAX_ATTEMPTS = int(os.environ.get("FFALGEBRA_EDF_MAX_ATTEMPTS", 10_000))

# Width of the per-bit reduction table of binary fields, extended for wider fields.
BINARY_WORD_BITS = 64
