# Subgroups of smaller order only make sense as test vectors.
MIN_SECURE_ORDER_BITS = 160
