"""
Big-number helpers shared by the provers and verifiers.
"""

from zkpdl.bn import Bn


def ensure_bn(x):
    """
    Ensure that value is big number.

    Python integers of any size are converted exactly.

    >>> isinstance(ensure_bn(42), Bn)
    True
    >>> ensure_bn(2**200) == Bn(2).pow(200)
    True
    >>> x = Bn(42)
    >>> ensure_bn(x) is x
    True
    """
    if isinstance(x, Bn):
        return x
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError("Expected an integer or a Bn. Got: {}".format(type(x).__name__))
    return Bn.from_decimal(str(x))


def xor_bn(x, y):
    """
    Bitwise exclusive-or of two non-negative big numbers.

    >>> xor_bn(Bn(9), Bn(6))
    15
    >>> xor_bn(15, 6)
    9
    """
    return ensure_bn(int(ensure_bn(x)) ^ int(ensure_bn(y)))


def challenge_bits(order):
    """
    Width of the challenges used for XOR splitting in a subgroup of the given order.

    Every challenge and sub-challenge is treated as a bit string of exactly this width.

    >>> challenge_bits(11)
    4
    """
    return ensure_bn(order).num_bits()


def challenge_bound(order):
    """
    Exclusive upper bound on any challenge or sub-challenge.

    >>> challenge_bound(11)
    16
    """
    return Bn(2).pow(challenge_bits(order))
