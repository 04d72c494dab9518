"""
Prime-order subgroups of the multiplicative group of integers modulo a prime.

Example: the quadratic residues modulo the safe prime :math:`p = 23` form a subgroup of order
:math:`q = 11` generated by :math:`g = 4`:

>>> import warnings
>>> with warnings.catch_warnings():
...     warnings.simplefilter("ignore")
...     group = ZpGroup(23, 11, g=4)
>>> group.exponentiate(4, 3)
18
>>> group.multiply(18, group.inverse(18))
1
"""
import abc
import warnings

from zkpdl.consts import MIN_SECURE_ORDER_BITS
from zkpdl.exceptions import (
    GroupArithmeticError,
    InsecureParametersWarning,
    InvalidParameterError,
)
from zkpdl.utils import ensure_bn


class DLogGroup(metaclass=abc.ABCMeta):
    """
    Cyclic group of prime order in which discrete logarithms are hard.

    Provers and verifiers only use the group through these methods.
    """

    @abc.abstractmethod
    def exponentiate(self, base, exponent):
        pass

    @abc.abstractmethod
    def multiply(self, x, y):
        pass

    @abc.abstractmethod
    def inverse(self, x):
        pass

    @abc.abstractmethod
    def subgroup_order(self):
        pass

    @abc.abstractmethod
    def is_element(self, x):
        """Check membership in the prime-order subgroup."""
        pass

    @abc.abstractmethod
    def modulus(self):
        """Exclusive upper bound on the representation of group elements."""
        pass


class ZpGroup(DLogGroup):
    r"""
    Subgroup of order :math:`q` of :math:`\mathbb{Z}_p^*`.

    The arithmetic methods accept any element of :math:`\mathbb{Z}_p^*`. Use :py:meth:`is_element`
    to check membership in the order-:math:`q` subgroup.

    Args:
        p: Prime modulus.
        q: Prime order of the subgroup, a divisor of :math:`p - 1`.
        g: Optional generator of the subgroup.

    Raises:
        :py:class:`exceptions.InvalidParameterError`: If :math:`q` does not divide :math:`p - 1`,
            or if ``g`` does not generate the subgroup.
    """

    def __init__(self, p, q, g=None):
        self.p = ensure_bn(p)
        self.q = ensure_bn(q)
        if self.p <= 2 or self.q <= 1:
            raise InvalidParameterError("Group parameters too small: p={}, q={}".format(p, q))
        if (self.p - 1) % self.q != 0:
            raise InvalidParameterError("Subgroup order must divide p - 1")

        if self.q.num_bits() < MIN_SECURE_ORDER_BITS:
            warnings.warn(
                "Subgroup order has {} bits, less than {}. Do not use this group for anything "
                "but testing.".format(self.q.num_bits(), MIN_SECURE_ORDER_BITS),
                InsecureParametersWarning,
            )

        self.g = None
        if g is not None:
            g = ensure_bn(g)
            if g == 1 or not self.is_element(g):
                raise InvalidParameterError("{} does not generate the subgroup".format(g))
            self.g = g

    def modulus(self):
        return self.p

    def subgroup_order(self):
        return self.q

    def generator(self):
        if self.g is None:
            raise InvalidParameterError("Group was constructed without a generator")
        return self.g

    def is_element(self, x):
        """
        Check that ``x`` is in the subgroup of order :math:`q`.
        """
        x = ensure_bn(x)
        if not 0 < x < self.p:
            return False
        return x.mod_pow(self.q, self.p) == 1

    def _check_unit(self, x):
        x = ensure_bn(x)
        if not 0 < x < self.p:
            raise GroupArithmeticError("{} is not an element of Z_{}^*".format(x, self.p))
        return x

    def exponentiate(self, base, exponent):
        base = self._check_unit(base)
        exponent = ensure_bn(exponent)
        if exponent < 0:
            raise GroupArithmeticError("Negative exponent: {}".format(exponent))
        return base.mod_pow(exponent, self.p)

    def multiply(self, x, y):
        x = self._check_unit(x)
        y = self._check_unit(y)
        return x.mod_mul(y, self.p)

    def inverse(self, x):
        x = self._check_unit(x)
        return x.mod_inverse(self.p)

    def __eq__(self, other):
        if not isinstance(other, ZpGroup):
            return NotImplemented
        return self.p == other.p and self.q == other.q

    def __hash__(self):
        return hash((int(self.p), int(self.q)))

    def __repr__(self):
        return "ZpGroup(p={}, q={})".format(self.p, self.q)
