"""
Sources of uniform randomness for provers and verifiers.
"""

import abc

from zkpdl.utils.misc import ensure_bn
from zkpdl.exceptions import InvalidParameterError


class RandomSampler(metaclass=abc.ABCMeta):
    """
    Draws uniform integers below a bound.

    Provers and verifiers take a sampler as a constructor argument, so tests can substitute a
    deterministic one.
    """

    @abc.abstractmethod
    def uniform_below(self, n):
        """
        Draw a uniform integer from :math:`[0, n)`.

        Raises:
            :py:class:`exceptions.InvalidParameterError`: If ``n`` is not positive.
        """
        pass


class SecureRandomSampler(RandomSampler):
    """
    Sampler backed by the OpenSSL CSPRNG through :py:meth:`petlib.bn.Bn.random`.

    Holds no state, so one instance can be shared between concurrent proofs.

    >>> sampler = SecureRandomSampler()
    >>> sampler.uniform_below(2) in (0, 1)
    True
    """

    def uniform_below(self, n):
        n = ensure_bn(n)
        if n <= 0:
            raise InvalidParameterError("Sampling bound must be positive, got {}".format(n))
        return n.random()
