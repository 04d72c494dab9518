import warnings

import pytest

from zkpdl.bn import Bn

from zkpdl.exceptions import InsecureParametersWarning
from zkpdl.utils import ensure_bn, RandomSampler, SecureRandomSampler
from zkpdl.zp_group import ZpGroup


class ScriptedSampler(RandomSampler):
    """Returns a fixed sequence of values, checking each against the requested bound."""

    def __init__(self, values):
        self.values = list(values)
        self.bounds = []

    def uniform_below(self, n):
        self.bounds.append(int(n))
        value = self.values.pop(0)
        assert 0 <= value < n
        return ensure_bn(value)


class FixedOrderSampler(SecureRandomSampler):
    """Secure sampler, except that coin flips always give ``order``."""

    def __init__(self, order):
        self.order = order

    def uniform_below(self, n):
        if n == 2:
            return Bn(self.order)
        return super().uniform_below(n)


@pytest.fixture
def toy_group():
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", InsecureParametersWarning)
        return ZpGroup(23, 11, g=4)


@pytest.fixture(scope="session")
def group():
    p = Bn.get_prime(256, safe=1)
    q = ensure_bn((int(p) - 1) // 2)
    while True:
        g = p.random().mod_pow(Bn(2), p)
        if g > 1:
            return ZpGroup(p, q, g=g)


@pytest.fixture
def scripted_sampler():
    return ScriptedSampler


@pytest.fixture
def fixed_order_sampler():
    return FixedOrderSampler
