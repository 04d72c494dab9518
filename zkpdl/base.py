"""
Common classes, including subclassable basic provers and verifiers.
"""

import abc

import attr

from zkpdl.utils import ensure_bn, SecureRandomSampler


@attr.s(frozen=True)
class Triple:
    r"""
    Public data of one branch of the disjunction.

    A proof for the branch is correct when :math:`base^z = commitment \cdot target^c` for the
    branch challenge :math:`c` and response :math:`z`.
    """

    commitment = attr.ib(converter=ensure_bn)
    base = attr.ib(converter=ensure_bn)
    target = attr.ib(converter=ensure_bn)


@attr.s
class SimulationTranscript:
    """
    Simulated proof transcript.
    """

    triples = attr.ib()
    challenge = attr.ib()
    responses = attr.ib()


class Prover(metaclass=abc.ABCMeta):
    """
    Abstract interface representing Prover used in sigma protocols.

    A prover instance produces exactly one proof.

    Args:
        group: The group in which the statement lives.
        sampler: Source of randomness. Defaults to :py:class:`utils.SecureRandomSampler`.
    """

    def __init__(self, group, sampler=None):
        self.group = group
        self.sampler = sampler if sampler is not None else SecureRandomSampler()

    def get_randomizer(self):
        """Draw a uniform exponent of the group."""
        return self.sampler.uniform_below(self.group.subgroup_order())

    @abc.abstractmethod
    def initiate(self, *args, **kwargs):
        """
        Construct the proof commitments.
        """
        pass

    @abc.abstractmethod
    def respond(self, challenge):
        """
        Compute the responses to the verifier's challenge.
        """
        pass


class Verifier(metaclass=abc.ABCMeta):
    """
    An abstract interface representing Verifier used in sigma protocols
    """

    def __init__(self, group, sampler=None):
        self.group = group
        self.sampler = sampler if sampler is not None else SecureRandomSampler()
        self.challenge = None

    @abc.abstractmethod
    def receive_commitments(self, *commitments):
        pass

    def send_challenge(self):
        """
        Generate and store a challenge.

        The challenge is chosen at random between 0 and the group order (excluded).
        """
        self.challenge = self.sampler.uniform_below(self.group.subgroup_order())
        return self.challenge

    @abc.abstractmethod
    def verify(self, *responses):
        """
        Verify the responses of an interactive sigma protocol.

        Returns:
            bool: True if verification succeeded, False otherwise.
        """
        pass
