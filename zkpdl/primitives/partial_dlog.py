r"""
ZK proof of partial knowledge of a discrete logarithm.

The prover shows :math:`PK\{ (x_1, x_2): b_1 = a_1^{x_1} \vee b_2 = a_2^{x_2} \}` while only
knowing :math:`x_1`. The second branch is simulated: its challenge and response are drawn first
and its commitment is solved for. The verifier's challenge :math:`c` is split as
:math:`c = c_1 \oplus c_2`, so the prover can fix :math:`c_2` in advance but must answer
:math:`c_1` honestly. The two branches are sent in random order.

Challenges are bit strings of width ``challenge_bits(q)``, the bit length of the subgroup order.

See "`Proofs of Partial Knowledge and Simplified Design of Witness Hiding Protocols`_" by Cramer,
Damgård and Schoenmakers, 1994 for the details.

.. _`Proofs of Partial Knowledge and Simplified Design of Witness Hiding Protocols`:
    https://doi.org/10.1007/3-540-48658-5_19

"""
import warnings

from zkpdl.base import Prover, Verifier, Triple, SimulationTranscript
from zkpdl.exceptions import InvalidParameterError, InvalidStateError
from zkpdl.utils import ensure_bn, xor_bn, challenge_bound, SecureRandomSampler
from zkpdl.utils.debug import SigmaProtocol


def _check_exponent(group, value, name):
    value = ensure_bn(value)
    if not 0 <= value < group.subgroup_order():
        raise InvalidParameterError(
            "{} must lie in [0, {}), got {}".format(name, group.subgroup_order(), value)
        )
    return value


def _check_element(group, value, name):
    value = ensure_bn(value)
    if not 0 < value < group.modulus():
        raise InvalidParameterError(
            "{} must lie in [1, {}), got {}".format(name, group.modulus(), value)
        )
    return value


def _check_member(group, value, name):
    value = _check_element(group, value, name)
    if not group.is_element(value):
        raise InvalidParameterError(
            "{} is not in the subgroup of order {}".format(name, group.subgroup_order())
        )
    return value


def _check_triple(group, triple):
    if not isinstance(triple, Triple):
        raise InvalidParameterError("Expected a Triple. Got: {}".format(triple))
    for name in ("commitment", "base", "target"):
        _check_element(group, getattr(triple, name), name)
    return triple


def _check_challenge(group, value, name="challenge"):
    value = ensure_bn(value)
    if not 0 <= value < challenge_bound(group.subgroup_order()):
        raise InvalidParameterError("{} is wider than the challenge width".format(name))
    return value


def _solve_commitment(group, base, target, challenge, response):
    r"""
    Commitment :math:`x = base^z \cdot (target^c)^{-1}` that makes a chosen pair
    :math:`(c, z)` verify.
    """
    blinded = group.exponentiate(base, response)
    target_to_c = group.exponentiate(target, challenge)
    return group.multiply(blinded, group.inverse(target_to_c))


def _verify_triple(group, triple, challenge, response):
    left = group.exponentiate(triple.base, response)
    right = group.multiply(group.exponentiate(triple.target, challenge), triple.commitment)
    return left == right


def _check_responses(group, triple1, triple2, challenge, c1, z1, c2, z2):
    """
    Check the challenge split and both branch equations.

    Values outside their ranges make the proof fail, they never raise.
    """
    order = group.subgroup_order()
    bound = challenge_bound(order)
    try:
        c1, z1, c2, z2 = [ensure_bn(v) for v in (c1, z1, c2, z2)]
    except TypeError:
        return False
    for sub_challenge in (c1, c2):
        if not 0 <= sub_challenge < bound:
            return False
    for response in (z1, z2):
        if not 0 <= response < order:
            return False

    if xor_bn(c1, c2) != challenge:
        return False

    verified1 = _verify_triple(group, triple1, c1, z1)
    verified2 = _verify_triple(group, triple2, c2, z2)
    return verified1 and verified2


class PartialDLogProver(Prover):
    """
    Prover knowing :math:`x_1` such that :math:`b_1 = a_1^{x_1}`.

    Every instance produces exactly one proof: :py:meth:`initiate` once, then :py:meth:`respond`
    once.

    Args:
        group: :py:class:`zkpdl.zp_group.DLogGroup` in which both statements live.
        sampler: Source of randomness.
    """

    def __init__(self, group, sampler=None):
        super().__init__(group, sampler)
        self.secret1 = None
        self.a1 = None
        self.a2 = None
        self.r1 = None
        self.c2 = None
        self.z2 = None
        self.ord = None
        self.spent = False

    def initiate(self, secret1, a1, a2, b2, b1):
        """
        Commit to the real branch and simulate the other one.

        Args:
            secret1: Exponent with :math:`a_1^{secret_1} = b_1`.
            a1: Base of the real branch.
            a2: Base of the simulated branch.
            b2: Target of the simulated branch.
            b1: Target of the real branch.

        Returns:
            tuple: Two :py:class:`zkpdl.base.Triple`, the real one first or second at random.

        Raises:
            :py:class:`zkpdl.exceptions.InvalidStateError`: If the prover was already used.
            :py:class:`zkpdl.exceptions.InvalidParameterError`: If an input is out of range,
                or if ``a1`` or ``b1`` is outside the subgroup.
        """
        if self.spent or self.r1 is not None:
            raise InvalidStateError("Prover already initiated, use a fresh prover per proof")

        secret1 = _check_exponent(self.group, secret1, "secret1")
        a1 = _check_member(self.group, a1, "a1")
        a2 = _check_element(self.group, a2, "a2")
        b1 = _check_member(self.group, b1, "b1")
        b2 = _check_element(self.group, b2, "b2")
        if secret1 == 0:
            warnings.warn("Secret is zero, the statement b1 = a1^secret1 is trivial")

        self.secret1 = secret1
        self.a1 = a1
        self.a2 = a2
        self.r1 = self.get_randomizer()
        self.c2 = self.get_randomizer()
        self.z2 = self.get_randomizer()

        x1 = self.group.exponentiate(a1, self.r1)
        x2 = _solve_commitment(self.group, a2, b2, self.c2, self.z2)
        triple1 = Triple(x1, a1, b1)
        triple2 = Triple(x2, a2, b2)

        # The position must not reveal which secret we know.
        self.ord = int(self.sampler.uniform_below(2))
        if self.ord == 0:
            return triple1, triple2
        return triple2, triple1

    def respond(self, challenge):
        """
        Answer the verifier's challenge.

        Args:
            challenge: The verifier's challenge.

        Returns:
            tuple: :math:`(c_1, z_1, c_2, z_2)` ordered like the triples returned by
            :py:meth:`initiate`.
        """
        if self.spent:
            raise InvalidStateError("Prover already responded, use a fresh prover per proof")
        if self.r1 is None:
            raise InvalidStateError("Cannot respond before initiate")
        challenge = _check_challenge(self.group, challenge)

        c1 = xor_bn(challenge, self.c2)
        z1 = (self.r1 + c1 * self.secret1) % self.group.subgroup_order()

        self.spent = True
        self.secret1 = None
        self.r1 = None

        if self.ord == 0:
            return c1, z1, self.c2, self.z2
        return self.c2, self.z2, c1, z1


class PartialDLogVerifier(Verifier):
    """
    Verifier for the partial discrete-log knowledge proof.

    Does not know which of the two triples is the real one.
    """

    def __init__(self, group, sampler=None):
        super().__init__(group, sampler)
        self.triple1 = None
        self.triple2 = None

    def receive_commitments(self, triple1, triple2):
        """
        Store the prover's triples in the order received.

        Raises:
            :py:class:`zkpdl.exceptions.InvalidStateError`: If commitments were already received.
            :py:class:`zkpdl.exceptions.InvalidParameterError`: If a triple is malformed.
        """
        if self.triple1 is not None:
            raise InvalidStateError("Commitments already received")
        for triple in (triple1, triple2):
            _check_triple(self.group, triple)
        self.triple1 = triple1
        self.triple2 = triple2

    def send_challenge(self):
        if self.triple1 is None:
            raise InvalidStateError("Cannot issue a challenge before receiving commitments")
        if self.challenge is not None:
            raise InvalidStateError("Challenge already issued")
        return super().send_challenge()

    def verify(self, c1, z1, c2, z2):
        """
        Verify the prover's responses against the stored triples and challenge.

        Returns:
            bool: True if :math:`c_1 \\oplus c_2` is the issued challenge and both branch equations
            hold, False otherwise.
        """
        if self.challenge is None:
            raise InvalidStateError("Cannot verify before a challenge was issued")
        return _check_responses(
            self.group, self.triple1, self.triple2, self.challenge, c1, z1, c2, z2
        )

    def verify_simulation_consistency(self, transcript):
        """
        Check a complete transcript against its own challenge.

        Does not touch the state of the verifier.

        Args:
            transcript (:py:class:`zkpdl.base.SimulationTranscript`): Transcript to check.
        """
        triples = tuple(transcript.triples)
        if len(triples) != 2:
            raise InvalidParameterError("Expected two triples. Got: {}".format(len(triples)))
        triple1, triple2 = [_check_triple(self.group, triple) for triple in triples]
        responses = tuple(transcript.responses)
        if len(responses) != 4:
            return False
        return _check_responses(
            self.group, triple1, triple2, transcript.challenge, *responses
        )


def simulate_transcript(group, a1, b1, a2, b2, challenge=None, sampler=None):
    """
    Simulate an accepting transcript without knowing either discrete logarithm.

    Args:
        group: The group in which both statements live.
        a1, b1: Base and target of the first branch.
        a2, b2: Base and target of the second branch.
        challenge: Challenge to simulate for. Drawn uniformly if not given.
        sampler: Source of randomness.

    Returns:
        :py:class:`zkpdl.base.SimulationTranscript`
    """
    if sampler is None:
        sampler = SecureRandomSampler()
    a1 = _check_element(group, a1, "a1")
    b1 = _check_element(group, b1, "b1")
    a2 = _check_element(group, a2, "a2")
    b2 = _check_element(group, b2, "b2")

    order = group.subgroup_order()
    if challenge is None:
        challenge = sampler.uniform_below(order)
    challenge = _check_challenge(group, challenge)

    # Fix one sub-challenge freely and derive the other one, as the prover does.
    free_challenge = sampler.uniform_below(order)
    z1 = sampler.uniform_below(order)
    z2 = sampler.uniform_below(order)
    if int(sampler.uniform_below(2)) == 0:
        c1, c2 = free_challenge, xor_bn(challenge, free_challenge)
    else:
        c1, c2 = xor_bn(challenge, free_challenge), free_challenge

    triple1 = Triple(_solve_commitment(group, a1, b1, c1, z1), a1, b1)
    triple2 = Triple(_solve_commitment(group, a2, b2, c2, z2), a2, b2)
    return SimulationTranscript(
        triples=(triple1, triple2), challenge=challenge, responses=(c1, z1, c2, z2)
    )


def run(group, secret1, a1, a2, b2, sampler=None, verbose=False):
    """
    Run one complete proof of knowledge of ``secret1`` or of the discrete log of ``b2``.

    Example in the order-11 subgroup of :math:`\\mathbb{Z}_{23}^*`:

    >>> import warnings
    >>> from zkpdl.zp_group import ZpGroup
    >>> with warnings.catch_warnings():
    ...     warnings.simplefilter("ignore")
    ...     group = ZpGroup(23, 11, g=4)
    >>> run(group, 3, 4, 12, 9)
    True

    Args:
        group: The group in which both statements live.
        secret1: Exponent the prover knows, :math:`b_1` is computed as :math:`a_1^{secret_1}`.
        a1: Base of the known branch.
        a2: Base of the simulated branch.
        b2: Target of the simulated branch.
        sampler: Source of randomness shared by the prover and the verifier.
        verbose: Print the outcome.

    Returns:
        bool: True if the verifier accepted the proof.
    """
    if sampler is None:
        sampler = SecureRandomSampler()
    secret1 = _check_exponent(group, secret1, "secret1")
    a1 = _check_member(group, a1, "a1")
    b1 = group.exponentiate(a1, secret1)

    prover = PartialDLogProver(group, sampler=sampler)
    verifier = PartialDLogVerifier(group, sampler=sampler)
    protocol = SigmaProtocol(verifier, prover)
    return protocol.verify(secret1, a1, a2, b2, b1, verbose=verbose)
