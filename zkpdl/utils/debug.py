"""
Utils that can be useful for debugging.
"""


class SigmaProtocol:
    """
    Partial discrete-log knowledge protocol runner.

    Passes the four messages between a fresh prover and a fresh verifier, in order: commitments,
    challenge, responses, verification.

    Args:
        verifier: :py:class:`zkpdl.primitives.partial_dlog.PartialDLogVerifier` object
        prover: :py:class:`zkpdl.primitives.partial_dlog.PartialDLogProver` object
    """

    def __init__(self, verifier, prover):
        self.verifier = verifier
        self.prover = prover

    def verify(self, secret1, a1, a2, b2, b1, verbose=True):
        """Run the verification process."""

        # Funky names.
        victor = self.verifier
        peggy = self.prover

        triple1, triple2 = peggy.initiate(secret1, a1, a2, b2, b1)
        victor.receive_commitments(triple1, triple2)
        challenge = victor.send_challenge()
        c1, z1, c2, z2 = peggy.respond(challenge)
        result = victor.verify(c1, z1, c2, z2)

        if verbose:
            if result:
                print("Verified for {0}".format(victor.__class__.__name__))
            else:
                print("Not verified for {0}".format(victor.__class__.__name__))

        return result
