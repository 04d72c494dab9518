"""
Proof of knowledge of one of two discrete logarithms in a toy group:
PK{ (x1, x2): (b1 = a1^x1) | (b2 = a2^x2) }

The prover knows x1 = 3. The group is far too small to be secure.
"""
import warnings

from zkpdl import ZpGroup, PartialDLogProver, PartialDLogVerifier, run

with warnings.catch_warnings():
    warnings.simplefilter("ignore")
    group = ZpGroup(23, 11, g=4)

g = group.generator()
secret1 = 3
a1 = g
b1 = group.exponentiate(a1, secret1)

# Base and target of the branch we know nothing about.
a2 = group.exponentiate(g, 5)
b2 = 9

# Execute the protocol step by step.
prover = PartialDLogProver(group)
verifier = PartialDLogVerifier(group)

triple1, triple2 = prover.initiate(secret1, a1, a2, b2, b1)
verifier.receive_commitments(triple1, triple2)
challenge = verifier.send_challenge()
c1, z1, c2, z2 = prover.respond(challenge)
assert verifier.verify(c1, z1, c2, z2)

# Or in one call.
assert run(group, secret1, a1, a2, b2)
