"""
Anyone can produce an accepting transcript for a challenge they pick themselves, which is why the
verifier must choose the challenge after seeing the commitments.
"""
from zkpdl.bn import Bn

from zkpdl import ZpGroup, PartialDLogVerifier, simulate_transcript

# Safe prime p = 2q + 1.
p = Bn.get_prime(256, safe=1)
q = Bn.from_decimal(str((int(p) - 1) // 2))
group = ZpGroup(p, q, g=Bn(4))

g = group.generator()
a1, b1 = g, group.exponentiate(g, q.random())
a2, b2 = group.exponentiate(g, q.random()), group.exponentiate(g, q.random())

transcript = simulate_transcript(group, a1, b1, a2, b2)
assert PartialDLogVerifier(group).verify_simulation_consistency(transcript)
