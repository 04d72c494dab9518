from zkpdl.utils.misc import ensure_bn, xor_bn, challenge_bits, challenge_bound
from zkpdl.utils.sampler import RandomSampler, SecureRandomSampler
