__version__ = "0.1.0"
__title__ = "zkpdl"
__author__ = "Wouter Lueks, Bogdan Kulynych"
__email__ = "wouter.lueks@epfl.ch"
__url__ = "https://github.com/spring-epfl/zkpdl"
__license__ = "MIT"
__description__ = "Zero-knowledge proofs of partial knowledge of a discrete logarithm."
__copyright__ = "2020, Wouter Lueks, Bogdan Kulynych (EPFL SPRING Lab)"


from zkpdl.base import Triple, SimulationTranscript
from zkpdl.zp_group import ZpGroup
from zkpdl.utils import SecureRandomSampler
from zkpdl.primitives.partial_dlog import (
    PartialDLogProver,
    PartialDLogVerifier,
    run,
    simulate_transcript,
)
