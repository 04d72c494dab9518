"""
Big-number backend selection.

The backend can be overridden with the ``ZKPDL_BN_BACKEND`` environment variable.
"""
import os

BACKEND = os.environ.get("ZKPDL_BN_BACKEND", "openssl")

if BACKEND == "openssl":
    from petlib.bn import Bn
elif BACKEND == "relic":
    from petrelic.bn import Bn
else:
    raise NotImplementedError("Unknown big-number backend: {}".format(BACKEND))
