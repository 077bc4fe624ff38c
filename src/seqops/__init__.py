"""Vector-processing primitives over one-dimensional numeric sequences."""

import jax

from seqops.core.config import settings
from seqops.logger.logger import logger

__version__ = "0.1.0"

# Must run before any array is created so integer and float round trips stay exact.
if settings.ENABLE_X64:
    jax.config.update("jax_enable_x64", True)
    logger.debug("JAX 64-bit mode enabled")
