"""Core error types, configuration and input validation."""

from seqops.core.errors import (
    SeqOpsError,
    ShapeError,
    SequenceTypeError,
    LengthMismatchError,
    MaskValueError,
    DomainError,
)
from seqops.core.validation import as_vector, as_mask, check_same_length

__all__ = [
    "SeqOpsError",
    "ShapeError",
    "SequenceTypeError",
    "LengthMismatchError",
    "MaskValueError",
    "DomainError",
    "as_vector",
    "as_mask",
    "check_same_length",
]
