"""Exception hierarchy for seqops.

Every error derives from both :class:`SeqOpsError` and the builtin exception
that best describes it, so callers may catch either.
"""

__all__ = [
    "SeqOpsError",
    "ShapeError",
    "SequenceTypeError",
    "LengthMismatchError",
    "MaskValueError",
    "DomainError",
]


class SeqOpsError(Exception):
    """Base class for all seqops errors."""


class ShapeError(SeqOpsError, ValueError):
    """Input is a scalar or has more than one dimension."""


class SequenceTypeError(SeqOpsError, TypeError):
    """Input elements are not real numbers."""


class LengthMismatchError(SeqOpsError, ValueError):
    """Two sequences that must be aligned position-wise differ in length."""


class MaskValueError(SeqOpsError, ValueError):
    """A mask holds values other than 0/1 or False/True."""


class DomainError(SeqOpsError, ValueError):
    """Input lies outside the domain of the requested operation."""
