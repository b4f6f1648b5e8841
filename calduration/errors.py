"""Exception types raised by calduration.

Every error also subclasses the built-in exception a caller would naturally
catch (``ValueError`` or ``TypeError``), so existing handlers keep working.
"""


class CaldurationError(Exception):
    """Base class for all calduration errors."""


class UnknownUnitError(CaldurationError, ValueError):
    """Raised when a unit name is not present in the unit table."""


class UnknownProfileError(CaldurationError, ValueError):
    """Raised when a normalization profile name is not recognized."""


class UnknownSyntaxError(CaldurationError, ValueError):
    """Raised when a formatting preset name is not recognized."""


class InvalidDomainError(CaldurationError, ValueError):
    """Raised when ``Duration.get`` is asked for something other than a base domain."""


class InvalidOperandError(CaldurationError, TypeError):
    """Raised when a Duration is combined with an unsupported operand."""


class TimeOutOfBoundsError(CaldurationError, ValueError):
    """Raised when a value cannot be represented as a time of day."""


class DuplicateUnitError(CaldurationError, ValueError):
    """Raised when the same unit is requested twice under different spellings."""
