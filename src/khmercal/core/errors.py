class KhmerCalError(Exception):
    """Base error."""

class InvalidFormatError(KhmerCalError, TypeError):
    """Raised when a lunar date is formatted with something other than None or a str."""

class InternalConsistencyError(KhmerCalError, RuntimeError):
    """Raised when the date search reaches a state the month tables cannot produce."""

class UnsupportedOperationError(KhmerCalError, NotImplementedError):
    """Raised by operations that are part of the public surface but not implemented."""
