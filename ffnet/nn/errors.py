class ShapeError(ValueError):
    """Raised when tensor shapes or sequence lengths disagree."""


class PreconditionError(RuntimeError):
    """Raised when an operation runs before the state it depends on exists."""


class DomainError(ValueError):
    """Raised when a function is evaluated outside its numeric domain."""
