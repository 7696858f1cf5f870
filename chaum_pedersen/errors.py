class InvalidParameterError(ValueError):
    """Raised when group parameters or protocol inputs violate a precondition."""


class SessionStateError(RuntimeError):
    """Raised when a proof session step is called out of order."""
