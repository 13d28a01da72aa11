class ClassificationError(Exception):
    """Raised when the remote classification cannot produce a usable answer."""


class ClassificationNetworkError(ClassificationError):
    """Raised when the inference service cannot be reached or times out."""


class ClassificationResponseError(ClassificationError):
    """Raised when the inference service answers with a non-success status or bad body."""
