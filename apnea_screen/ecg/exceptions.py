class EcgError(Exception):
    """Base exception for ECG upload handling."""


class FileReadError(EcgError):
    """Raised when an uploaded ECG file cannot be read from disk."""


class AnalysisInProgressError(EcgError):
    """Raised when a new upload is submitted while one is still being analyzed."""
