class InvalidProfileError(ValueError):
    """Raised when a questionnaire answer is outside its allowed domain."""
