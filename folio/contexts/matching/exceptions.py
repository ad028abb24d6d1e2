"""Custom exceptions for the matching context."""


class EmptyJobDescriptionError(ValueError):
    """Raised when a blank job description is submitted for analysis."""

    def __init__(self, message: str = "Job description is empty"):
        super().__init__(message)
