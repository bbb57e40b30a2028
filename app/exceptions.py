from typing import Optional


class InvalidLoanInput(ValueError):
    """Raised when loan input cannot be turned into a calculable request."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
