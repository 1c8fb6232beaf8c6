"""
Errors raised by travel plan generation.

Only upstream failures and budget violations reach the caller; geocoding
misses and unmatched patterns are recovered inside the parser.
"""


class GenerationError(Exception):
    """Base class for failures of a generation call."""

    pass


class UpstreamEmptyError(GenerationError):
    """Raised when the model returned no usable text."""

    pass


class UpstreamFailureError(GenerationError):
    """Raised when the model call itself failed."""

    pass


class BudgetExceededError(GenerationError):
    """Raised when a parsed plan costs more than the requested budget."""

    def __init__(self, total: int, budget: int):
        self.total = total
        self.budget = budget
        super().__init__(f"Generated plan exceeds budget (₹{total} > ₹{budget})")
