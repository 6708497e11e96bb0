"""Selection error taxonomy"""
from typing import Optional


class SelectionError(ValueError):
    """Base class for caller contract violations in the selection engine"""


class EmptyInputError(SelectionError):
    """Raised when a single-winner search is given zero elements"""

    def __init__(self, operation: str = "find_max"):
        self.operation = operation
        super().__init__(f"{operation}: sequence is empty")


class InsufficientInputError(SelectionError):
    """Raised when a pair search is given fewer elements than it needs"""

    def __init__(self, actual: int, required: int = 2, operation: Optional[str] = "find_top_two"):
        self.actual = actual
        self.required = required
        self.operation = operation
        super().__init__(
            f"{operation}: need at least {required} elements, got {actual}"
        )
