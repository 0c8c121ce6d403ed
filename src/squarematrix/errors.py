class MatrixError(Exception):
    """Base exception for matrix errors"""

    def __init__(self, message, details=None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class SizeMismatchError(MatrixError):
    """Raised when add/multiply operands have different dimensions"""

    def __init__(self, operation, left, right):
        super().__init__(
            f"Matrix sizes do not match for {operation}.",
            details={"operation": operation, "left": left, "right": right},
        )


class MatrixReadError(MatrixError):
    """Raised when a bulk read runs out of tokens or hits a bad one"""

    def __init__(self, message, values_read=0, expected=0):
        self.values_read = values_read
        self.expected = expected
        super().__init__(message, details={"values_read": values_read, "expected": expected})


class InputConfigError(MatrixError):
    """Bad filename, unreadable source or missing/non-positive N"""
