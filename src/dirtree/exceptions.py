class InvalidPatternError(Exception):
    """
    Exception raised when an exclusion pattern cannot be compiled.

    The CLI reports this as a warning and continues with the remaining patterns, so
    a single malformed pattern never stops a run.

    Attributes:
        pattern (str): The pattern text that failed to compile.
        reason (str): The compiler's description of the problem.

    Example:
        >>> error = InvalidPatternError("[a-", "unterminated character set at position 0")
        >>> str(error)
        "Invalid regex pattern '[a-': unterminated character set at position 0"
    """

    def __init__(self, pattern: str, reason: str) -> None:
        """
        Initialize the exception with the offending pattern.

        Args:
            pattern (str): The pattern text that failed to compile.
            reason (str): Why compilation failed.
        """
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid regex pattern '{pattern}': {reason}")
