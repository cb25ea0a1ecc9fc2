"""
Renderer exceptions.

Custom exception classes for claude-pretty-printer.
"""


class PrettyPrinterError(Exception):
    """Base exception for renderer errors."""
    pass


class MessageValidationError(PrettyPrinterError):
    """A record lacks a field required for its kind, or has one in the wrong shape."""

    def __init__(self, field: str, detail: str = "", missing: bool = True) -> None:
        self.field = field
        self.missing = missing
        if missing:
            message = f"Message is missing required field '{field}'"
        else:
            message = f"Message has invalid field '{field}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InputError(PrettyPrinterError):
    """Error reading records from stdin, a file, or an inline argument."""
    pass
