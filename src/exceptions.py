"""Centralized exception hierarchy for PromptFlow.

Usage:
    from exceptions import InputError, ClipboardError

    raise InputError("Cannot read prompts.txt")
    raise ClipboardError("xclip not available")
"""


class PromptFlowError(Exception):
    """Base exception for all PromptFlow errors."""
    pass


class ConfigurationError(PromptFlowError):
    """Raised when configuration is invalid.

    Examples:
        - Non-numeric PROMPTFLOW_MAX_FILE_SIZE
        - Negative size ceiling
    """
    pass


class InputError(PromptFlowError):
    """Raised when an input source cannot be read.

    Examples:
        - File does not exist
        - Path is a directory where a file was expected
    """
    pass


class FileTooLargeError(InputError):
    """Raised when an input file exceeds the size ceiling."""

    def __init__(self, source: str, size: int, limit: int):
        super().__init__(f"{source} is {size} bytes (limit {limit} bytes)")
        self.source = source
        self.size = size
        self.limit = limit


class LaunchError(PromptFlowError):
    """Raised when handing a prompt off to the generation site fails."""
    pass


class ClipboardError(LaunchError):
    """Raised when the prompt could not be written to the clipboard.

    The browser is never opened after this error.
    """
    pass
