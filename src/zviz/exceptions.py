#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the zviz library.

Building and rendering a markup tree has almost no failure modes: inputs are
plain text, coordinates and strings that are never parsed. The exceptions
below cover caller contract violations and the page writing step.

Exception Hierarchy
-------------------
- ZvizError (base exception)

  - ValidationError (builder contract violations)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

"""

from typing import Any


class ZvizError(Exception):
    """Base exception class for all zviz-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(ZvizError):
    """Exception raised when a builder method is used outside its contract.

    Examples of misuse covered here:
    - Setting an attribute on an untagged container
    - Negative table coordinates or header counts
    - Appending a node that already belongs to another container

    The tree is left unchanged when this is raised.

    Parameters
    ----------
    message : str
        Description of the violation
    parameter_name : str, optional
        Name of the offending parameter
    parameter_value : any, optional
        The offending value
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class RenderingError(ZvizError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing a rendered page fails.

    Parameters
    ----------
    file_path : str
        Path (or stream description) of the output that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


__all__ = [
    "ZvizError",
    "ValidationError",
    "RenderingError",
    "OutputWriteError",
]
