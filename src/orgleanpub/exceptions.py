#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the orgleanpub library.

Rendering favors silent degradation: unsupported content renders as empty
output instead of raising. The exceptions below cover misconfiguration,
opt-in strict rendering, and output failures.

Exception Hierarchy
-------------------
- OrgLeanpubError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a renderer)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

"""

from typing import Any


class OrgLeanpubError(Exception):
    """Base exception class for all orgleanpub-specific errors.

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


class ValidationError(OrgLeanpubError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
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


class InvalidOptionsError(ValidationError):
    """Exception raised when a renderer receives the wrong options class.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class RenderingError(OrgLeanpubError):
    """Exception raised when a document cannot be rendered.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    node_type : str, optional
        Class name of the node being rendered
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, node_type: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error=original_error)
        self.node_type = node_type


class OutputWriteError(RenderingError):
    """Exception raised when rendered output cannot be written.

    Parameters
    ----------
    message : str
        Description of the write failure
    output_path : str, optional
        Destination that could not be written
    original_error : Exception, optional
        The underlying I/O error

    """

    def __init__(self, message: str, output_path: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        super().__init__(message, original_error=original_error)
        self.output_path = output_path


__all__ = [
    "InvalidOptionsError",
    "OrgLeanpubError",
    "OutputWriteError",
    "RenderingError",
    "ValidationError",
]
