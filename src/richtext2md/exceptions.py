#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the richtext2md library.

Exception Hierarchy
-------------------
- Richtext2MdError (base exception)

  - ValidationError (parameter/option/attribute validation)
    - InvalidOptionsError (wrong options class for renderer)
    - MalformedDocumentError (structurally invalid document tree)

  - RenderingError (output generation failures)

  - SerializationError (snapshot JSON/dict conversion failures)

"""

from typing import Any


class Richtext2MdError(Exception):
    """Base exception class for all richtext2md-specific errors.

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


class ValidationError(Richtext2MdError):
    """Exception raised for invalid input parameters, options or attributes.

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
    """Exception raised when a renderer receives an options object of the wrong type.

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
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error with type details."""
        if message is None:
            message = (
                f"Renderer '{renderer_name}' expected options of type "
                f"'{expected_type.__name__}' but received '{received_type.__name__}'."
            )
        super().__init__(
            message,
            parameter_name="options",
            parameter_value=received_type,
            original_error=original_error,
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class MalformedDocumentError(ValidationError):
    """Exception raised when the document tree violates its structural invariants.

    Raised for unknown node variants reaching the renderer, children attached to
    leaves, Blocks without a container attribute and similar shape errors. These
    indicate a programming error in whatever built the tree.

    Parameters
    ----------
    message : str
        Description of the structural problem
    node : object, optional
        The offending node, if available

    """

    def __init__(self, message: str, node: Any = None, original_error: Exception | None = None):
        """Initialize the error with the offending node."""
        super().__init__(message, parameter_name="node", parameter_value=node, original_error=original_error)
        self.node = node


class RenderingError(Richtext2MdError):
    """Exception raised when rendering output fails.

    Parameters
    ----------
    message : str
        Description of the rendering error
    rendering_stage : str, optional
        Stage where rendering failed (e.g. "render", "write")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        rendering_stage: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the rendering error with stage information."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class SerializationError(Richtext2MdError):
    """Exception raised when a document snapshot cannot be (de)serialized."""


__all__ = [
    "Richtext2MdError",
    "ValidationError",
    "InvalidOptionsError",
    "MalformedDocumentError",
    "RenderingError",
    "SerializationError",
]
