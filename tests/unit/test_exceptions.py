#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_exceptions.py
"""Unit tests for the exception hierarchy."""

import pytest

from richtext2md.exceptions import (
    InvalidOptionsError,
    MalformedDocumentError,
    RenderingError,
    Richtext2MdError,
    SerializationError,
    ValidationError,
)
from richtext2md.options import BaseRendererOptions, MarkdownRendererOptions


@pytest.mark.unit
class TestExceptions:
    """Tests for exception attributes and inheritance."""

    @pytest.mark.parametrize(
        "exception_class", [ValidationError, MalformedDocumentError, RenderingError, SerializationError]
    )
    def test_all_derive_from_base(self, exception_class):
        assert issubclass(exception_class, Richtext2MdError)

    def test_original_error_kept(self):
        cause = ValueError("bad")
        error = Richtext2MdError("wrapped", original_error=cause)
        assert error.original_error is cause
        assert str(error) == "wrapped"

    def test_malformed_document_carries_node(self):
        node = object()
        error = MalformedDocumentError("bad node", node=node)
        assert error.node is node
        assert error.parameter_name == "node"
        assert isinstance(error, ValidationError)

    def test_rendering_stage(self):
        assert RenderingError("failed", rendering_stage="write").rendering_stage == "write"

    def test_invalid_options(self):
        error = InvalidOptionsError(
            renderer_name="markdown",
            expected_type=MarkdownRendererOptions,
            received_type=BaseRendererOptions,
        )
        assert error.renderer_name == "markdown"
        assert error.expected_type is MarkdownRendererOptions
        assert "MarkdownRendererOptions" in str(error)
