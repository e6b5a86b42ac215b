#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext2md/renderers/base.py
"""Base classes for document tree renderers.

This module defines the abstract base class renderers inherit from, giving a
consistent ``render`` / ``render_to_string`` interface and the shared helpers
for options validation and output writing.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from richtext2md.ast.nodes import Root
from richtext2md.exceptions import InvalidOptionsError, RenderingError
from richtext2md.options.base import BaseRendererOptions
from richtext2md.utils.io_utils import OutputDestination, write_content


class BaseRenderer(ABC):
    """Abstract base class for all document tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class LeafCountRenderer(BaseRenderer):
        ...     def render_to_string(self, document):
        ...         return str(sum(1 for _ in iter_leaves(document)))

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, document: Root) -> str:
        """Render the document tree to a string.

        Parameters
        ----------
        document : Root
            Document to render

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render(self, document: Root, output: OutputDestination) -> None:
        """Render the document tree and write it to ``output``.

        Parameters
        ----------
        document : Root
            Document to render
        output : str, Path, IO[bytes] or IO[str]
            File path or open stream

        Raises
        ------
        RenderingError
            If the rendered text cannot be written

        """
        text = self.render_to_string(document)
        try:
            self.write_text_output(text, output)
        except OSError as e:
            raise RenderingError(
                f"Failed to write rendered output: {e}", rendering_stage="write", original_error=e
            ) from e

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: OutputDestination) -> None:
        """Write text output to a file path or IO stream (text or binary)."""
        write_content(text, output)
