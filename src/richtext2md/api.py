#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext2md/api.py
"""Main entry point for converting rich-text documents to Markdown."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from richtext2md.ast.nodes import Root
from richtext2md.ast.serialization import dict_to_ast, json_to_ast
from richtext2md.exceptions import MalformedDocumentError
from richtext2md.options.markdown import MarkdownRendererOptions
from richtext2md.renderers.handlers import HandlerRegistry
from richtext2md.renderers.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)

DocumentSource = Union[Root, Mapping[str, Any], str]


def _resolve_document(source: DocumentSource) -> Root:
    """Turn a Root, snapshot dict or snapshot JSON string into a Root."""
    if isinstance(source, Root):
        return source
    if isinstance(source, str):
        document = json_to_ast(source)
    elif isinstance(source, Mapping):
        document = dict_to_ast(dict(source))
    else:
        raise MalformedDocumentError(f"Unsupported document source: {type(source).__name__}", node=source)

    if not isinstance(document, Root):
        raise MalformedDocumentError(
            f"Snapshot must describe a Root document, got {type(document).__name__}", node=document
        )
    return document


def to_markdown(
    document: DocumentSource,
    options: Optional[MarkdownRendererOptions] = None,
    handlers: Optional[HandlerRegistry] = None,
    **kwargs: Any,
) -> str:
    """Convert a rich-text document to Markdown.

    Each call uses its own renderer, so concurrent calls from several threads
    share no mutable state.

    Parameters
    ----------
    document : Root, dict or str
        Document tree, or a snapshot produced by
        :func:`~richtext2md.ast.serialization.ast_to_dict` /
        :func:`~richtext2md.ast.serialization.ast_to_json`
    options : MarkdownRendererOptions, optional
        Pre-configured rendering options
    handlers : HandlerRegistry, optional
        Custom attribute handler tables
    kwargs : Any
        Individual option overrides (e.g. ``escape_special=False``), applied on
        top of ``options``

    Returns
    -------
    str
        Markdown text

    Raises
    ------
    MalformedDocumentError
        If the document tree is structurally invalid
    SerializationError
        If a snapshot cannot be loaded
    TypeError
        If a keyword argument is not a rendering option

    Examples
    --------
        >>> from richtext2md.ast import Line, Root, Text
        >>> to_markdown(Root(children=[Line(children=[Text("a*b")])]))
        'a\\\\*b\\n\\n'

    """
    options = options or MarkdownRendererOptions()
    if kwargs:
        logger.debug("Overriding rendering options: %s", sorted(kwargs))
        options = options.create_updated(**kwargs)

    root = _resolve_document(document)
    return MarkdownRenderer(options, handlers=handlers).render_to_string(root)


__all__ = ["DocumentSource", "to_markdown"]
