#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext2md/ast/attributes.py
"""Formatting attributes and styles attached to document nodes.

An :class:`Attribute` is a formatting directive identified by its key, its
scope and its value. Two attributes are equal only when all three match, which
is what lets the renderer keep two adjacent links with different URLs apart.

A :class:`Style` is the read-only, key-unique mapping of attributes carried by
every node of the document tree.

Scopes
------
INLINE
    Applies to a run of leaves (bold, italic, link, ...).
BLOCK
    Applies to a whole line and changes its block-level wrapping (header,
    blockquote, list, indent).
CONTAINER
    Applies to a group of lines (code block).
IGNORED
    Recognised by nothing in the renderer; still counted when ordering markers.

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Union

from richtext2md.constants import (
    ATTR_BLOCKQUOTE,
    ATTR_BOLD,
    ATTR_CODE_BLOCK,
    ATTR_HEADER,
    ATTR_INDENT,
    ATTR_INLINE_CODE,
    ATTR_ITALIC,
    ATTR_LINK,
    ATTR_LIST,
    ATTR_STRIKETHROUGH,
)
from richtext2md.exceptions import ValidationError


class AttributeScope(Enum):
    """Classification of an attribute by the extent of text it applies to."""

    INLINE = "inline"
    BLOCK = "block"
    CONTAINER = "container"
    IGNORED = "ignored"


KNOWN_ATTRIBUTE_SCOPES: dict[str, AttributeScope] = {
    ATTR_BOLD: AttributeScope.INLINE,
    ATTR_ITALIC: AttributeScope.INLINE,
    ATTR_STRIKETHROUGH: AttributeScope.INLINE,
    ATTR_INLINE_CODE: AttributeScope.INLINE,
    ATTR_LINK: AttributeScope.INLINE,
    ATTR_HEADER: AttributeScope.BLOCK,
    ATTR_BLOCKQUOTE: AttributeScope.BLOCK,
    ATTR_LIST: AttributeScope.BLOCK,
    ATTR_INDENT: AttributeScope.BLOCK,
    ATTR_CODE_BLOCK: AttributeScope.CONTAINER,
}

_MISSING = object()


@dataclass(frozen=True)
class Attribute:
    """A single formatting directive.

    Parameters
    ----------
    key : str
        Attribute name (e.g. ``"bold"``, ``"header"``)
    scope : AttributeScope
        Extent the attribute applies to
    value : Any, default = None
        Attribute payload (header level, list kind, link URL...). Must be hashable.

    Examples
    --------
        >>> Attribute("link", AttributeScope.INLINE, "https://a") == Attribute("link", AttributeScope.INLINE, "https://b")
        False

    """

    key: str
    scope: AttributeScope
    value: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key:
            raise ValidationError("Attribute key must be a non-empty string", "key", self.key)
        if not isinstance(self.scope, AttributeScope):
            raise ValidationError(f"Invalid attribute scope: {self.scope!r}", "scope", self.scope)
        try:
            hash(self.value)
        except TypeError as e:
            raise ValidationError(
                f"Value of attribute '{self.key}' must be hashable, got {type(self.value).__name__}",
                "value",
                self.value,
                original_error=e,
            ) from e

    @classmethod
    def from_key(cls, key: str, value: Any = None) -> Attribute:
        """Create an attribute whose scope is looked up from its key.

        Keys missing from :data:`KNOWN_ATTRIBUTE_SCOPES` get the IGNORED scope.
        """
        return cls(key, KNOWN_ATTRIBUTE_SCOPES.get(key, AttributeScope.IGNORED), value)


StyleSource = Union["Style", Mapping[str, Any], Iterable[Attribute], None]


class Style(Mapping[str, Attribute]):
    """Ordered, read-only mapping from attribute key to :class:`Attribute`.

    A style can be built from attributes, from a plain ``{key: value}`` mapping
    (scopes resolved through :meth:`Attribute.from_key`) or from a mapping whose
    values are already attributes.

    Parameters
    ----------
    source : Style, Mapping, iterable of Attribute or None
        Initial attributes

    """

    __slots__ = ("_attributes",)

    def __init__(self, source: StyleSource = None):
        attributes: dict[str, Attribute] = {}
        if isinstance(source, Style):
            attributes = dict(source._attributes)
        elif isinstance(source, Mapping):
            for key, value in source.items():
                attribute = value if isinstance(value, Attribute) else Attribute.from_key(key, value)
                if attribute.key != key:
                    raise ValidationError(
                        f"Attribute key '{attribute.key}' does not match style key '{key}'", "key", key
                    )
                attributes[key] = attribute
        elif source is not None:
            for attribute in source:
                if not isinstance(attribute, Attribute):
                    raise ValidationError(
                        f"Style entries must be Attribute instances, got {type(attribute).__name__}",
                        "attribute",
                        attribute,
                    )
                attributes[attribute.key] = attribute
        self._attributes = attributes

    def __getitem__(self, key: str) -> Attribute:
        return self._attributes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"Style({list(self._attributes.values())!r})"

    def contains(self, key: str, value: Any = _MISSING) -> bool:
        """Check whether the style carries ``key`` (and ``value`` when given)."""
        attribute = self._attributes.get(key)
        if attribute is None:
            return False
        if value is _MISSING:
            return True
        return attribute.value == value

    def value_or(self, key: str, default: Any) -> Any:
        """Return the value of ``key``, or ``default`` when missing or None."""
        attribute = self._attributes.get(key)
        if attribute is None or attribute.value is None:
            return default
        return attribute.value

    def has_scope(self, scope: AttributeScope) -> bool:
        """Check whether any attribute of the style has the given scope."""
        return any(attribute.scope is scope for attribute in self._attributes.values())

    def to_dict(self) -> dict[str, Any]:
        """Return the plain ``{key: value}`` form of the style."""
        return {key: attribute.value for key, attribute in self._attributes.items()}


__all__ = [
    "Attribute",
    "AttributeScope",
    "KNOWN_ATTRIBUTE_SCOPES",
    "Style",
    "StyleSource",
]
