"""Base classes for renderer options.

Options are frozen dataclasses; a modified copy is produced with
:meth:`CloneFrozenMixin.create_updated` instead of mutating an instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        Raises
        ------
        TypeError
            If a keyword does not name a field of this options class

        """
        known = {f.name for f in fields(self)}  # type: ignore[arg-type]
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise TypeError(f"{type(self).__name__} has no option(s): {', '.join(unknown)}")
        return replace(self, **kwargs)  # type: ignore[type-var]


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    escape_special : bool, default True
        Whether to backslash-escape markdown metacharacters in text leaves.

    Notes
    -----
    Subclasses define format-specific rendering options as frozen dataclass fields.

    """

    escape_special: bool = field(
        default=True,
        metadata={
            "help": "Escape special Markdown characters (e.g. asterisks) in text content",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate base renderer options.

        Raises
        ------
        ValueError
            If any field value is invalid.

        """
        if not isinstance(self.escape_special, bool):
            raise ValueError(f"escape_special must be a bool, got {self.escape_special!r}")
