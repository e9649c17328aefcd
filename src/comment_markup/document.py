"""Document model: the structured form of a formatted comment."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, ClassVar, TypeAlias

FORMAT_VERSION = 1


class DocumentError(Exception):
    """Raised when serialized document data cannot be decoded."""


class Emphasis(StrEnum):
    """Inline style applied to a whole text block."""

    BOLD = "bold"
    ITALIC = "italic"


class FormatKind(StrEnum):
    """Formatting command understood by the mutator."""

    BOLD = "bold"
    ITALIC = "italic"
    LIST = "list"


@dataclass(frozen=True)
class TextBlock:
    """One non-blank, non-list source line with its markers stripped."""

    kind: ClassVar[str] = "text"

    content: str
    emphasis: frozenset[Emphasis] = frozenset()

    @property
    def bold(self) -> bool:
        return Emphasis.BOLD in self.emphasis

    @property
    def italic(self) -> bool:
        return Emphasis.ITALIC in self.emphasis

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "content": self.content,
            # Enum declaration order keeps the output stable: bold before italic.
            "emphasis": [e.value for e in Emphasis if e in self.emphasis],
        }


@dataclass(frozen=True)
class ListBlock:
    """A run of consecutive list lines, markers removed."""

    kind: ClassVar[str] = "list"

    items: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "items": list(self.items)}


Block: TypeAlias = TextBlock | ListBlock


@dataclass(frozen=True)
class FormattedContent:
    """Ordered blocks derived from raw comment text.

    An empty block sequence means "no formatting": consumers show the raw
    text verbatim instead.
    """

    blocks: tuple[Block, ...] = field(default_factory=tuple)
    version: int = FORMAT_VERSION

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    def to_dict(self) -> dict[str, Any]:
        """Return the document as plain JSON-compatible data."""
        return {
            "version": self.version,
            "blocks": [block.to_dict() for block in self.blocks],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FormattedContent:
        """Decode data produced by :meth:`to_dict`.

        Raises DocumentError on an unsupported version or malformed blocks.
        """
        version = data.get("version")
        if version != FORMAT_VERSION:
            msg = f"Unsupported document version: {version!r}"
            raise DocumentError(msg)

        blocks: list[Block] = []
        for i, raw in enumerate(data.get("blocks", [])):
            blocks.append(_decode_block(i, raw))
        return cls(blocks=tuple(blocks), version=version)


def _decode_block(index: int, raw: dict[str, Any]) -> Block:
    kind = raw.get("kind")
    if kind == TextBlock.kind:
        if "content" not in raw:
            msg = f"Block {index} is missing required field 'content'"
            raise DocumentError(msg)
        try:
            emphasis = frozenset(Emphasis(name) for name in raw.get("emphasis", []))
        except ValueError as e:
            msg = f"Block {index} has unknown emphasis: {e}"
            raise DocumentError(msg) from e
        return TextBlock(content=raw["content"], emphasis=emphasis)
    if kind == ListBlock.kind:
        items = raw.get("items")
        if not items:
            msg = f"List block {index} has no items"
            raise DocumentError(msg)
        return ListBlock(items=tuple(items))
    msg = f"Block {index} has unknown kind {kind!r}"
    raise DocumentError(msg)
