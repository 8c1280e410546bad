"""Intermediate Representation for review documents.

This module defines the data structures that bridge the normalized
research text to format-specific rendering. The assembler builds a
FormattedDocument once and every format handler lays out the same
blocks and runs.
"""

from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Optional


# =============================================================================
# Run styling
# =============================================================================

LINK_COLOR = "0563C1"  # Word's hyperlink blue
MUTED_COLOR = "666666"
LINK_ANNOTATION_SIZE = 9
FOOTER_SIZE = 10


class TextStyle(Flag):
    """Text styling flags (combinable with |)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    UNDERLINE = auto()


class BlockKind(Enum):
    """Role of a block within the report layout."""

    TITLE = "title"
    METADATA = "metadata"
    PARAGRAPH = "paragraph"
    FOOTER = "footer"


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"


@dataclass(frozen=True)
class Link:
    """A hyperlink extracted from markdown.

    Attributes:
        text: The link label as it appears in the normalized text
        url: The link target
        start: Offset of the label in the text at extraction time
        end: start + len(text)
    """

    text: str
    url: str
    start: int
    end: int


@dataclass
class TextRun:
    """A contiguous run of text with consistent styling.

    Attributes:
        text: The text content
        style: Combined style flags (BOLD, ITALIC, UNDERLINE)
        color: RRGGBB hex color, or None for the default
        size: Font size in points, or None for the default
    """

    text: str
    style: TextStyle = TextStyle.NONE
    color: Optional[str] = None
    size: Optional[float] = None

    @property
    def bold(self) -> bool:
        """Check if this run is bold."""
        return TextStyle.BOLD in self.style

    @property
    def italic(self) -> bool:
        """Check if this run is italic."""
        return TextStyle.ITALIC in self.style

    @property
    def underline(self) -> bool:
        """Check if this run is underlined."""
        return TextStyle.UNDERLINE in self.style

    def __str__(self) -> str:
        return self.text


@dataclass
class TextBlock:
    """A paragraph/block of text containing multiple styled runs.

    Attributes:
        runs: List of TextRun objects making up this block
        kind: Layout role of the block
        alignment: Horizontal alignment
        heading_level: 1-3 for markdown heading paragraphs, 0 otherwise
    """

    runs: list[TextRun] = field(default_factory=list)
    kind: BlockKind = BlockKind.PARAGRAPH
    alignment: Alignment = Alignment.LEFT
    heading_level: int = 0

    @property
    def plain_text(self) -> str:
        """Get the plain text content without styling."""
        return "".join(run.text for run in self.runs)

    def append(
        self,
        text: str,
        style: TextStyle = TextStyle.NONE,
        color: Optional[str] = None,
        size: Optional[float] = None,
    ) -> None:
        """Append a new run to this block."""
        self.runs.append(TextRun(text=text, style=style, color=color, size=size))

    def __str__(self) -> str:
        return self.plain_text


@dataclass
class FormattedDocument:
    """Complete review document ready for rendering.

    Attributes:
        blocks: Title, metadata, paragraph and footer blocks in layout order
        metadata: document_name, role, generated_at and optional prompt
    """

    blocks: list[TextBlock] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)

    @property
    def plain_text(self) -> str:
        """Get all text content without styling."""
        return "\n\n".join(block.plain_text for block in self.blocks)

    @property
    def title(self) -> Optional[TextBlock]:
        return next(
            (b for b in self.blocks if b.kind is BlockKind.TITLE), None
        )

    @property
    def metadata_blocks(self) -> list[TextBlock]:
        return [b for b in self.blocks if b.kind is BlockKind.METADATA]

    @property
    def paragraphs(self) -> list[TextBlock]:
        """Body paragraphs, excluding title, metadata and footer."""
        return [b for b in self.blocks if b.kind is BlockKind.PARAGRAPH]

    @property
    def footer(self) -> Optional[TextBlock]:
        return next(
            (b for b in self.blocks if b.kind is BlockKind.FOOTER), None
        )

    def add_block(self, block: TextBlock) -> None:
        """Add a text block to the document."""
        self.blocks.append(block)
