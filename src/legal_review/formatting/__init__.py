"""Formatting utilities for normalizing and assembling review text."""

from legal_review.formatting.ir import (
    Alignment,
    BlockKind,
    FormattedDocument,
    Link,
    TextBlock,
    TextRun,
    TextStyle,
)
from legal_review.formatting.normalizer import (
    MarkdownNormalizer,
    NormalizedText,
    normalize,
)
from legal_review.formatting.assembler import DocumentAssembler, assemble

__all__ = [
    "Alignment",
    "BlockKind",
    "FormattedDocument",
    "Link",
    "TextBlock",
    "TextRun",
    "TextStyle",
    "MarkdownNormalizer",
    "NormalizedText",
    "normalize",
    "DocumentAssembler",
    "assemble",
]
