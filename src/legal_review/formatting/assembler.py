"""Assemble normalized text into a FormattedDocument."""

import re
from datetime import datetime
from typing import Optional

from legal_review.formatting.ir import (
    FOOTER_SIZE,
    LINK_ANNOTATION_SIZE,
    LINK_COLOR,
    MUTED_COLOR,
    Alignment,
    BlockKind,
    FormattedDocument,
    Link,
    TextBlock,
    TextStyle,
)

HEADING_PREFIX = re.compile(r"^(#{1,3}) ")
TIMESTAMP_FORMAT = "%m/%d/%Y, %I:%M:%S %p"
UNKNOWN_DOCUMENT = "Unknown"


def role_label(is_plaintiff: bool) -> str:
    return "Plaintiff" if is_plaintiff else "Defendant"


def report_title(is_plaintiff: bool) -> str:
    return f"Legal {role_label(is_plaintiff)} Review Results"


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def segment_paragraphs(text: str) -> list[str]:
    """Split normalized text into paragraph strings.

    Blocks are separated by blank lines. A block that still holds a
    single newline (an outline break or a header line) is split again
    so every line becomes its own paragraph.
    """
    paragraphs: list[str] = []

    for block in text.split("\n\n"):
        pieces = block.split("\n") if "\n" in block else [block]
        for piece in pieces:
            piece = piece.strip()
            if piece:
                paragraphs.append(piece)

    return paragraphs


def create_paragraph_with_links(text: str, links: list[Link]) -> TextBlock:
    """Build a paragraph block, re-inserting links as styled runs.

    Candidate links are those whose label occurs in the paragraph,
    ordered by their extraction offset rather than by where they occur
    here. When a label repeats, the styling can therefore land on an
    earlier occurrence than the one the link came from.
    """
    block = TextBlock()

    candidates = sorted(
        (link for link in links if link.text and link.text in text),
        key=lambda link: link.start,
    )
    if not candidates:
        block.append(text)
        return block

    cursor = 0
    for link in candidates:
        index = text.find(link.text, cursor)
        if index == -1:
            continue

        if index > cursor:
            block.append(text[cursor:index])
        block.append(link.text, TextStyle.UNDERLINE, color=LINK_COLOR)
        block.append(
            f" ({link.url})", color=MUTED_COLOR, size=LINK_ANNOTATION_SIZE
        )
        cursor = index + len(link.text)

    if cursor < len(text):
        block.append(text[cursor:])

    return block


def heading_level(text: str) -> int:
    """Return 1-3 for ``#``-prefixed paragraphs, 0 otherwise."""
    match = HEADING_PREFIX.match(text)
    return len(match.group(1)) if match else 0


class DocumentAssembler:
    """Lay normalized text out as title, metadata, paragraphs and footer."""

    def assemble(
        self,
        normalized_text: str,
        links: list[Link],
        document_name: str,
        is_plaintiff: bool,
        generated_at: Optional[datetime] = None,
        prompt: Optional[str] = None,
    ) -> FormattedDocument:
        """Build the report document.

        Args:
            normalized_text: Text produced by the normalizer
            links: Links extracted by the normalizer
            document_name: Name of the reviewed document
            is_plaintiff: Selects the plaintiff or defendant report variant
            generated_at: Timestamp for the footer (defaults to now)
            prompt: Original research prompt, shown by formats that include it

        Returns:
            FormattedDocument ready for a format handler
        """
        generated_at = generated_at or datetime.now()
        document_name = document_name or UNKNOWN_DOCUMENT
        role = role_label(is_plaintiff)

        doc = FormattedDocument(
            metadata={
                "document_name": document_name,
                "role": role,
                "title": report_title(is_plaintiff),
                "generated_at": generated_at,
                "prompt": prompt,
            }
        )

        title = TextBlock(kind=BlockKind.TITLE, alignment=Alignment.CENTER)
        title.append(report_title(is_plaintiff), TextStyle.BOLD)
        doc.add_block(title)

        for line in (f"Document: {document_name}", f"Role: {role}"):
            meta = TextBlock(kind=BlockKind.METADATA)
            meta.append(line, TextStyle.BOLD)
            doc.add_block(meta)

        for paragraph in segment_paragraphs(normalized_text):
            block = create_paragraph_with_links(paragraph, links)
            block.heading_level = heading_level(paragraph)
            doc.add_block(block)

        footer = TextBlock(kind=BlockKind.FOOTER)
        footer.append(
            f"Generated on {format_timestamp(generated_at)}",
            color=MUTED_COLOR,
            size=FOOTER_SIZE,
        )
        doc.add_block(footer)

        return doc


def assemble(
    normalized_text: str,
    links: list[Link],
    document_name: str,
    is_plaintiff: bool,
    generated_at: Optional[datetime] = None,
    prompt: Optional[str] = None,
) -> FormattedDocument:
    """Assemble a report document with the default layout."""
    return DocumentAssembler().assemble(
        normalized_text,
        links,
        document_name,
        is_plaintiff,
        generated_at=generated_at,
        prompt=prompt,
    )
