"""Markdown normalizer for research API output.

Rewrites markdown syntax into the plain structured text the assembler
lays out, pulling hyperlinks out into Link spans on the way. Each step
is a pure function from a complete string to a complete string, so the
steps can be tested and reordered in isolation.
"""

import re
from dataclasses import dataclass, field
from typing import Callable

from legal_review.formatting.ir import Link


# Regex patterns for markdown
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
HEADER_PATTERN = re.compile(r"^(#{1,3}) (.*)$", re.MULTILINE)
BOLD_PATTERN = re.compile(r"\*\*(.*?)\*\*")
ITALIC_PATTERN = re.compile(r"\*(.*?)\*")

# "A. First point. B. Second point." -> break before "B."
LETTER_OUTLINE_PATTERN = re.compile(r"([A-Z]\.\s+[^.]*?\.)\s+([A-Z]\.\s+)")
ROMAN_OUTLINE_PATTERN = re.compile(r"([IVX]+\.\s+[^.]*?\.)\s+([IVX]+\.\s+)")

BLANK_LINES_PATTERN = re.compile(r"\n\n+")
BULLET_PATTERN = re.compile(r"^[-*+] (.*)$", re.MULTILINE)
NUMBERED_PATTERN = re.compile(r"^\d+\. (.*)$", re.MULTILINE)

BULLET = "•"


@dataclass
class NormalizedText:
    """Normalizer output: rewritten text plus extracted links."""

    text: str = ""
    links: list[Link] = field(default_factory=list)


def extract_links(text: str) -> tuple[str, list[Link]]:
    """Replace ``[label](url)`` markup with ``label`` and record each link.

    Offsets are computed against the shrinking text: every replacement
    before a match moves it left by ``len(markup) - len(label)``.
    """
    links: list[Link] = []
    parts: list[str] = []
    shift = 0
    pos = 0

    for match in LINK_PATTERN.finditer(text):
        label, url = match.group(1), match.group(2)
        start = match.start() - shift
        links.append(Link(text=label, url=url, start=start, end=start + len(label)))
        shift += len(match.group(0)) - len(label)

        parts.append(text[pos : match.start()])
        parts.append(label)
        pos = match.end()

    parts.append(text[pos:])
    return "".join(parts), links


def normalize_headers(text: str) -> str:
    """Keep ``#``..``###`` header lines as they are and end them with a newline."""
    return HEADER_PATTERN.sub(r"\1 \2\n", text)


def normalize_emphasis(text: str) -> str:
    """Leave ``**bold**`` and ``*italic*`` markers in place.

    The markers are carried through to the output verbatim; runs are
    not restyled from them.
    """
    text = BOLD_PATTERN.sub(r"**\1**", text)
    return ITALIC_PATTERN.sub(r"*\1*", text)


def break_outline_items(text: str) -> str:
    """Put consecutive lettered or Roman-numeral outline items on their own lines."""
    text = LETTER_OUTLINE_PATTERN.sub(r"\1\n\2", text)
    return ROMAN_OUTLINE_PATTERN.sub(r"\1\n\2", text)


def collapse_blank_lines(text: str) -> str:
    """Reduce any run of blank lines to a single paragraph break."""
    return BLANK_LINES_PATTERN.sub("\n\n", text)


def convert_list_markers(text: str) -> str:
    """Turn ``-``, ``*``, ``+`` and ``N.`` list items into bullet lines."""
    text = BULLET_PATTERN.sub(BULLET + r" \1\n", text)
    return NUMBERED_PATTERN.sub(BULLET + r" \1\n", text)


class MarkdownNormalizer:
    """Normalize research markdown into plain structured text."""

    # Order matters: links come out first so later steps see plain labels
    STEPS: tuple[Callable[[str], str], ...] = (
        normalize_headers,
        normalize_emphasis,
        break_outline_items,
        collapse_blank_lines,
        convert_list_markers,
    )

    def normalize(self, markdown_text: str) -> NormalizedText:
        """Convert markdown text to normalized text and link spans.

        Args:
            markdown_text: Raw markdown from the research API

        Returns:
            NormalizedText with the rewritten text and links in source order
        """
        if not markdown_text:
            return NormalizedText()

        text, links = extract_links(markdown_text)
        for step in self.STEPS:
            text = step(text)

        return NormalizedText(text=text, links=links)


def normalize(markdown_text: str) -> NormalizedText:
    """Normalize markdown text with the default pipeline."""
    return MarkdownNormalizer().normalize(markdown_text)
