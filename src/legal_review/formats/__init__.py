"""Report format handlers for Legal Review."""

from legal_review.formats.base import FormatHandler
from legal_review.formats.docx_handler import DOCXHandler
from legal_review.formats.pdf_handler import PDFHandler
from legal_review.formats.html_handler import HTMLHandler

__all__ = [
    "FormatHandler",
    "DOCXHandler",
    "PDFHandler",
    "HTMLHandler",
]

# Map format names to handlers
HANDLER_MAP: dict[str, type[FormatHandler]] = {
    "docx": DOCXHandler,
    "pdf": PDFHandler,
    "html": HTMLHandler,
}

SUPPORTED_FORMATS = tuple(HANDLER_MAP.keys())


def get_handler(format_name: str) -> type[FormatHandler]:
    """Get the appropriate handler class for a format name."""
    name = format_name.lower().lstrip(".")
    if name not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported report format: {name}. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )
    return HANDLER_MAP[name]
