"""Abstract base class for report format handlers."""

from abc import ABC, abstractmethod

from legal_review.formatting.ir import FormattedDocument


class FormatHandler(ABC):
    """Abstract base class for report format handlers.

    Each handler serializes an assembled FormattedDocument into the
    bytes of one container format. Handlers hold no per-document state,
    so a single instance can render many documents.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Short format name used for selection (e.g., 'docx')."""
        ...

    @property
    @abstractmethod
    def mime_type(self) -> str:
        """MIME type of the rendered bytes."""
        ...

    @property
    def extension(self) -> str:
        """File extension including the dot."""
        return f".{self.format_name}"

    @abstractmethod
    def render(self, document: FormattedDocument) -> bytes:
        """Serialize the document.

        Args:
            document: The assembled FormattedDocument

        Returns:
            The complete binary document
        """
        ...


def escape_markup(text: str) -> str:
    """Escape the characters that are special in HTML-like markup."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )
