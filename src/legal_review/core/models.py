"""Request and result models for the document renderer."""

import base64
from dataclasses import dataclass
from typing import Optional

from legal_review.mail import EmailAttachment


@dataclass
class RenderRequest:
    """Input to a render: the research text plus report metadata."""

    content: str
    document_name: str = ""
    is_plaintiff: bool = False
    format_name: str = "docx"
    prompt: Optional[str] = None


@dataclass
class RenderedDocument:
    """A finished report encoded for transport.

    Attributes:
        content: Base64-encoded document bytes
        mime_type: MIME type of the decoded bytes
        filename: Suggested attachment filename
    """

    content: str
    mime_type: str
    filename: str

    def decode(self) -> bytes:
        """Get the raw document bytes."""
        return base64.b64decode(self.content)

    def to_attachment(self) -> EmailAttachment:
        return EmailAttachment(
            filename=self.filename,
            content=self.content,
            type=self.mime_type,
        )
