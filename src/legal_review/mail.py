"""Email payload for delivering review reports.

Only the message and attachment contract lives here; handing the
payload to an email provider is up to the caller.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import PurePath
from typing import Optional

from legal_review.config import get_settings
from legal_review.formats.base import escape_markup
from legal_review.formatting.assembler import (
    format_timestamp,
    report_title,
    role_label,
)


@dataclass
class EmailAttachment:
    """A base64-encoded email attachment."""

    filename: str
    content: str
    type: str
    disposition: str = "attachment"

    def to_dict(self) -> dict:
        return {
            "filename": self.filename,
            "content": self.content,
            "type": self.type,
            "disposition": self.disposition,
        }


@dataclass
class OriginalFile:
    """The document the user uploaded with the research request."""

    name: str
    base64: str

    def to_attachment(self) -> EmailAttachment:
        return EmailAttachment(
            filename=self.name,
            content=self.base64,
            type="application/pdf",
        )


@dataclass
class ReviewEmail:
    """Outbound message carrying a generated review report."""

    sender: str
    to: list[str]
    subject: str
    html: str
    attachments: list[EmailAttachment] = field(default_factory=list)

    def to_payload(self) -> dict:
        """Return the message as the provider's JSON payload."""
        return {
            "from": self.sender,
            "to": list(self.to),
            "subject": self.subject,
            "html": self.html,
            "attachments": [a.to_dict() for a in self.attachments],
        }


def _report_label(attachment: EmailAttachment) -> str:
    suffix = PurePath(attachment.filename).suffix.lstrip(".").upper()
    return f"{suffix or 'Report'} report with detailed analysis"


def build_review_email(
    recipient: str,
    is_plaintiff: bool,
    document_name: Optional[str],
    report: EmailAttachment,
    original_file: Optional[OriginalFile] = None,
    sender: Optional[str] = None,
    sent_at: Optional[datetime] = None,
) -> ReviewEmail:
    """Build the notification email for a finished review.

    Args:
        recipient: Address to send the report to
        is_plaintiff: Selects the plaintiff or defendant wording
        document_name: Name of the reviewed document, if any
        report: The rendered report attachment
        original_file: The uploaded document, attached first when present
        sender: From address (defaults to the configured sender)
        sent_at: Timestamp for the body (defaults to now)

    Returns:
        ReviewEmail ready to hand to an email provider
    """
    sent_at = sent_at or datetime.now()
    sender = sender or get_settings().email_sender
    name = document_name or "Uploaded Document"

    attachments: list[EmailAttachment] = []
    if original_file is not None:
        attachments.append(original_file.to_attachment())
    attachments.append(report)

    items = "".join(
        f"<li>{label}</li>"
        for label in (
            (["Original PDF document"] if original_file is not None else [])
            + [_report_label(report)]
        )
    )
    html = (
        "<h2>Your Legal Review is Complete</h2>\n"
        f"<p>Role: {role_label(is_plaintiff)}</p>\n"
        f"<p><strong>Document:</strong> {escape_markup(name)}</p>\n"
        "<p>Your analysis has been completed and is attached to this email"
        " along with your original document.</p>\n"
        "<p><strong>Attachments:</strong></p>\n"
        f"<ul>{items}</ul>\n"
        '<p style="margin-top: 20px; color: #666; font-size: 12px;">'
        f"Generated on {format_timestamp(sent_at)}</p>"
    )

    return ReviewEmail(
        sender=sender,
        to=[recipient],
        subject=report_title(is_plaintiff),
        html=html,
        attachments=attachments,
    )
