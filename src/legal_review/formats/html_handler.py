"""HTML report handler."""

from legal_review.formats.base import FormatHandler, escape_markup
from legal_review.formatting.ir import FormattedDocument


CONTAINER_STYLE = "font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto;"
CONTENT_STYLE = "line-height: 1.6; margin-top: 20px;"
FOOTER_STYLE = "margin-top: 20px; color: #666; font-size: 12px;"


class HTMLHandler(FormatHandler):
    """Handler for HTML reports.

    The content is written as escaped text inside styled <div>s with
    literal <br> line breaks. Runs are not styled, so link labels read
    as plain text followed by their URL.
    """

    @property
    def format_name(self) -> str:
        return "html"

    @property
    def mime_type(self) -> str:
        return "text/html"

    def render(self, document: FormattedDocument) -> bytes:
        """Render the document into UTF-8 encoded HTML."""
        return self.to_html(document).encode("utf-8")

    def to_html(self, document: FormattedDocument) -> str:
        parts: list[str] = [f'<div style="{CONTAINER_STYLE}">']

        if document.title is not None:
            parts.append(f"<h2>{escape_markup(document.title.plain_text)}</h2>")

        for block in document.metadata_blocks:
            parts.append(
                f"<div><strong>{escape_markup(block.plain_text)}</strong></div>"
            )

        prompt = document.metadata.get("prompt")
        if prompt:
            parts.append(
                f'<div style="{CONTENT_STYLE}"><strong>Original Prompt:</strong>'
                f"<br>{self._text_to_html(prompt)}</div>"
            )

        content = "<br><br>".join(
            self._text_to_html(block.plain_text) for block in document.paragraphs
        )
        parts.append(f'<div style="{CONTENT_STYLE}">{content}</div>')

        if document.footer is not None:
            parts.append(
                f'<div style="{FOOTER_STYLE}">'
                f"{escape_markup(document.footer.plain_text)}</div>"
            )

        parts.append("</div>")
        return "\n".join(parts)

    def _text_to_html(self, text: str) -> str:
        return escape_markup(text).replace("\n", "<br>")
