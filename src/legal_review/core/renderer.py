"""Document renderer: research text in, encoded report out."""

import base64
import logging
from datetime import datetime
from typing import Optional

from legal_review.core.models import RenderedDocument, RenderRequest
from legal_review.formats import get_handler
from legal_review.formatting.assembler import DocumentAssembler, role_label
from legal_review.formatting.ir import FormattedDocument
from legal_review.formatting.normalizer import MarkdownNormalizer

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Error while rendering a report."""

    pass


class EncodingError(RenderError):
    """The report could not be serialized to bytes."""

    pass


class DocumentRenderer:
    """Turns research markdown into a base64-encoded report.

    Pipeline:
    1. Normalize markdown (links extracted, lists and outlines broken up)
    2. Assemble title, metadata, paragraphs and footer
    3. Serialize with the format handler
    4. Base64-encode for transport

    The renderer keeps no per-call state and does no I/O, so one
    instance can serve concurrent requests.
    """

    def __init__(self, format_name: str = "docx") -> None:
        """Initialize the renderer.

        Args:
            format_name: Output format ('docx', 'pdf' or 'html')

        Raises:
            ValueError: If the format is not supported
        """
        self.handler = get_handler(format_name)()
        self.normalizer = MarkdownNormalizer()
        self.assembler = DocumentAssembler()

    @property
    def mime_type(self) -> str:
        return self.handler.mime_type

    def build_document(
        self,
        content: str,
        document_name: str,
        is_plaintiff: bool,
        prompt: Optional[str] = None,
        generated_at: Optional[datetime] = None,
    ) -> FormattedDocument:
        """Normalize and assemble without serializing."""
        normalized = self.normalizer.normalize(content)
        logger.debug(
            "Normalized %d chars into %d chars with %d links",
            len(content),
            len(normalized.text),
            len(normalized.links),
        )
        return self.assembler.assemble(
            normalized.text,
            normalized.links,
            document_name,
            is_plaintiff,
            generated_at=generated_at,
            prompt=prompt,
        )

    def render(
        self,
        content: str,
        document_name: str,
        is_plaintiff: bool,
        prompt: Optional[str] = None,
        generated_at: Optional[datetime] = None,
    ) -> RenderedDocument:
        """Render research text into an encoded report.

        Args:
            content: Markdown text returned by the research API
            document_name: Name of the reviewed document
            is_plaintiff: Selects the plaintiff or defendant report variant
            prompt: Original research prompt, included by PDF and HTML
            generated_at: Report timestamp (defaults to now)

        Returns:
            RenderedDocument with base64 content, MIME type and filename

        Raises:
            EncodingError: If the document cannot be serialized
        """
        generated_at = generated_at or datetime.now()
        document = self.build_document(
            content,
            document_name,
            is_plaintiff,
            prompt=prompt,
            generated_at=generated_at,
        )

        try:
            data = self.handler.render(document)
        except (ValueError, UnicodeError, MemoryError) as e:
            raise EncodingError(
                f"Could not encode {self.handler.format_name} report: {e}"
            ) from e

        logger.info(
            "Rendered %s report: %d paragraphs, %d bytes",
            self.handler.format_name,
            len(document.paragraphs),
            len(data),
        )
        return RenderedDocument(
            content=base64.b64encode(data).decode("ascii"),
            mime_type=self.handler.mime_type,
            filename=self.report_filename(is_plaintiff, generated_at),
        )

    def render_request(self, request: RenderRequest) -> RenderedDocument:
        """Render a RenderRequest, honouring its format."""
        renderer = self
        if request.format_name.lower().lstrip(".") != self.handler.format_name:
            renderer = DocumentRenderer(request.format_name)
        return renderer.render(
            request.content,
            request.document_name,
            request.is_plaintiff,
            prompt=request.prompt,
        )

    def report_filename(self, is_plaintiff: bool, generated_at: datetime) -> str:
        role = role_label(is_plaintiff).lower()
        return (
            f"legal-review-{role}-{generated_at.date().isoformat()}"
            f"{self.handler.extension}"
        )
