"""PDF report handler."""

from io import BytesIO

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from legal_review.formats.base import FormatHandler
from legal_review.formatting.ir import FormattedDocument


FONT = "Helvetica"
TITLE_SIZE = 18
META_SIZE = 12
SECTION_SIZE = 14
BODY_SIZE = 10

# Layout in millimetres from the top-left corner of the page
LEFT_MARGIN = 20
PAGE_TOP = 20
PAGE_BOTTOM = 250
LINE_HEIGHT = 5
TEXT_WIDTH = 170
# Rough average glyph width at body size
CHAR_WIDTH = 2.5


def split_text_to_fit(text: str, max_width: float = TEXT_WIDTH) -> list[str]:
    """Word-wrap text into lines using the average character width.

    A single word wider than the line is kept whole on its own line.
    """
    lines: list[str] = []
    current = ""

    for word in text.split(" "):
        candidate = f"{current} {word}" if current else word
        if len(candidate) * CHAR_WIDTH <= max_width:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word

    if current:
        lines.append(current)

    return lines


class _PageWriter:
    """Tracks the vertical position on a canvas and paginates."""

    def __init__(self, pdf: canvas.Canvas) -> None:
        self.pdf = pdf
        self.page_height = A4[1]
        self.y = PAGE_TOP
        self.font_size = BODY_SIZE

    def set_font_size(self, size: float) -> None:
        self.font_size = size
        self.pdf.setFont(FONT, size)

    def text_at(self, text: str, y: float) -> None:
        self.pdf.drawString(LEFT_MARGIN * mm, self.page_height - y * mm, text)

    def write_lines(self, lines: list[str]) -> None:
        """Write lines at the cursor, starting a new page past the bottom."""
        for line in lines:
            if self.y > PAGE_BOTTOM:
                self.pdf.showPage()
                # showPage resets the graphics state
                self.pdf.setFont(FONT, self.font_size)
                self.y = PAGE_TOP
            self.text_at(line, self.y)
            self.y += LINE_HEIGHT


class PDFHandler(FormatHandler):
    """Handler for PDF reports.

    Uses the reportlab canvas directly: text is wrapped into fixed-width
    lines with a character-width estimate and paginated by vertical
    position, matching the plain layout of the emailed reports.
    """

    @property
    def format_name(self) -> str:
        return "pdf"

    @property
    def mime_type(self) -> str:
        return "application/pdf"

    def render(self, document: FormattedDocument) -> bytes:
        """Render the document into PDF bytes."""
        buffer = BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=A4)
        writer = _PageWriter(pdf)

        title = document.title
        if title is not None:
            pdf.setTitle(title.plain_text)
            writer.set_font_size(TITLE_SIZE)
            writer.text_at(title.plain_text, 20)

        # Document, role and generation time stack under the title
        header_lines = [b.plain_text for b in document.metadata_blocks]
        if document.footer is not None:
            header_lines.append(document.footer.plain_text)

        writer.set_font_size(META_SIZE)
        for i, line in enumerate(header_lines):
            writer.text_at(line, 35 + i * 10)

        writer.y = 75
        prompt = document.metadata.get("prompt")
        if prompt:
            self._write_section(writer, "Original Prompt:")
            writer.write_lines(
                [
                    wrapped
                    for line in prompt.splitlines()
                    for wrapped in split_text_to_fit(line)
                ]
            )
            writer.y += 10

        self._write_section(writer, "Analysis Results:")
        for block in document.paragraphs:
            writer.write_lines(split_text_to_fit(block.plain_text))
            writer.y += LINE_HEIGHT

        pdf.save()
        return buffer.getvalue()

    def _write_section(self, writer: _PageWriter, heading: str) -> None:
        writer.set_font_size(SECTION_SIZE)
        writer.write_lines([heading])
        writer.y += LINE_HEIGHT
        writer.set_font_size(BODY_SIZE)
