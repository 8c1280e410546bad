"""Microsoft Word (.docx) report handler."""

from io import BytesIO

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt, RGBColor

from legal_review.formats.base import FormatHandler
from legal_review.formatting.ir import (
    Alignment,
    BlockKind,
    FormattedDocument,
    TextBlock,
)


DOCX_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)

# Point sizes for "#", "##" and "###" paragraphs
HEADING_SIZES = {1: 16, 2: 14, 3: 12}

ALIGNMENTS = {
    Alignment.LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    Alignment.CENTER: WD_ALIGN_PARAGRAPH.CENTER,
}


class DOCXHandler(FormatHandler):
    """Handler for Microsoft Word (.docx) reports.

    Uses python-docx with run-level formatting, so link labels keep
    their colour and underline and link annotations stay muted.
    """

    @property
    def format_name(self) -> str:
        return "docx"

    @property
    def mime_type(self) -> str:
        return DOCX_MIME_TYPE

    def render(self, document: FormattedDocument) -> bytes:
        """Render the document into DOCX bytes."""
        doc = Document()

        # Set default font
        style = doc.styles["Normal"]
        font = style.font
        font.name = "Calibri"
        font.size = Pt(11)

        for block in document.blocks:
            if block.kind is BlockKind.TITLE:
                para = doc.add_heading(level=1)
                para.paragraph_format.space_before = Pt(20)
                para.paragraph_format.space_after = Pt(20)
            else:
                para = doc.add_paragraph()
                para.paragraph_format.space_after = Pt(
                    10 if block.kind is BlockKind.METADATA else 20
                )
                if block.kind is BlockKind.FOOTER:
                    para.paragraph_format.space_before = Pt(20)

            para.alignment = ALIGNMENTS[block.alignment]
            self._add_runs(para, block)

        buffer = BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    def _add_runs(self, para, block: TextBlock) -> None:
        """Copy the block's runs onto a python-docx paragraph."""
        heading_size = HEADING_SIZES.get(block.heading_level)

        for run_data in block.runs:
            run = para.add_run(run_data.text)
            run.bold = run_data.bold or bool(heading_size)
            run.italic = run_data.italic
            run.underline = run_data.underline

            if run_data.color:
                run.font.color.rgb = RGBColor.from_string(run_data.color)

            size = run_data.size or heading_size
            if size:
                run.font.size = Pt(size)
