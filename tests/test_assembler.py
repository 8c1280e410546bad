"""Tests for the document assembler."""

import pytest

from legal_review.formatting.assembler import (
    DocumentAssembler,
    assemble,
    create_paragraph_with_links,
    heading_level,
    segment_paragraphs,
)
from legal_review.formatting.ir import (
    LINK_COLOR,
    MUTED_COLOR,
    Alignment,
    BlockKind,
    Link,
)
from legal_review.formatting.normalizer import normalize


class TestSegmentParagraphs:
    """Tests for paragraph segmentation."""

    def test_blank_line_boundaries(self):
        assert segment_paragraphs("One\n\nTwo") == ["One", "Two"]

    def test_single_newlines_split_further(self):
        text = "One\n\nA. First.\nB. Second.\n\n\n"
        assert segment_paragraphs(text) == ["One", "A. First.", "B. Second."]

    def test_whitespace_blocks_dropped(self):
        assert segment_paragraphs("  \n\n\t\n\nText  ") == ["Text"]

    def test_empty_text(self):
        assert segment_paragraphs("") == []


class TestCreateParagraphWithLinks:
    """Tests for re-inserting links into paragraph runs."""

    def test_no_links_single_run(self):
        block = create_paragraph_with_links("Just prose.", [])

        assert len(block.runs) == 1
        assert block.runs[0].text == "Just prose."
        assert block.runs[0].color is None

    def test_unmatched_link_falls_back_to_plain(self):
        links = [Link(text="elsewhere", url="http://a", start=0, end=9)]
        block = create_paragraph_with_links("Nothing here.", links)

        assert [r.text for r in block.runs] == ["Nothing here."]

    def test_link_runs_and_annotation(self):
        links = [Link(text="a link", url="http://x.test", start=5, end=11)]
        block = create_paragraph_with_links("Read a link now", links)

        assert [r.text for r in block.runs] == [
            "Read ",
            "a link",
            " (http://x.test)",
            " now",
        ]
        link_run = block.runs[1]
        assert link_run.underline is True
        assert link_run.color == LINK_COLOR
        annotation = block.runs[2]
        assert annotation.underline is False
        assert annotation.color == MUTED_COLOR

    def test_runs_preserve_every_character(self):
        text = "Cases: Alpha, Beta and Gamma apply."
        links = [
            Link(text="Alpha", url="u1", start=7, end=12),
            Link(text="Gamma", url="u3", start=23, end=28),
        ]
        block = create_paragraph_with_links(text, links)

        expected = "Cases: Alpha (u1), Beta and Gamma (u3) apply."
        assert block.plain_text == expected

    def test_repeated_label_links_each_occurrence(self):
        links = [
            Link(text="Case", url="u1", start=0, end=4),
            Link(text="Case", url="u2", start=9, end=13),
        ]
        block = create_paragraph_with_links("Case and Case", links)

        assert block.plain_text == "Case (u1) and Case (u2)"

    def test_candidates_ordered_by_extraction_offset(self):
        # Alpha was extracted first, so Beta (earlier in this paragraph)
        # is passed over once the cursor moves beyond it.
        links = [
            Link(text="Alpha", url="ua", start=0, end=5),
            Link(text="Beta", url="ub", start=20, end=24),
        ]
        block = create_paragraph_with_links("Beta then Alpha", links)

        assert [r.text for r in block.runs] == ["Beta then ", "Alpha", " (ua)"]


class TestHeadingLevel:
    @pytest.mark.parametrize(
        "text,level",
        [("# One", 1), ("## Two", 2), ("### Three", 3), ("#### Four", 0), ("Plain", 0)],
    )
    def test_levels(self, text: str, level: int):
        assert heading_level(text) == level


class TestAssemble:
    """Tests for the full document layout."""

    def test_empty_content_layout(self, generated_at):
        doc = assemble("", [], "brief.pdf", False, generated_at=generated_at)

        assert [b.kind for b in doc.blocks] == [
            BlockKind.TITLE,
            BlockKind.METADATA,
            BlockKind.METADATA,
            BlockKind.FOOTER,
        ]
        assert doc.paragraphs == []

    def test_title_and_metadata(self, generated_at):
        doc = assemble("Text", [], "brief.pdf", True, generated_at=generated_at)

        assert doc.title.plain_text == "Legal Plaintiff Review Results"
        assert doc.title.alignment is Alignment.CENTER
        assert [b.plain_text for b in doc.metadata_blocks] == [
            "Document: brief.pdf",
            "Role: Plaintiff",
        ]
        assert all(b.runs[0].bold for b in doc.metadata_blocks)

    def test_defendant_variant(self, generated_at):
        doc = assemble("", [], "brief.pdf", False, generated_at=generated_at)

        assert doc.title.plain_text == "Legal Defendant Review Results"
        assert doc.metadata["role"] == "Defendant"

    def test_missing_document_name(self, generated_at):
        doc = assemble("", [], "", False, generated_at=generated_at)

        assert doc.metadata_blocks[0].plain_text == "Document: Unknown"

    def test_footer_timestamp(self, generated_at):
        doc = assemble("", [], "x", False, generated_at=generated_at)

        assert doc.footer.plain_text == "Generated on 01/02/2026, 03:04:05 PM"
        assert doc.footer.runs[0].color == MUTED_COLOR
        assert doc.footer.runs[0].size == 10

    def test_round_trip_scenario(self, sample_markdown: str, generated_at):
        normalized = normalize(sample_markdown)
        doc = DocumentAssembler().assemble(
            normalized.text,
            normalized.links,
            "brief.pdf",
            True,
            generated_at=generated_at,
        )

        heading, body = doc.paragraphs
        assert heading.plain_text == "# Heading"
        assert heading.heading_level == 1

        runs = body.runs
        assert runs[0].text == "Some *italic* and **bold** text with "
        assert runs[1].text == "a link"
        assert runs[1].underline and runs[1].color == LINK_COLOR
        assert runs[2].text == " (http://x.test)"
        assert runs[2].color == MUTED_COLOR
        assert runs[3].text == "."
        assert doc.footer is doc.blocks[-1]

    def test_paragraph_per_list_item(self, research_answer: str, generated_at):
        normalized = normalize(research_answer)
        doc = assemble(
            normalized.text, normalized.links, "x", True, generated_at=generated_at
        )
        texts = [b.plain_text for b in doc.paragraphs]

        assert "• Offer and acceptance" in texts
        assert "• Mutual assent" in texts
        assert "A. Formation." in texts
        assert "B. Consideration." in texts
        assert any("Smith v. Jones (http://example.com/case)" in t for t in texts)
