"""Tests for parse_legal_references and ReferenceExtractionPipeline."""

from __future__ import annotations

import pytest

from src.references._exceptions import ReferenceInputError
from src.references._models import IconTag, ReferenceSettings, ReferenceType
from src.references.pipeline import (
    ReferenceExtractionPipeline,
    get_unique_titles,
    parse_legal_references,
)
from src.utils._hashing import content_hash


class TestParseLegalReferences:
    def test_empty_string(self) -> None:
        assert parse_legal_references("") == []

    def test_no_citations(self) -> None:
        assert parse_legal_references("no citations here") == []

    @pytest.mark.parametrize("value", [None, 0, 3.5, {"text": "RA 4136"}])
    def test_non_string_input(self, value: object) -> None:
        assert parse_legal_references(value) == []

    def test_duplicate_section_reported_once(self) -> None:
        text = "Under RA 4136 Section 56, and also RA 4136 Section 56 again,"
        refs = parse_legal_references(text)
        assert [r.title for r in refs] == ["RA 4136 Section 56"]
        assert refs[0].start_index == text.index("RA 4136")

    def test_admin_order_and_circular_in_reading_order(self) -> None:
        text = "See Administrative Order No. 2021-01 and LTO Circular 15-2020."
        refs = parse_legal_references(text)
        assert [(r.reference_type, r.title) for r in refs] == [
            (ReferenceType.ADMIN_ORDER, "Admin Order No. 2021-01"),
            (ReferenceType.CIRCULAR, "LTO Circular 15-2020"),
        ]
        assert refs[0].reference_type == "AdminOrder"
        assert refs[1].reference_type == "Circular"

    def test_every_type(self, sample_answer_text: str) -> None:
        refs = parse_legal_references(sample_answer_text)
        assert [r.title for r in refs] == [
            "RA 4136 Section 31",
            "Admin Order No. 2014-01",
            "LTO Memorandum 2023-045",
            "LTO Circular 15-2020",
            "Resolution No. 16-01",
            "RA 10930",
        ]
        assert [r.icon for r in refs] == [
            IconTag.SCALE,
            IconTag.FILE_TEXT,
            IconTag.CLIPBOARD_LIST,
            IconTag.CLIPBOARD_LIST,
            IconTag.BOOK_OPEN,
            IconTag.SCALE,
        ]

    def test_republic_act_and_ra_merge(self) -> None:
        text = "Republic Act 4136 is the LTO charter; RA 4136 also covers fines."
        refs = parse_legal_references(text)
        assert len(refs) == 1
        assert refs[0].title == "RA 4136"
        assert refs[0].full_match == "Republic Act 4136"

    def test_section_letter_suffix_collapses(self) -> None:
        text = "RA 4136 Section 56a and RA 4136 Section 56"
        refs = parse_legal_references(text)
        assert [r.title for r in refs] == ["RA 4136 Section 56"]
        assert refs[0].full_match == "RA 4136 Section 56a"

    def test_sections_are_distinct_references(self) -> None:
        refs = parse_legal_references("RA 4136 Section 56 and RA 4136 Section 31 and RA 4136")
        assert [r.title for r in refs] == [
            "RA 4136 Section 56",
            "RA 4136 Section 31",
            "RA 4136",
        ]

    def test_markdown_answer(self) -> None:
        text = "**RA 10054** requires helmets.\n\n- *LTO Memo 2012-15*\n"
        refs = parse_legal_references(text)
        assert [r.title for r in refs] == ["RA 10054", "LTO Memorandum 2012-15"]

    def test_idempotent(self, sample_answer_text: str) -> None:
        first = parse_legal_references(sample_answer_text)
        second = parse_legal_references(sample_answer_text)
        assert first == second
        assert first is not second


class TestGetUniqueTitles:
    def test_first_seen_order(self, sample_answer_text: str) -> None:
        refs = parse_legal_references(sample_answer_text)
        assert get_unique_titles(refs) == [r.title for r in refs]

    def test_removes_repeats(self) -> None:
        refs = parse_legal_references("RA 1 and RA 2")
        assert get_unique_titles(refs + refs) == ["RA 1", "RA 2"]

    def test_empty(self) -> None:
        assert get_unique_titles([]) == []


class TestReferenceExtractionPipeline:
    def test_extract(self, reference_settings: ReferenceSettings, sample_answer_text: str) -> None:
        result = ReferenceExtractionPipeline(reference_settings).extract(sample_answer_text)
        assert result.text_hash == content_hash(sample_answer_text)
        assert result.text_length == len(sample_answer_text)
        assert len(result.references) == 6
        assert "".join(s.text for s in result.segments) == sample_answer_text
        assert result.unique_titles[0] == "RA 4136 Section 31"
        assert set(result.timings) == {"scan_ms", "normalize_ms", "segment_ms"}
        assert result.finished_at is not None
        assert result.elapsed_ms >= 0.0

    def test_segments_disabled(self, sample_answer_text: str) -> None:
        settings = ReferenceSettings(include_segments=False)
        result = ReferenceExtractionPipeline(settings).extract(sample_answer_text)
        assert result.segments == []
        assert "segment_ms" not in result.timings
        assert len(result.references) == 6

    def test_default_settings(self) -> None:
        result = ReferenceExtractionPipeline().extract("")
        assert result.references == []
        assert [s.text for s in result.segments] == [""]

    def test_rejects_non_string(self) -> None:
        with pytest.raises(ReferenceInputError):
            ReferenceExtractionPipeline().extract(None)  # type: ignore[arg-type]

    def test_matches_free_function(self, sample_answer_text: str) -> None:
        result = ReferenceExtractionPipeline().extract(sample_answer_text)
        assert result.references == parse_legal_references(sample_answer_text)
