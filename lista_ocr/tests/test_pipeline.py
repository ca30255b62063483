"""
Tests for the recognition pipeline (segment -> correct -> filter).

Usage:
    pytest lista_ocr/tests/test_pipeline.py -v
"""

import pytest

from lista_ocr.config import CorrectorConfig
from lista_ocr.line_segmenter import CandidateItem
from lista_ocr.pipeline import (
    NO_ITEMS_MESSAGE,
    CorrectedItem,
    RecognitionResult,
    correct_candidates,
    has_letters,
    recognize_items,
)


# =============================================================================
# End-to-End Tests
# =============================================================================

class TestRecognizeItems:
    """Raw OCR text in, ordered (quantity, name) pairs out."""

    def test_corrects_and_drops_short_tokens(self):
        result = recognize_items("Abacatee\nLeote\nxy")
        assert result.pairs() == [("1", "Abacate"), ("1", "Leite")]
        assert result.count == 2

    def test_sample_list(self, sample_ocr_text):
        result = recognize_items(sample_ocr_text)
        assert result.pairs() == [
            ("1", "Abacate"),
            ("2", "Arroz"),
            ("1", "Feijão"),
            ("1", "Leite"),
            ("1", "Tomate"),
            ("1", "Detergente"),
            ("10", "Ovos"),
        ]

    def test_quantities_never_corrected(self):
        result = recognize_items("lo Ovos\n2 Leote")
        assert result.pairs() == [("10", "Ovos"), ("2", "Leite")]

    def test_unknown_names_kept_verbatim(self):
        result = recognize_items("3 Xilofone")
        assert result.pairs() == [("3", "Xilofone")]
        assert result.items[0].was_corrected is False
        assert result.items[0].distance is None

    @pytest.mark.parametrize("text, expected", [
        ("2  Sax", [("2", "Sal")]),
        ("2  Xilofone", [("2", "Xilofone")]),
    ])
    def test_extra_spaces_after_quantity(self, text, expected):
        assert recognize_items(text).pairs() == expected

    @pytest.mark.parametrize("text", ["???", "l 123", "#$%&", "2 ..."])
    def test_names_without_letters_dropped(self, text):
        assert recognize_items(text).items == []

    @pytest.mark.parametrize("text", ["", "\n\n", ",;,", "ab\ncd"])
    def test_empty_input_is_not_an_error(self, text):
        result = recognize_items(text)
        assert result.items == []
        assert result.count == 0

    def test_accepts_iterable_of_lines(self):
        result = recognize_items(["Abacatee", "Leote", "xy"])
        assert result.pairs() == [("1", "Abacate"), ("1", "Leite")]

    def test_original_name_kept(self):
        item = recognize_items("Abacatee").items[0]
        assert item.original_name == "Abacatee"
        assert item.name == "Abacate"
        assert item.was_corrected is True
        assert item.distance == 1

    def test_extra_terms_from_config(self):
        config = CorrectorConfig(extra_terms=("Leite Condensado",))
        result = recognize_items("Leite Condensadu", config)
        assert result.pairs() == [("1", "Leite Condensado")]


# =============================================================================
# Feedback Tests
# =============================================================================

class TestFeedback:
    """Count and user message after a scan."""

    def test_items_read_message(self):
        result = recognize_items("Abacatee\nLeote")
        assert result.feedback_message == "2 itens lidos!"

    def test_no_items_message(self):
        assert recognize_items("").feedback_message == NO_ITEMS_MESSAGE
        assert NO_ITEMS_MESSAGE == "Não identifiquei itens."

    def test_to_dict(self):
        data = recognize_items("2 Arroz").to_dict()
        assert data["count"] == 1
        assert data["message"] == "1 itens lidos!"
        assert data["items"] == [{
            "quantity": "2",
            "name": "Arroz",
            "original_name": "Arroz",
            "was_corrected": False,
            "distance": 0,
        }]


# =============================================================================
# Tracing Tests
# =============================================================================

class TestVerbose:
    """Verbose mode prints tagged trace lines; quiet mode prints nothing."""

    def test_quiet_by_default(self, capsys):
        recognize_items("Abacatee\n???")
        assert capsys.readouterr().out == ""

    def test_verbose_trace(self, capsys):
        recognize_items("Abacatee\n???", verbose=True)
        out = capsys.readouterr().out
        assert "[Segment] 2 candidate(s)" in out
        assert "[Correct] Item 0: 'Abacatee' -> 'Abacate' (distance=1)" in out
        assert "[Skip] Item 1: '???' has no letters" in out
        assert "[Pipeline] 1 itens lidos!" in out


# =============================================================================
# Helper Tests
# =============================================================================

class TestHelpers:

    @pytest.mark.parametrize("text, expected", [
        ("Leite", True),
        ("Maçã", True),
        ("123", False),
        ("", False),
        ("1a", True),
        ("...", False),
    ])
    def test_has_letters(self, text, expected):
        assert has_letters(text) is expected

    def test_correct_candidates(self):
        candidates = [CandidateItem("2", "Leote"), CandidateItem("1", "42")]
        result = correct_candidates(candidates)
        assert isinstance(result, RecognitionResult)
        assert result.items == [
            CorrectedItem(quantity="2", name="Leite", original_name="Leote",
                          was_corrected=True, distance=1),
        ]

    def test_pairs_are_tuples(self):
        pairs = recognize_items("2 Arroz\nLeote").pairs()
        assert pairs == [("2", "Arroz"), ("1", "Leite")]
        assert all(isinstance(pair, tuple) for pair in pairs)
