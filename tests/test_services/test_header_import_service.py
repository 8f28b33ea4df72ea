"""Tests for the header import service."""

import pytest

from accept_language.models.exceptions import InvalidHeaderTypeException, ValidationException
from accept_language.models.preferences import PreferenceEntry
from accept_language.services.header_import_service import HeaderImportService


def _entries(raw_input, **kwargs):
    table = HeaderImportService.import_header(raw_input, **kwargs)
    return [(e.language_range, e.quality, e.index) for e in table.entries]


class TestImportHeader:
    """Tests for HeaderImportService.import_header."""

    def test_typical_header(self):
        assert _entries("da, en-GB;q=0.8, en;q=0.7") == [
            ("da", 1000, 0),
            ("en-gb", 800, 1),
            ("en", 700, 2),
        ]

    def test_none_yields_empty_table(self):
        table = HeaderImportService.import_header(None)
        assert len(table) == 0
        assert table.preferred == ()
        assert table.excluded == frozenset()

    def test_empty_string_yields_empty_table(self):
        assert _entries("") == []
        assert _entries("   ") == []

    def test_ranges_are_lowercased(self):
        assert _entries("EN-NZ") == [("en-nz", 1000, 0)]

    def test_quality_marker_is_case_insensitive(self):
        assert _entries("en;Q=0.5") == [("en", 500, 0)]

    def test_all_whitespace_is_removed(self):
        assert _entries(" en - GB ; q = 0.5 ,\tfr\n") == [("en-gb", 500, 0), ("fr", 1000, 1)]

    def test_wildcard_entry(self):
        assert _entries("de, *;q=0.5") == [("de", 1000, 0), ("*", 500, 1)]

    def test_stray_delimiters_are_ignored(self):
        assert _entries(",,en,;q=0.5,,fr;q=0.3,") == [("en", 1000, 0), ("fr", 300, 2)]

    def test_invalid_range_drops_entry(self):
        assert _entries("en_US, fr") == [("fr", 1000, 1)]

    def test_invalid_quality_drops_entry(self):
        assert _entries("en;q=1.5, fr;q=abc, de;q=, it;q=0.5") == [("it", 500, 3)]

    def test_unknown_parameter_drops_entry(self):
        assert _entries("en;level=1, fr") == [("fr", 1000, 1)]

    def test_repeated_quality_parameter_drops_entry(self):
        assert _entries("en;q=0.5;q=0.3, fr") == [("fr", 1000, 1)]

    def test_duplicate_range_last_quality_wins_first_position_kept(self):
        assert _entries("en;q=0.2, fr;q=0.5, EN;q=0.9") == [("en", 900, 0), ("fr", 500, 1)]

    def test_leading_dot_quality_dropped_by_default(self):
        assert _entries("en;q=.8, fr") == [("fr", 1000, 1)]

    def test_leading_dot_quality_accepted_when_enabled(self):
        assert _entries("en;q=.8", allow_leading_dot=True) == [("en", 800, 0)]

    def test_leading_dot_follows_settings(self, override_settings):
        override_settings(ALLOW_LEADING_DOT_QVALUE=True)
        assert _entries("en;q=.8") == [("en", 800, 0)]

    def test_parse_is_idempotent(self):
        raw = "fr-CH, fr;q=0.9, en;q=0.8, de;q=0.7, *;q=0.5"
        assert HeaderImportService.import_header(raw) == HeaderImportService.import_header(raw)

    def test_entries_are_preference_entries(self):
        table = HeaderImportService.import_header("en")
        assert table.entries == (PreferenceEntry(language_range="en", quality=1000, index=0),)

    def test_table_is_ranked_on_import(self):
        table = HeaderImportService.import_header("en;q=0.5, fr, de;q=0")
        assert [e.language_range for e in table.preferred] == ["fr", "en"]
        assert table.excluded == frozenset({"de"})

    def test_dropped_entries_are_logged(self, log_messages):
        HeaderImportService.import_header("en_US, fr;q=2")
        assert any("invalid language range" in m for m in log_messages)
        assert any("invalid quality value" in m for m in log_messages)


class TestImportHeaderTypeErrors:
    """Wrong argument types are reported, malformed content never is."""

    @pytest.mark.parametrize("raw_input", [b"en", 42, ["en"], object()])
    def test_non_text_raises(self, raw_input):
        with pytest.raises(InvalidHeaderTypeException) as exc_info:
            HeaderImportService.import_header(raw_input)
        assert "string or None" in exc_info.value.message

    def test_type_error_is_catchable_as_builtin(self):
        with pytest.raises(TypeError):
            HeaderImportService.import_header(1.0)

    def test_type_error_is_validation_exception(self):
        with pytest.raises(ValidationException):
            HeaderImportService.import_header(1.0)

    def test_garbage_content_does_not_raise(self):
        table = HeaderImportService.import_header(";;;q=,,=,*;*;q=0.5-")
        assert len(table) == 0
