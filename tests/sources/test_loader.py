# ABOUTME: Tests for the URL list loader
# ABOUTME: Validates trimming, blank-line removal, order-preserving dedup and fatal read errors

import pytest

from reddit_authors.sources.loader import InputFileError, ensure_input_dir, load_candidate_urls


class TestLoadCandidateUrls:
    """Reading urls.txt into a clean candidate list."""

    def test_drops_blank_lines_and_trims(self, tmp_path):
        path = tmp_path / "urls.txt"
        path.write_text("  https://a.com  \n\n   \nhttps://b.com\n", encoding="utf-8")

        assert load_candidate_urls(path) == ["https://a.com", "https://b.com"]

    def test_deduplicates_keeping_first_occurrence(self, tmp_path):
        path = tmp_path / "urls.txt"
        path.write_text("https://b.com\nhttps://a.com\nhttps://b.com\n https://a.com\n", encoding="utf-8")

        assert load_candidate_urls(path) == ["https://b.com", "https://a.com"]

    def test_keeps_invalid_lines_for_the_validator(self, tmp_path):
        path = tmp_path / "urls.txt"
        path.write_text("not a url\nftp://example.com\n", encoding="utf-8")

        assert load_candidate_urls(path) == ["not a url", "ftp://example.com"]

    def test_handles_windows_line_endings(self, tmp_path):
        path = tmp_path / "urls.txt"
        path.write_bytes(b"https://a.com\r\nhttps://b.com\r\n")

        assert load_candidate_urls(path) == ["https://a.com", "https://b.com"]

    def test_only_newlines_separate_entries(self, tmp_path):
        path = tmp_path / "urls.txt"
        path.write_text("https://a.com\x0cpage\nhttps://b.com\u2028c\x85d\n", encoding="utf-8")

        assert load_candidate_urls(path) == ["https://a.com\x0cpage", "https://b.com\u2028c\x85d"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "urls.txt"
        path.write_text("", encoding="utf-8")

        assert load_candidate_urls(path) == []

    def test_missing_file_raises_input_error(self, tmp_path):
        with pytest.raises(InputFileError, match="Cannot read URL list"):
            load_candidate_urls(tmp_path / "missing.txt")

    def test_input_error_is_an_os_error(self, tmp_path):
        with pytest.raises(OSError):
            load_candidate_urls(tmp_path / "missing.txt")

    def test_undecodable_file_raises_input_error(self, tmp_path):
        path = tmp_path / "urls.txt"
        path.write_bytes(b"\xff\xfe\xfa not utf-8")

        with pytest.raises(InputFileError):
            load_candidate_urls(path)


def test_ensure_input_dir_creates_nested_directory(tmp_path):
    target = tmp_path / "work" / "input"

    ensure_input_dir(target)
    ensure_input_dir(target)  # Second call is a no-op

    assert target.is_dir()
