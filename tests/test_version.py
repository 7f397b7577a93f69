"""
Tests for version detection and header parsing.

Run with: pytest tests/test_version.py -v
"""

import logging

import pytest

from aamva_decoder.core.version import DocumentHeader, detect_version, parse_header

from conftest import build_payload


class TestDetectVersion:
    """Tests for detect_version."""

    @pytest.mark.parametrize("version", range(1, 10))
    def test_detects_each_version(self, version):
        assert detect_version(build_payload({'DAQ': 'T1'}, version=version)) == version

    def test_example_header(self):
        assert detect_version("@\n\x1e\rANSI 636000090002DL00410278") == 9

    def test_no_header(self):
        assert detect_version("no header here") is None

    def test_empty_text(self):
        assert detect_version("") is None

    def test_digits_at_start_not_matched(self):
        # The 8-digit run must follow a non-digit
        assert detect_version("63600009") is None

    def test_first_match_wins(self):
        assert detect_version("A63600003 B63600007") == 3

    @pytest.mark.parametrize("version", [0, 10, 99])
    def test_unsupported_version(self, version, caplog):
        text = build_payload({'DAQ': 'T1'}, version=version)
        with caplog.at_level(logging.WARNING, logger='aamva_decoder'):
            assert detect_version(text) is None
        assert "Unsupported AAMVA version" in caplog.text


class TestParseHeader:
    """Tests for parse_header."""

    def test_modern_header(self):
        header = parse_header("@\n\x1e\rANSI 636014080102DL00410278")
        assert header == DocumentHeader(
            file_type='ANSI',
            issuer_id='636014',
            version=8,
            jurisdiction_version=1,
            entries=2,
        )

    def test_version_1_has_no_jurisdiction_version(self):
        header = parse_header(build_payload({'DAQ': 'T1'}, version=1, entries=3))
        assert header.version == 1
        assert header.jurisdiction_version is None
        assert header.entries == 3

    def test_legacy_file_type(self):
        header = parse_header("@\n\x1e\rAAMVA6360000101DL")
        assert header.file_type == 'AAMVA'
        assert header.issuer_id == '636000'
        assert header.version == 1

    def test_out_of_range_version_kept(self):
        header = parse_header(build_payload({'DAQ': 'T1'}, version=12))
        assert header.version == 12

    def test_missing_header(self):
        assert parse_header("DAQT12345678") is None

    def test_to_dict(self):
        header = parse_header("@\n\x1e\rANSI 636014080102DL")
        assert header.to_dict() == {
            'file_type': 'ANSI',
            'issuer_id': '636014',
            'version': 8,
            'jurisdiction_version': 1,
            'entries': 2,
        }
