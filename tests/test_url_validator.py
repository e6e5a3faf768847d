"""Tests for URL candidate validation."""

import pytest

from autolinker.rules.url_validator import (
    contains_multiple_dots,
    is_valid_ip_address,
    is_valid_match,
    is_valid_uri_scheme,
)


class TestIsValidMatch:
    """Whole-candidate validation."""

    @pytest.mark.parametrize(
        ("url_match", "scheme_url_match"),
        [
            ("http://localhost", "http://localhost"),
            ("http://1.2.3.4", "http://1.2.3.4"),
            ("http://1.2.3.4:8080/", "http://1.2.3.4"),
            ("google.com", ""),
            ("www.google.com", ""),
            ("mailto:someone@x.org", "mailto:someone"),
        ],
    )
    def test_accepts(self, url_match, scheme_url_match):
        assert is_valid_match(url_match, scheme_url_match) is True

    @pytest.mark.parametrize(
        ("url_match", "scheme_url_match"),
        [
            ("javascript:alert(1)", "javascript:alert"),
            ("VBScript:run.it", "VBScript:run.it"),
            ("git:d", "git:d"),
            ("git:1.0", "git:1.0"),
            ("http://google..com", "http://google..com"),
        ],
    )
    def test_rejects(self, url_match, scheme_url_match):
        assert is_valid_match(url_match, scheme_url_match) is False


class TestHelpers:
    """Individual validation helpers."""

    def test_uri_scheme_blocklist_is_case_insensitive(self):
        assert is_valid_uri_scheme("JAVASCRIPT:x") is False
        assert is_valid_uri_scheme("https://x") is True

    def test_ip_address_requires_whole_host(self):
        assert is_valid_ip_address("http://127.0.0.1") is True
        assert is_valid_ip_address("http://127.0.0.1:80") is True
        assert is_valid_ip_address("http://127.0.0.1/path") is False
        assert is_valid_ip_address("127.0.0.1") is False

    def test_multiple_dots_only_in_host(self):
        assert contains_multiple_dots("google..com") is True
        assert contains_multiple_dots("http://a..b.com") is True
        assert contains_multiple_dots("google.com/a..b") is False
