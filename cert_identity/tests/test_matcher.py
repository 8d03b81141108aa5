"""Tests for matcher module."""

from cert_identity.lib.matcher import match_host


class TestSanPrecedence:
    """DNS subjectAltName entries take precedence over CN."""

    def test_matches_any_dns_name(self) -> None:
        """Host equal to any DNS entry matches."""
        assert match_host("example.net", "", ["example.com", "example.net"]) is True

    def test_cn_ignored_when_dns_names_present(self) -> None:
        """CN equal to host does not help when DNS entries exist."""
        assert match_host("example.net", "example.net", ["example.com"]) is False

    def test_empty_dns_entry_never_matches(self) -> None:
        """Empty DNS entry commits to SAN but matches nothing."""
        assert match_host("example.com", "example.com", [""]) is False


class TestCommonNameFallback:
    """CN is used only without DNS entries."""

    def test_matching_cn(self) -> None:
        """Host equal to CN matches."""
        assert match_host("example.com", "example.com", []) is True

    def test_non_matching_cn(self) -> None:
        """Different CN does not match."""
        assert match_host("example.net", "example.com", []) is False

    def test_empty_cn_never_matches(self) -> None:
        """Empty CN fails closed, even for an empty host."""
        assert match_host("", "", []) is False
        assert match_host("example.com", "", []) is False


class TestExactComparison:
    """Comparison is exact: no wildcards, no substrings."""

    def test_no_wildcard_expansion(self) -> None:
        """Wildcard identities are compared literally."""
        assert match_host("www.example.com", "", ["*.example.com"]) is False
        assert match_host("*.example.com", "", ["*.example.com"]) is True

    def test_no_substring_match(self) -> None:
        """Partial names do not match."""
        assert match_host("example.com", "", ["www.example.com"]) is False
        assert match_host("www.example.com", "example.com", []) is False

    def test_case_sensitive_by_default(self) -> None:
        """Differently cased names do not match by default."""
        assert match_host("EXAMPLE.com", "", ["example.com"]) is False
        assert match_host("EXAMPLE.com", "example.com", []) is False

    def test_case_insensitive_mode(self) -> None:
        """case_sensitive=False folds case on both sides."""
        assert match_host("EXAMPLE.com", "", ["example.COM"], case_sensitive=False) is True
        assert match_host("EXAMPLE.com", "example.COM", [], case_sensitive=False) is True
        assert match_host("example.net", "", ["EXAMPLE.com"], case_sensitive=False) is False
