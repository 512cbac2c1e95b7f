#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for URL encoding of link targets.

Includes property-based tests checking that encoding is idempotent and that
in-page anchors never gain a leading slash.
"""

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from orgmark.utils.urls import encode_url


@pytest.mark.unit
class TestEncodeUrl:
    """Test encode_url on representative inputs."""

    def test_spaces_in_path_are_encoded(self) -> None:
        """Test that a space in the path becomes %20."""
        assert encode_url("https://example.org/a b") == "https://example.org/a%20b"

    def test_query_and_fragment_are_encoded(self) -> None:
        """Test that query and fragment are encoded separately."""
        assert encode_url("https://example.org/p?q=x y#top two") == "https://example.org/p?q=x%20y#top%20two"

    def test_already_encoded_url_is_unchanged(self) -> None:
        """Test that existing escapes are not double-encoded."""
        assert encode_url("https://example.org/a%20b") == "https://example.org/a%20b"

    def test_reserved_characters_are_kept(self) -> None:
        """Test that sub-delimiters in the path survive."""
        url = "https://example.org/a,b;c=d/e:f@g"
        assert encode_url(url) == url

    def test_non_ascii_path(self) -> None:
        """Test that non-ASCII characters are UTF-8 percent-encoded."""
        assert encode_url("https://example.org/café") == "https://example.org/caf%C3%A9"

    def test_anchor_without_leading_slash(self) -> None:
        """Test that an in-page anchor is returned without a leading slash."""
        assert encode_url("#Some Heading") == "#Some%20Heading"

    def test_anchor_with_slash_normalization(self) -> None:
        """Test that a '/#' produced for a bare fragment is reduced to '#'."""
        assert not encode_url("#a/b").startswith("/")
        assert encode_url("#a/b") == "#a/b"

    def test_empty_url(self) -> None:
        """Test that an empty URL stays empty."""
        assert encode_url("") == ""

    def test_empty_authority_is_kept(self) -> None:
        """Test that a '//' path after an empty authority is not read as a host."""
        assert encode_url("https:////host/a b") == "https:////host/a%20b"
        assert encode_url(encode_url("////x")) == "////x"

    def test_brackets_outside_host_are_encoded(self) -> None:
        """Test that brackets in the path and fragment are percent-encoded."""
        assert encode_url("https://example.org/[a]#[b]") == "https://example.org/%5Ba%5D#%5Bb%5D"

    @pytest.mark.parametrize("url", ["https://[bad", "http://[::1/x", "https://a]b/"])
    def test_malformed_host_raises(self, url: str) -> None:
        """Test that an unparseable network location raises ValueError."""
        with pytest.raises(ValueError):
            encode_url(url)


def _encode_or_reject(url: str) -> str:
    try:
        return encode_url(url)
    except ValueError:
        assume(False)
        raise


@pytest.mark.unit
@pytest.mark.fuzzing
class TestEncodeUrlProperties:
    """Property-based tests for encode_url."""

    @given(url=st.text())
    def test_encoding_is_idempotent(self, url: str) -> None:
        """Test that encoding an encoded URL returns it unchanged, for any text."""
        once = _encode_or_reject(url)
        assert encode_url(once) == once

    @given(scheme=st.sampled_from(["http", "https", "ftp", "mailto"]), host=st.text(), rest=st.text())
    def test_composed_urls_are_idempotent(self, scheme: str, host: str, rest: str) -> None:
        """Test idempotence with an arbitrary host, path, query and fragment."""
        once = _encode_or_reject(f"{scheme}://{host}/{rest}")
        assert encode_url(once) == once

    @given(anchor=st.text())
    def test_anchor_never_gains_slash(self, anchor: str) -> None:
        """Test that pure in-page anchors keep their leading '#'."""
        result = encode_url("#" + anchor)
        assert not result.startswith("/")
        assert encode_url(result) == result

    @given(rest=st.text())
    def test_no_spaces_in_output(self, rest: str) -> None:
        """Test that path, query and fragment never keep raw spaces."""
        assert " " not in encode_url(f"https://example.org/{rest}")
