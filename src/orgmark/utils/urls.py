#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/utils/urls.py
"""URL percent-encoding for link targets.

:func:`encode_url` is idempotent: characters that are already
percent-escaped are kept as they are, so encoding an encoded URL returns it
unchanged.
"""

from __future__ import annotations

from urllib.parse import quote, urlsplit, urlunsplit

# RFC 3986 sub-delims plus ':' and '@', with '%' kept so escapes survive
_PATH_SAFE = "/:@!$&'()*+,;=%~"
_QUERY_SAFE = "/:@!$&'()*+,;=%~?"
_FRAGMENT_SAFE = "/:@!$&'()*+,;=%~?"


def _strip_anchor_slash(original: str, encoded: str) -> str:
    # Normalizers treat a bare fragment as an empty path and emit "/#frag"
    if original.lstrip().startswith("#") and encoded.startswith("/#"):
        return encoded[1:]
    return encoded


def _join_empty_authority(scheme: str, path: str, query: str, fragment: str) -> str:
    # urlunsplit drops an empty authority, turning the first path segment into a host
    result = f"{scheme}://" if scheme else "//"
    result += path
    if query:
        result += "?" + query
    if fragment:
        result += "#" + fragment
    return result


def encode_url(url: str) -> str:
    """Percent-encode the path, query and fragment of a URL.

    Scheme and network location are kept as given. A pure in-page anchor
    (``#name``) is returned without a leading ``/``.

    Parameters
    ----------
    url : str
        URL to encode; may already be (partially) encoded

    Returns
    -------
    str
        Encoded URL

    Raises
    ------
    ValueError
        If the network location cannot be parsed, e.g. an unbalanced
        IPv6 bracket

    Examples
    --------
        >>> encode_url("https://example.org/a b?q=x y#top")
        'https://example.org/a%20b?q=x%20y#top'
        >>> encode_url(encode_url("https://example.org/a b"))
        'https://example.org/a%20b'
        >>> encode_url("#Some Heading")
        '#Some%20Heading'

    """
    parts = urlsplit(url)
    path = quote(parts.path, safe=_PATH_SAFE)
    query = quote(parts.query, safe=_QUERY_SAFE)
    fragment = quote(parts.fragment, safe=_FRAGMENT_SAFE)
    if not parts.netloc and path.startswith("//"):
        return _join_empty_authority(parts.scheme, path, query, fragment)
    encoded = urlunsplit((parts.scheme, parts.netloc, path, query, fragment))
    return _strip_anchor_slash(url, encoded)
