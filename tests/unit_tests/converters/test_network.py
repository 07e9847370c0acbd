"""Unit tests for curl to fetch conversion."""

from __future__ import annotations

from devconvert.application.options import GeneratorOptions
from devconvert.converters.network import curl_to_fetch, extract_url


def test_single_quoted_url_is_embedded() -> None:
    """Emit the fixed fetch template around the quoted URL."""
    assert curl_to_fetch("curl 'https://x.test/y'") == (
        "fetch('https://x.test/y', {\n"
        "  method: 'GET',\n"
        "  headers: {\n"
        "    'Content-Type': 'application/json'\n"
        "  }\n"
        "}).then(res => res.json());"
    )


def test_single_quoted_url_preferred_over_earlier_double_quoted_header() -> None:
    """A single-quoted token wins even when a double-quoted one comes first."""
    command = 'curl -H "Accept: text/plain" \'https://x.test/y\''
    assert extract_url(command, "fallback") == "https://x.test/y"


def test_double_quoted_url() -> None:
    """Double quotes are accepted too."""
    assert extract_url('curl -X POST "https://x.test/z"', "fallback") == "https://x.test/z"


def test_missing_url_uses_placeholder() -> None:
    """Fall back to the configured placeholder URL."""
    assert "fetch('https://api.example.com'," in curl_to_fetch("curl https://x.test")
    options = GeneratorOptions(placeholder_url="https://local.test")
    assert "fetch('https://local.test'," in curl_to_fetch("curl", options)


def test_method_and_headers_are_not_carried_over() -> None:
    """Only the URL survives; the method stays GET."""
    output = curl_to_fetch("curl -X DELETE 'https://x.test/1' -H 'X-Token: 1'")
    assert "method: 'GET'" in output
    assert "X-Token" not in output
