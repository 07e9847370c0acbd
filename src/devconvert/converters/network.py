"""Shell ``curl`` command to ``fetch`` call conversion."""

from __future__ import annotations

import re

from devconvert.application.options import DEFAULT_OPTIONS, GeneratorOptions

_SINGLE_QUOTED = re.compile(r"'([^']+)'")
_DOUBLE_QUOTED = re.compile(r'"([^"]+)"')

FETCH_TEMPLATE = (
    "fetch('{url}', {{\n"
    "  method: 'GET',\n"
    "  headers: {{\n"
    "    'Content-Type': 'application/json'\n"
    "  }}\n"
    "}}).then(res => res.json());"
)


def extract_url(command: str, default: str) -> str:
    """Return the URL quoted in ``command``, or ``default``.

    The first single-quoted token wins; a double-quoted token is only
    used when the command holds no single-quoted one.
    """
    for pattern in (_SINGLE_QUOTED, _DOUBLE_QUOTED):
        match = pattern.search(command)
        if match is not None:
            return match.group(1)
    return default


def curl_to_fetch(text: str, options: GeneratorOptions = DEFAULT_OPTIONS) -> str:
    """Emit a GET ``fetch`` call for the URL of a ``curl`` command.

    Only the URL is carried over; ``-X`` and ``-H`` flags are ignored.
    """
    url = extract_url(text, options.placeholder_url)
    return FETCH_TEMPLATE.format(url=url)
