from collections.abc import Mapping
from typing import Any, List, Optional
from urllib.parse import quote

# Characters left as-is by qpart; everything else is escaped, slashes included.
UNRESERVED_MARKS = "-_.!~*'()"


def as_text(value: Any) -> str:
    """Render a scalar the way it should appear inside a URL."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if v is None else as_text(v) for v in value)
    return str(value)


def qpart(value: Any) -> str:
    """Quote a URL component (slashes are unsafe)."""
    if isinstance(value, (bytes, bytearray)):
        return quote(bytes(value), safe=UNRESERVED_MARKS)
    return quote(as_text(value), safe=UNRESERVED_MARKS)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def encode_path(path: Any) -> Any:
    """Turn a path spec into a path string.

    A plain string (or anything that is not a list) is returned untouched,
    ``None`` included. In a list, nested lists are quoted piece by piece and
    joined with ``/``; top-level strings are kept verbatim.

    >>> encode_path(["a", ["b c", "d/e"]])
    'a/b%20c/d%2Fe'
    """
    if not _is_sequence(path):
        return path

    pieces: List[str] = []
    for segment in path:
        if _is_sequence(segment):
            pieces.append("/".join(qpart(s) for s in segment))
        elif segment is None:
            pieces.append("")
        else:
            pieces.append(as_text(segment))
    return "/".join(pieces)


def encode_query(query: Any) -> Optional[str]:
    """Encode a flat mapping as a query string.

    Returns ``None`` when there is nothing to append: the argument is not a
    mapping, or it yields no pairs. List values repeat the key with a ``[]``
    suffix, which gets quoted along with the key.
    """
    if not isinstance(query, Mapping):
        return None

    pairs: List[str] = []
    for key, value in query.items():
        if _is_sequence(value):
            array_key = qpart(f"{as_text(key)}[]")
            pairs.extend(f"{array_key}={qpart(v)}" for v in value)
        else:
            pairs.append(f"{qpart(key)}={qpart(value)}")

    if not pairs:
        return None
    return "&".join(pairs)


def build_url(path: Any, query: Any = None) -> Any:
    url = encode_path(path)
    qs = encode_query(query)
    if qs is None:
        return url
    # A path may already carry its own query parameters.
    if url is not None and "?" in as_text(url):
        return f"{url}&{qs}"
    return f"{as_text(url) if url is not None else ''}?{qs}"
