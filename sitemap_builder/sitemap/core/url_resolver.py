import re
from typing import Union
from urllib.parse import ParseResult, SplitResult, urljoin, urlparse

import httpx

from sitemap_builder.exceptions import InvalidArgument

UrlLike = Union[str, bytes, ParseResult, SplitResult, httpx.URL]

_ALLOWED_SCHEMES = ("http", "https")
_BASE_URL_ERROR = ("Base URL must include scheme and host, i.e. https://example.com "
                   "(only http and https URLs are supported)")

# ASCII controls, lone surrogates and U+FFFE/U+FFFF cannot be written to XML 1.0
_UNWRITABLE_CHARS = re.compile(r"[^\x20-\x7e\x80-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _assert_writable(text: str, label: str) -> None:
    if _UNWRITABLE_CHARS.search(text):
        raise InvalidArgument(f"{label} must not contain control or non-XML characters. Received {text!r}")


def resolve_base_url(url: str) -> str:
    if not isinstance(url, str):
        raise InvalidArgument(_BASE_URL_ERROR)

    try:
        parsed = urlparse(url.strip())
    except ValueError as e:
        raise InvalidArgument(f"{_BASE_URL_ERROR}. Received \"{url}\"") from e

    if parsed.scheme.lower() not in _ALLOWED_SCHEMES or not parsed.netloc:
        raise InvalidArgument(f"{_BASE_URL_ERROR}. Received \"{url}\"")
    _assert_writable(url.strip(), "Base URL")

    if not parsed.path:
        parsed = parsed._replace(path="/")
    return parsed.geturl()


def _to_text(url: UrlLike) -> str:
    if isinstance(url, str):
        return url
    if isinstance(url, (bytes, bytearray)):
        try:
            return bytes(url).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidArgument("URLs given as bytes must be UTF-8 encoded") from e
    if isinstance(url, (ParseResult, SplitResult)):
        return url.geturl()
    if isinstance(url, httpx.URL):
        return str(url)
    raise InvalidArgument(f"URLs must be strings or parsed URL values, got {type(url).__name__}")


def resolve_url(base_url: str, url: UrlLike) -> str:
    text = _to_text(url).strip()
    _assert_writable(text, "URLs")
    try:
        return urljoin(base_url, text)
    except ValueError as e:
        raise InvalidArgument(f"URLs must be strings or parsed URL values. Could not parse \"{text}\"") from e
