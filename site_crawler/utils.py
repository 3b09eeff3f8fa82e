# File: site_crawler/utils.py
"""site_crawler.utils: Утилитарные функции для нормализации URL, фильтра по хосту и имён страниц."""

from __future__ import annotations

import re
from typing import Collection, Dict, List, Optional, Sequence
from urllib.parse import urljoin, urlsplit, urlunsplit

from site_crawler.logger import logger

__all__: Sequence[str] = (
    "InvalidUrlError",
    "normalize_url",
    "validate_seed",
    "same_origin",
    "extract_host",
    "slugify",
    "remove_duplicates",
)

_DEFAULT_PORTS: Dict[str, int] = {"http": 80, "https": 443}
_SLUG_SPACES = re.compile(r"\s+")
_SLUG_JUNK = re.compile(r"[^\w\-]+", re.ASCII)
_SLUG_DASHES = re.compile(r"-{2,}")


class InvalidUrlError(ValueError):
    """Стартовый URL не удалось разобрать как абсолютный http(s)-адрес."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid seed URL: {url!r}")
        self.url = url


def _is_network_path(raw: str, scheme: str) -> bool:
    """http(s)-ссылка вида ``scheme://authority...`` (authority может быть пустым)."""
    return scheme.lower() in _DEFAULT_PORTS and raw[len(scheme) + 1:].startswith("//")


def _remove_dot_segments(path: str) -> str:
    """Убирает ``.`` и ``..`` из абсолютного пути (RFC 3986, 5.2.4)."""
    segments = path.split("/")
    if "." not in segments and ".." not in segments:
        return path
    resolved: List[str] = []
    for segment in segments:
        if segment == "..":
            if len(resolved) > 1:
                resolved.pop()
        elif segment != ".":
            resolved.append(segment)
    if segments[-1] in (".", ".."):
        resolved.append("")
    return "/".join(resolved)


def normalize_url(href: str, base_url: str) -> Optional[str]:
    """Разрешает href относительно base_url и приводит к каноничной форме.

    Фрагмент отбрасывается, схема и хост приводятся к нижнему регистру,
    порт по умолчанию удаляется, корневой путь без query схлопывается до
    ``scheme://host``. Для некорректных и не-http(s) ссылок возвращает None.
    """
    if not isinstance(href, str):
        return None
    raw = href.strip()
    if not raw:
        return None
    try:
        head = urlsplit(raw)
        if _is_network_path(raw, head.scheme) and not head.hostname:
            return None
        parsed = urlsplit(urljoin(base_url, raw))
        port = parsed.port
    except ValueError:
        return None

    scheme = parsed.scheme.lower()
    host = parsed.hostname
    if scheme not in _DEFAULT_PORTS or not host:
        return None

    netloc = f"[{host}]" if ":" in host else host
    if port is not None and port != _DEFAULT_PORTS[scheme]:
        netloc = f"{netloc}:{port}"
    userinfo, sep, _ = parsed.netloc.rpartition("@")
    if sep:
        netloc = f"{userinfo}@{netloc}"

    path, query = _remove_dot_segments(parsed.path), parsed.query
    if path in ("", "/") and not query:
        return f"{scheme}://{netloc}"
    return urlunsplit((scheme, netloc, path or "/", query, ""))


def validate_seed(url: str) -> str:
    """Нормализует стартовый URL или бросает InvalidUrlError."""
    normalized = normalize_url(url, url) if isinstance(url, str) else None
    if normalized is None:
        raise InvalidUrlError(str(url))
    return normalized


def extract_host(url: str) -> Optional[str]:
    """Возвращает hostname из URL (в нижнем регистре) или None."""
    try:
        return urlsplit(url).hostname
    except ValueError:
        return None


def same_origin(candidate: str, seed: str) -> bool:
    """True, если hostname кандидата совпадает с hostname seed (без учёта схемы и порта)."""
    host = extract_host(candidate)
    return host is not None and host == extract_host(seed)


def slugify(text: str) -> str:
    """Превращает произвольный текст в slug: ``"About Us!"`` -> ``"about-us"``."""
    slug = _SLUG_SPACES.sub("-", str(text).lower().strip())
    slug = _SLUG_JUNK.sub("", slug)
    return _SLUG_DASHES.sub("-", slug)


def remove_duplicates(urls: Collection[str]) -> List[str]:
    """Удаляет дубликаты из списка URL, сохраняя порядок."""
    unique = list(dict.fromkeys(urls))
    removed = len(urls) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate URLs", removed)
    return unique
