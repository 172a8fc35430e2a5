from __future__ import annotations

import logging
from typing import Iterable, Optional
from urllib.parse import quote

import httpx

from ledger.functional import Either, Left, Right

logger = logging.getLogger(__name__)

ALL_METHODS_FAILED = "All sync methods failed. Please check your internet connection."


def drive_urls(file_id: str, proxy_base: str) -> list[str]:
    """Download URLs for a shared Drive file, in the order they are tried."""
    direct = f"https://drive.google.com/uc?export=download&id={file_id}"
    return [
        direct,
        f"https://docs.google.com/uc?export=download&id={file_id}",
        proxy_base + quote(direct, safe="!~*'()"),
    ]


def fetch_text(client: httpx.Client, url: str) -> Optional[str]:
    r = client.get(url, headers={"Cache-Control": "no-cache"})
    if r.is_success and r.text:
        return r.text
    logger.warning("GET %s returned %s with %d bytes", url, r.status_code, len(r.content))
    return None


def fetch_csv(
    urls: Iterable[str],
    client: Optional[httpx.Client] = None,
    *,
    timeout_s: float = 15.0,
) -> Either[str, str]:
    """Try each URL in turn and return the first non-empty body."""
    own_client = client is None
    if own_client:
        client = httpx.Client(timeout=timeout_s, follow_redirects=True)

    try:
        for i, url in enumerate(urls, start=1):
            try:
                text = fetch_text(client, url)
            except httpx.HTTPError as e:
                logger.warning("Sync method %d failed: %s", i, e)
                continue
            if text is not None:
                logger.info("Sync method %d succeeded (%d chars)", i, len(text))
                return Right(text)
    finally:
        if own_client:
            client.close()

    return Left(ALL_METHODS_FAILED)
