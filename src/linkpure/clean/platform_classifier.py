"""Platform detection for submitted links, based on raw substring matching."""

from enum import Enum
from typing import Optional, Tuple
from urllib.parse import parse_qs, unquote, urlparse

from ..logging import get_logger

logger = get_logger(__name__)


class Platform(str, Enum):
    """Platform tag reported back to the caller."""
    ALIEXPRESS = "aliexpress"
    MERCADOLIVRE = "mercadolivre"
    AMAZON = "amazon"
    SHOPEE = "shopee"
    YOUTUBE = "youtube"  # input-stage marker only, never reported
    BANGGOOD = "banggood"
    OTHER = "other"


YOUTUBE_HOST = "www.youtube.com"
YOUTUBE_REDIRECT_PATH = "/redirect"

# Any of these must appear for the link to be handled at all
SUPPORTED_FRAGMENTS = (
    "amazon.",
    "amzn.",
    "aliexpress.com",
    "click.aliexpress.com",
    "star.aliexpress.com",
    "mercadolivre.com.br",
    "mercadolibre.com",
    "mercadolivre.com",
    "shopee.com.br",
    "s.shopee.com.br",
    "banggood.com",
)

# Checked in order, first match wins
PLATFORM_FRAGMENTS: Tuple[Tuple[Platform, Tuple[str, ...]], ...] = (
    (Platform.SHOPEE, ("shopee.com.br", "s.shopee.com.br")),
    (Platform.AMAZON, ("amazon.", "amzn.")),
    (Platform.ALIEXPRESS, ("aliexpress.com", "click.aliexpress.com", "star.aliexpress.com")),
    (Platform.MERCADOLIVRE, ("mercado",)),
    (Platform.BANGGOOD, ("banggood.com",)),
)


def extract_youtube_redirect(url: str) -> Optional[str]:
    """
    Unwrap a YouTube external-link redirect.

    Args:
        url: Link as submitted by the user

    Returns:
        The decoded target of ``www.youtube.com/redirect?q=...``, or None when
        the link is not such a wrapper (or cannot be parsed at all).
    """
    try:
        parsed = urlparse(url)
        if parsed.hostname != YOUTUBE_HOST or parsed.path != YOUTUBE_REDIRECT_PATH:
            return None
        values = parse_qs(parsed.query).get("q")
    except (ValueError, TypeError, AttributeError):
        return None

    if not values or not values[0]:
        return None

    target = unquote(values[0])
    logger.debug(f"Unwrapped YouTube redirect -> {target}")
    return target


def is_supported_platform(url: str) -> bool:
    return any(fragment in url for fragment in SUPPORTED_FRAGMENTS)


def classify_platform(url: str) -> Platform:
    """
    Classify a link by platform.

    Matching is case-sensitive and substring-based on the raw string, so share
    subdomains and app deep links are picked up without a host allow-list.
    A fragment occurring inside a query parameter can cause a false positive.
    """
    if not is_supported_platform(url):
        return Platform.OTHER

    for platform, fragments in PLATFORM_FRAGMENTS:
        if any(fragment in url for fragment in fragments):
            return platform

    return Platform.OTHER
