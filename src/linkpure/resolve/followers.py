"""Per-platform redirect followers.

Every follower makes one redirect-disabled request (two for MercadoLivre
social links) and returns the destination URL, or None when the upstream
call failed. No follower raises.
"""

from typing import Optional, Protocol, Tuple
from urllib.parse import parse_qs, unquote, urljoin, urlparse

import httpx

from ..clean.html_extract import extract_social_product_link
from ..clean.url_cleaner import clean_aliexpress_share_target
from ..config import SOCIAL_ACCEPT, SOCIAL_ACCEPT_LANGUAGE
from ..logging import get_logger

logger = get_logger(__name__)

ALIEXPRESS_SHARE_MARKER = "star.aliexpress.com/share/share.htm"
MERCADOLIVRE_SOCIAL_SEGMENT = "/social/"


class RedirectResolver(Protocol):
    """Outbound HTTP capability used by the followers."""

    def resolve_location(self, url: str, headers=None) -> Optional[str]: ...

    def fetch_html(self, url: str, headers=None) -> str: ...


def _request_location(client: RedirectResolver, url: str, platform_label: str) -> Tuple[bool, Optional[str]]:
    """Resolve one hop. Returns (ok, location); ok is False when the request failed."""
    try:
        return True, client.resolve_location(url)
    except httpx.TimeoutException:
        logger.warning(f"Timeout resolving {platform_label} URL {url}")
    except Exception as e:
        logger.warning(f"Error resolving {platform_label} URL {url}: {e}")
    return False, None


def _follow(client: RedirectResolver, url: str, platform_label: str) -> Optional[str]:
    ok, location = _request_location(client, url, platform_label)
    if not ok:
        return None
    return location or url


def _unwrap_aliexpress_share(url: str) -> Optional[str]:
    """Return the cleaned ``redirectUrl`` target of a share wrapper, if any."""
    if ALIEXPRESS_SHARE_MARKER not in url:
        return None
    values = parse_qs(urlparse(url).query).get("redirectUrl")
    if not values or not values[0]:
        return None
    return clean_aliexpress_share_target(unquote(values[0]))


def follow_shopee_redirect(client: RedirectResolver, url: str) -> Optional[str]:
    return _follow(client, url, "Shopee")


def follow_amazon_redirect(client: RedirectResolver, url: str) -> Optional[str]:
    return _follow(client, url, "Amazon")


def follow_banggood_redirect(client: RedirectResolver, url: str) -> Optional[str]:
    return _follow(client, url, "Banggood")


def follow_aliexpress_redirect(client: RedirectResolver, url: str) -> Optional[str]:
    """
    Resolve an AliExpress link, unwrapping ``share.htm`` wrappers.

    A share wrapper is unwrapped whether it comes back as the Location header
    or was submitted directly. Any AliExpress destination reached this way is
    reduced to scheme, host and path.
    """
    ok, location = _request_location(client, url, "AliExpress")
    if not ok:
        return None

    try:
        if location:
            unwrapped = _unwrap_aliexpress_share(location)
            if unwrapped:
                return unwrapped
            if "aliexpress.com" in location:
                return clean_aliexpress_share_target(location)
            return location

        return _unwrap_aliexpress_share(url) or url
    except ValueError as e:
        logger.warning(f"Malformed AliExpress redirect for {url}: {e}")
        return None


def resolve_mercadolivre_social(client: RedirectResolver, url: str) -> Optional[str]:
    """Fetch a ``/social/`` share page and pull out the featured product link."""
    headers = {
        "Accept": SOCIAL_ACCEPT,
        "Accept-Language": SOCIAL_ACCEPT_LANGUAGE,
    }
    try:
        html = client.fetch_html(url, headers=headers)
    except Exception as e:
        logger.warning(f"Error fetching MercadoLivre social page {url}: {e}")
        return None

    product_url = extract_social_product_link(html)
    if product_url is None:
        logger.info(f"No product link found on MercadoLivre social page {url}")
        return None
    return urljoin(url, product_url)


def follow_mercadolivre_redirect(client: RedirectResolver, url: str) -> Optional[str]:
    """
    Resolve a MercadoLivre link.

    Social share pages need a second, content-fetching request; if that
    yields nothing, the social URL itself is returned.
    """
    final_url = _follow(client, url, "MercadoLivre")
    if final_url is None:
        return None

    try:
        is_social = MERCADOLIVRE_SOCIAL_SEGMENT in urlparse(final_url).path
    except ValueError:
        is_social = False

    if is_social:
        return resolve_mercadolivre_social(client, final_url) or final_url
    return final_url
