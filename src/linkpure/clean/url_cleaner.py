"""URL cleaning utilities - platform-specific tracking parameter removal."""

from typing import Iterable
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

from .platform_classifier import Platform


ALIEXPRESS_PARAMS = (
    "spm", "srcSns", "businessType", "templateId", "currency",
    "language", "src", "pdp_npi", "algo_pvid", "algo_exp_id", "sku_id",
    "sourceType", "spreadType", "bizType", "social_params",
)

SHOPEE_PARAMS = (
    "uls_trackid", "utm_campaign", "utm_content",
    "utm_medium", "utm_source", "utm_term",
)

MERCADOLIVRE_PARAMS = ("ref", "matt_tool", "forceInApp", "from")

BANGGOOD_PARAMS = ("cur_warehouse", "ID", "rmmds", "p", "custlinkid")

CLEAN_URL_PARAMS = {
    Platform.ALIEXPRESS: ALIEXPRESS_PARAMS,
    Platform.SHOPEE: SHOPEE_PARAMS,
    Platform.MERCADOLIVRE: MERCADOLIVRE_PARAMS,
}


def remove_query_params(query: str, params: Iterable[str]) -> str:
    """
    Drop the named parameters from a query string.

    Surviving parameters keep their original order. When nothing is removed
    the query string is returned untouched, so cleaning is idempotent.
    """
    if not query:
        return query

    blocked = set(params)
    pairs = parse_qsl(query, keep_blank_values=True)
    kept = [(key, value) for key, value in pairs if key not in blocked]

    if len(kept) == len(pairs):
        return query
    return urlencode(kept)


def clean_url(url: str, platform: Platform) -> str:
    """
    Clean an AliExpress, Shopee or MercadoLivre URL.

    Args:
        url: Absolute URL, already resolved upstream
        platform: One of ALIEXPRESS, SHOPEE or MERCADOLIVRE

    Returns:
        URL with the platform's tracking params removed; AliExpress paths are
        also collapsed to their canonical ``<id>.html`` form.
    """
    parsed = urlparse(url)
    query = remove_query_params(parsed.query, CLEAN_URL_PARAMS[platform])
    path = parsed.path

    if platform == Platform.ALIEXPRESS:
        path_parts = path.split(".")
        if len(path_parts) > 1:
            path = path_parts[0] + ".html"

    return urlunparse(parsed._replace(path=path, query=query))


def clean_aliexpress_share_target(url: str) -> str:
    """Reduce an AliExpress link reached via redirect to scheme, host and path."""
    try:
        parsed = urlparse(url)
        if "aliexpress.com" not in (parsed.hostname or ""):
            return url
        path = parsed.path.split("?")[0]
        return f"{parsed.scheme}://{parsed.netloc}{path}"
    except ValueError:
        return url


def clean_amazon_url(url: str) -> str:
    """
    Reduce an Amazon product URL to ``/dp/<productId>`` with no query string.

    Non-Amazon hosts (e.g. an unresolved amzn.to short link) are returned
    unchanged.
    """
    try:
        parsed = urlparse(url)
        if "amazon." not in (parsed.hostname or ""):
            return url

        path = parsed.path
        dp_index = path.find("/dp/")
        if dp_index != -1:
            product_id = path[dp_index + 4:].split("/")[0]
            path = f"/dp/{product_id}"

        return urlunparse(parsed._replace(path=path, query=""))
    except ValueError:
        return url


def clean_banggood_url(url: str) -> str:
    try:
        parsed = urlparse(url)
        query = remove_query_params(parsed.query, BANGGOOD_PARAMS)
        return urlunparse(parsed._replace(query=query))
    except ValueError:
        return url
