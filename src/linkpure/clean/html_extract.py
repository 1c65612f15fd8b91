"""Product link extraction from MercadoLivre social share pages."""

from bs4 import BeautifulSoup
from typing import Optional

from ..logging import get_logger

logger = get_logger(__name__)

PRODUCT_TITLE_CLASS = "poly-component__title"


def extract_social_product_link(html: str) -> Optional[str]:
    """
    Find the first product title anchor on a social share page.

    Args:
        html: HTML content of the ``/social/`` page

    Returns:
        The anchor's href without its ``#`` fragment, or None if not present
    """
    if not html:
        return None

    try:
        soup = BeautifulSoup(html, "lxml")
        anchor = soup.find("a", class_=PRODUCT_TITLE_CLASS, href=True)
    except Exception as e:
        logger.warning(f"Social page parsing failed: {e}")
        return None

    if anchor is None:
        return None

    href = anchor["href"].split("#")[0].strip()
    return href or None
