"""Follower/stripper pairs for each supported platform."""

from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, Optional

from ..clean.platform_classifier import Platform
from ..clean.url_cleaner import clean_amazon_url, clean_banggood_url, clean_url
from .followers import (
    RedirectResolver,
    follow_aliexpress_redirect,
    follow_amazon_redirect,
    follow_banggood_redirect,
    follow_mercadolivre_redirect,
    follow_shopee_redirect,
)


@dataclass(frozen=True)
class PlatformRule:
    """How a platform's links are resolved and then stripped."""
    platform: Platform
    label: str
    follow: Callable[[RedirectResolver, str], Optional[str]]
    strip: Callable[[str], str]


PLATFORM_RULES: Dict[Platform, PlatformRule] = {
    Platform.SHOPEE: PlatformRule(
        platform=Platform.SHOPEE,
        label="Shopee",
        follow=follow_shopee_redirect,
        strip=partial(clean_url, platform=Platform.SHOPEE),
    ),
    Platform.AMAZON: PlatformRule(
        platform=Platform.AMAZON,
        label="Amazon",
        follow=follow_amazon_redirect,
        strip=clean_amazon_url,
    ),
    Platform.ALIEXPRESS: PlatformRule(
        platform=Platform.ALIEXPRESS,
        label="AliExpress",
        follow=follow_aliexpress_redirect,
        strip=partial(clean_url, platform=Platform.ALIEXPRESS),
    ),
    Platform.MERCADOLIVRE: PlatformRule(
        platform=Platform.MERCADOLIVRE,
        label="MercadoLivre",
        follow=follow_mercadolivre_redirect,
        strip=partial(clean_url, platform=Platform.MERCADOLIVRE),
    ),
    Platform.BANGGOOD: PlatformRule(
        platform=Platform.BANGGOOD,
        label="Banggood",
        follow=follow_banggood_redirect,
        strip=clean_banggood_url,
    ),
}
