"""Tests for platform classification and YouTube redirect unwrapping."""

import pytest

from linkpure.clean.platform_classifier import Platform, classify_platform, extract_youtube_redirect


@pytest.mark.parametrize("url, expected", [
    ("https://s.shopee.com.br/AbC123", Platform.SHOPEE),
    ("https://shopee.com.br/product/1/2", Platform.SHOPEE),
    ("https://www.amazon.com.br/dp/B0ABC12345", Platform.AMAZON),
    ("https://amzn.to/3xYzAbc", Platform.AMAZON),
    ("https://click.aliexpress.com/e/_DmXyZ", Platform.ALIEXPRESS),
    ("https://star.aliexpress.com/share/share.htm?redirectUrl=x", Platform.ALIEXPRESS),
    ("https://mercadolivre.com/sec/1AbCd", Platform.MERCADOLIVRE),
    ("https://www.mercadolibre.com.ar/p/MLA123", Platform.MERCADOLIVRE),
    ("https://www.banggood.com/Drone-p-123.html", Platform.BANGGOOD),
    ("https://example.com/?x=1", Platform.OTHER),
])
def test_classify_platform(url, expected):
    assert classify_platform(url) == expected


def test_shopee_takes_priority_over_amazon():
    url = "https://s.shopee.com.br/AbC123?next=https://www.amazon.com/dp/X"
    assert classify_platform(url) == Platform.SHOPEE


def test_amazon_takes_priority_over_aliexpress():
    url = "https://www.amazon.com/dp/X?from=aliexpress.com"
    assert classify_platform(url) == Platform.AMAZON


def test_mercado_substring_alone_is_not_supported():
    assert classify_platform("https://mercado.example.com/item") == Platform.OTHER


def test_matching_is_case_sensitive():
    assert classify_platform("https://WWW.AMAZON.COM/dp/X") == Platform.OTHER


def test_youtube_redirect_unwrapped():
    url = "https://www.youtube.com/redirect?q=https%3A%2F%2Famazon.com%2Fdp%2FABC123%3Ftag%3Dxyz"
    assert extract_youtube_redirect(url) == "https://amazon.com/dp/ABC123?tag=xyz"


def test_youtube_redirect_ignores_other_params():
    url = "https://www.youtube.com/redirect?event=video_description&redir_token=abc&q=https%3A%2F%2Fexample.com%2F&v=xyz"
    assert extract_youtube_redirect(url) == "https://example.com/"


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://youtube.com/redirect?q=https%3A%2F%2Fexample.com",
    "https://www.youtube.com/redirect?event=video_description",
    "https://www.youtube.com/redirect?q=",
    "https://www.amazon.com/redirect?q=https%3A%2F%2Fexample.com",
    "http://[broken/redirect?q=x",
    "not a url at all",
])
def test_youtube_redirect_not_unwrapped(url):
    assert extract_youtube_redirect(url) is None
