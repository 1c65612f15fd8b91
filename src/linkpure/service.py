"""Link cleaning pipeline: unwrap, classify, resolve, strip."""

from dataclasses import dataclass

from .clean.platform_classifier import Platform, classify_platform, extract_youtube_redirect
from .logging import get_logger
from .resolve.followers import RedirectResolver
from .resolve.platforms import PLATFORM_RULES

logger = get_logger(__name__)


class UnresolvableURLError(Exception):
    """A platform redirect could not be resolved upstream."""

    def __init__(self, platform_label: str):
        self.platform_label = platform_label
        super().__init__(f"Could not resolve {platform_label} URL")


@dataclass
class UnaffiliateResult:
    url: str
    was_youtube_redirect: bool
    platform: Platform


def unaffiliate(url: str, client: RedirectResolver) -> UnaffiliateResult:
    """
    Clean one submitted link.

    Args:
        url: Link as submitted by the user
        client: Outbound HTTP capability used to follow redirects

    Returns:
        UnaffiliateResult with the cleaned URL. Unsupported platforms are
        passed through untouched without any network call.

    Raises:
        UnresolvableURLError: the platform's redirect could not be followed
    """
    youtube_target = extract_youtube_redirect(url)
    target_url = youtube_target or url
    was_youtube_redirect = youtube_target is not None

    platform = classify_platform(target_url)
    rule = PLATFORM_RULES.get(platform)
    if rule is None:
        logger.info(f"Passthrough for unsupported link: {target_url}")
        return UnaffiliateResult(
            url=target_url,
            was_youtube_redirect=was_youtube_redirect,
            platform=Platform.OTHER,
        )

    final_url = rule.follow(client, target_url)
    if not final_url:
        raise UnresolvableURLError(rule.label)

    cleaned = rule.strip(final_url)
    logger.info(f"Cleaned {rule.label} link: {target_url} -> {cleaned}")
    return UnaffiliateResult(
        url=cleaned,
        was_youtube_redirect=was_youtube_redirect,
        platform=platform,
    )
