"""Shared fixtures: a deterministic stand-in for the HTTP client."""

import pytest


class StubFetchClient:
    """Canned redirect/page responses keyed by URL.

    A value that is an exception instance is raised instead of returned.
    """

    def __init__(self, locations=None, pages=None):
        self.locations = locations or {}
        self.pages = pages or {}
        self.resolve_calls = []
        self.fetch_calls = []

    def resolve_location(self, url, headers=None):
        self.resolve_calls.append(url)
        outcome = self.locations.get(url)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def fetch_html(self, url, headers=None):
        self.fetch_calls.append((url, headers or {}))
        outcome = self.pages.get(url, "")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def make_client():
    return StubFetchClient
