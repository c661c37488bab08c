"""Open issue retrieval for GitHub-hosted trackers.

Usage:
    tracker = IssueTracker(GitHubClient(token="ghp_xxx"))
    tracker.fetch_open_issues("https://github.com/acme/widget/issues")
        # -> [OpenIssue(number=12, title="...", labels=frozenset({"bug"})), ...]
    tracker.fetch_open_issues("https://jira.acme.com/browse/WID")   # -> None

Only URLs on github.com that point at the hosted issues page are handled.
Anything else is skipped silently. API failures never abort the run: they
are reported as a FetchWarning and the URL yields no issues.
"""

import re
import warnings

from dep_issues.client import GitHubClient, GitHubClientError
from dep_issues.models import OpenIssue

FORGE_HOST = "github.com"
ISSUES_SEGMENT = "issues"

_REPO_RE = re.compile(r"github\.com/([\w.-]+)/([\w.-]+)/")


class FetchWarning(UserWarning):
    """Issued when open issues could not be fetched for one tracker URL."""


def is_applicable(url: str) -> bool:
    """True when *url* looks like a GitHub issues page."""
    return FORGE_HOST in url and ISSUES_SEGMENT in url


def extract_repo_slug(url: str) -> str | None:
    """``"https://github.com/acme/widget/issues"`` -> ``"acme/widget"``."""
    match = _REPO_RE.search(url)
    if match is None:
        return None
    return f"{match.group(1)}/{match.group(2)}"


class IssueTracker:
    """Fetch open issues through an explicitly supplied GitHub client."""

    def __init__(self, client: GitHubClient) -> None:
        self._client = client
        # url -> description of the last failure, for the report
        self.errors: dict[str, str] = {}

    def fetch_open_issues(self, url: str) -> list[OpenIssue] | None:
        """Return the open issues behind *url*.

        Returns None when *url* is not a recognisable GitHub issues page
        (no request is made), and an empty list when the request failed.
        """
        if not is_applicable(url):
            return None
        slug = extract_repo_slug(url)
        if slug is None:
            return None

        try:
            raw_issues = self._client.get_paginated(f"/repos/{slug}/issues", {"state": "open"})
        except GitHubClientError as exc:
            self.errors[url] = f"{type(exc).__name__}: {exc}"
            # Repeated failures for a shared tracker URL must each be shown
            with warnings.catch_warnings():
                warnings.simplefilter("always", FetchWarning)
                warnings.warn(
                    f"Could not fetch open issues for '{slug}': {self.errors[url]}",
                    FetchWarning,
                    stacklevel=2,
                )
            return []

        self.errors.pop(url, None)
        return [_to_issue(raw) for raw in raw_issues if "pull_request" not in raw]


def _to_issue(raw: dict) -> OpenIssue:
    labels = frozenset(
        label["name"] if isinstance(label, dict) else str(label)
        for label in raw.get("labels", [])
    )
    return OpenIssue(number=int(raw["number"]), title=raw.get("title", ""), labels=labels)
