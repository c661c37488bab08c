"""Tests for dep_issues/report.py"""

import pytest

from dep_issues.client import GitHubClient
from dep_issues.models import Coordinate, IssueTrackerUrls
from dep_issues.report import (
    _build_summary,
    build_document,
    build_report,
    is_relevant,
    is_tracker_url,
    render_text,
)
from dep_issues.tracker import FetchWarning, IssueTracker

API = "https://api.github.com"
WIDGET = Coordinate("com.acme", "widget", "2.3.1")
GH_ISSUES = "https://github.com/acme/widget/issues"


@pytest.fixture
def tracker() -> IssueTracker:
    return IssueTracker(GitHubClient(url=API))


# ---------------------------------------------------------------------------
# Relevance filter
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("url", [
    "https://example.com/issues",
    "https://acme.atlassian.net/browse/WID",
    "https://jira.acme.com/browse/WID",
])
def test_tracker_urls(url):
    assert is_tracker_url(url)


@pytest.mark.parametrize("url", ["https://example.com/wiki", "https://example.com/ISSUES"])
def test_non_tracker_urls(url):
    assert not is_tracker_url(url)


def test_record_with_only_wiki_url_is_not_relevant():
    assert not is_relevant(IssueTrackerUrls(WIDGET, ("https://example.com/wiki",)))


def test_record_with_issue_url_is_relevant():
    assert is_relevant(IssueTrackerUrls(WIDGET, ("https://example.com/issues",)))


def test_record_without_urls_is_not_relevant():
    assert not is_relevant(IssueTrackerUrls(WIDGET))


# ---------------------------------------------------------------------------
# build_report()
# ---------------------------------------------------------------------------

def test_irrelevant_records_are_dropped(tracker):
    records = [IssueTrackerUrls(WIDGET, ("https://example.com/wiki",))]
    assert build_report(records, tracker) == []


def test_non_github_tracker_is_listed_without_fetch(tracker, requests_mock):
    records = [IssueTrackerUrls(WIDGET, ("https://acme.com", "https://example.com/issues"))]
    entries = build_report(records, tracker)
    assert entries == [{
        "group_id": "com.acme",
        "artifact_id": "widget",
        "version": "2.3.1",
        "urls": [{"url": "https://acme.com"}, {"url": "https://example.com/issues"}],
    }]
    assert requests_mock.call_count == 0


def test_github_tracker_gets_issues(tracker, requests_mock):
    requests_mock.get(f"{API}/repos/acme/widget/issues",
                      json=[{"number": 7, "title": "Leak", "labels": [{"name": "bug"}]}])
    entries = build_report([IssueTrackerUrls(WIDGET, (GH_ISSUES,))], tracker)
    assert entries[0]["urls"] == [{
        "url": GH_ISSUES,
        "issues": [{"number": 7, "title": "Leak", "labels": ["bug"]}],
    }]


def test_fetch_error_is_reported(tracker, requests_mock):
    requests_mock.get(f"{API}/repos/acme/widget/issues", status_code=500)
    with pytest.warns(FetchWarning):
        entries = build_report([IssueTrackerUrls(WIDGET, (GH_ISSUES,))], tracker)
    url_entry = entries[0]["urls"][0]
    assert url_entry["issues"] == []
    assert "500" in url_entry["error"]


def test_no_tracker_skips_fetching(requests_mock):
    entries = build_report([IssueTrackerUrls(WIDGET, (GH_ISSUES,))], None)
    assert entries[0]["urls"] == [{"url": GH_ISSUES}]
    assert requests_mock.call_count == 0


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

ENTRIES = [{
    "group_id": "com.acme",
    "artifact_id": "widget",
    "version": "2.3.1",
    "urls": [
        {"url": "https://acme.com"},
        {"url": GH_ISSUES, "issues": [{"number": 7, "title": "Leak", "labels": ["bug", "memory"]}]},
    ],
}]


def test_render_text():
    assert render_text(ENTRIES) == "\n".join([
        "Project: widget",
        "  - https://acme.com",
        f"  - {GH_ISSUES}",
        "    → #7: Leak",
        "      bug, memory",
    ])


def test_render_text_empty():
    assert render_text([]) == ""


def test_summary_counts():
    s = _build_summary(ENTRIES)
    assert s == {"dependencies": 1, "with_github_tracker": 1, "open_issues": 1}


def test_build_document():
    doc = build_document(ENTRIES, local_repo="/m2")
    assert doc["report_type"] == "dependency_issues"
    assert doc["local_repo"] == "/m2"
    assert "generated_at" in doc
    assert doc["dependencies"] == ENTRIES


def test_shared_failing_tracker_reports_every_failure(tracker, requests_mock):
    import warnings
    requests_mock.get(f"{API}/repos/acme/widget/issues", status_code=500)
    records = [
        IssueTrackerUrls(WIDGET, (GH_ISSUES,)),
        IssueTrackerUrls(Coordinate("com.acme", "widget-extras", "2.3.1"), (GH_ISSUES,)),
    ]
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("default")
        entries = build_report(records, tracker)
    assert sum(1 for w in caught if issubclass(w.category, FetchWarning)) == 2
    assert all("error" in e["urls"][0] for e in entries)
