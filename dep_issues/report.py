"""Report building and rendering.

Functions:
    is_tracker_url(url)                        -> bool
    is_relevant(record)                        -> bool
    build_report(records, tracker)             -> list[dict]
    render_text(entries)                       -> str
    build_document(entries)                    -> dict  (JSON export)
"""

from collections.abc import Iterable
from datetime import datetime, timezone

from dep_issues.models import IssueTrackerUrls, OpenIssue
from dep_issues.tracker import IssueTracker, is_applicable

# Substrings that make a URL look like an issue tracker (case-sensitive)
TRACKER_MARKERS = ("issue", "atlassian", "jira")


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------

def is_tracker_url(url: str) -> bool:
    return any(marker in url for marker in TRACKER_MARKERS)


def is_relevant(record: IssueTrackerUrls) -> bool:
    return any(is_tracker_url(u) for u in record.urls)


# ---------------------------------------------------------------------------
# Building
# ---------------------------------------------------------------------------

def build_report(records: Iterable[IssueTrackerUrls], tracker: IssueTracker | None) -> list[dict]:
    """One entry per relevant record, with open issues for GitHub URLs.

    Pass ``tracker=None`` to skip every network call.
    """
    entries: list[dict] = []
    for record in records:
        if not is_relevant(record):
            continue
        coord = record.coordinate
        entries.append({
            "group_id":    coord.group_id,
            "artifact_id": coord.artifact_id,
            "version":     coord.version,
            "urls":        [_build_url_entry(url, tracker) for url in record.urls],
        })
    return entries


def _build_url_entry(url: str, tracker: IssueTracker | None) -> dict:
    entry: dict = {"url": url}
    if tracker is None or not is_applicable(url):
        return entry

    issues = tracker.fetch_open_issues(url)
    if issues is None:
        return entry
    entry["issues"] = [_issue_to_dict(i) for i in issues]
    if url in tracker.errors:
        entry["error"] = tracker.errors[url]
    return entry


def _issue_to_dict(issue: OpenIssue) -> dict:
    return {"number": issue.number, "title": issue.title, "labels": issue.label_names()}


def _build_summary(entries: list[dict]) -> dict:
    open_issues = sum(
        len(u.get("issues", []))
        for e in entries
        for u in e["urls"]
    )
    return {
        "dependencies": len(entries),
        "with_github_tracker": sum(
            1 for e in entries if any("issues" in u for u in e["urls"])
        ),
        "open_issues": open_issues,
    }


def build_document(entries: list[dict], **extra) -> dict:
    """Wrap *entries* in a JSON-ready document with a summary."""
    return {
        "report_type":  "dependency_issues",
        "generated_at": datetime.now(timezone.utc).isoformat(),
        **extra,
        "summary":      _build_summary(entries),
        "dependencies": entries,
    }


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render_text(entries: list[dict]) -> str:
    lines: list[str] = []
    for entry in entries:
        lines.append(f"Project: {entry['artifact_id']}")
        for url_entry in entry["urls"]:
            lines.append(f"  - {url_entry['url']}")
            for issue in url_entry.get("issues", []):
                lines.append(f"    → #{issue['number']}: {issue['title']}")
                lines.append("      " + ", ".join(issue["labels"]))
    return "\n".join(lines)
