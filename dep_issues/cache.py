"""Lookup of published poms in a local Maven repository.

Usage:
    record = lookup(Coordinate("com.acme", "widget", "2.3.1"), "~/.m2/repository")
    record.urls   # -> ("https://acme.com/widget", "https://github.com/acme/widget/issues")

A coordinate that was never downloaded is not an error: its record simply
has no URLs. A pom that *is* present but cannot be parsed aborts the run.
"""

import os
from pathlib import Path

from dep_issues.models import Coordinate, IssueTrackerUrls
from dep_issues.pom import PomParseError, read_pom

POM_SUFFIX = ".pom"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class CacheLookupError(PomParseError):
    """Raised when a pom found in the local repository is corrupt."""

    def __init__(self, coordinate: Coordinate, cause: PomParseError) -> None:
        super().__init__(cause.path, cause.reason)
        self.coordinate = coordinate


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def coordinate_dir(coord: Coordinate, cache_root) -> Path:
    """``<root>/com/acme/widget/2.3.1`` for ``com.acme:widget:2.3.1``."""
    return Path(cache_root).joinpath(*coord.group_id.split("."), coord.artifact_id, coord.version)


def find_descriptor(directory: Path) -> Path | None:
    """Return the first ``*.pom`` file under *directory*, or None.

    Unreadable sub-directories are skipped.
    """
    for dirpath, dirnames, filenames in os.walk(directory):
        dirnames.sort()
        for name in sorted(filenames):
            if name.endswith(POM_SUFFIX):
                return Path(dirpath) / name
    return None


def lookup(coord: Coordinate, cache_root) -> IssueTrackerUrls:
    """Return the homepage and issue-management URLs declared for *coord*.

    Raises:
        CacheLookupError: a pom exists for *coord* but is malformed.
    """
    directory = coordinate_dir(coord, cache_root)
    if not directory.is_dir() or not os.access(directory, os.R_OK | os.X_OK):
        return IssueTrackerUrls(coord)

    descriptor = find_descriptor(directory)
    if descriptor is None:
        return IssueTrackerUrls(coord)

    try:
        model = read_pom(descriptor)
    except PomParseError as exc:
        raise CacheLookupError(coord, exc) from exc

    urls = tuple(u for u in (model.url, model.issue_management_url) if u)
    return IssueTrackerUrls(coord, urls)
