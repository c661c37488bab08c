"""End-to-end driver: poms -> coordinates -> local repository -> report entries.

Fatal conditions (a malformed pom in the project or in the local repository)
propagate out of ``run``; everything else is handled inside the stages.
"""

from collections.abc import Callable

from dep_issues.cache import lookup
from dep_issues.collector import collect, valid_coordinates
from dep_issues.properties import load_property_table
from dep_issues.report import build_report
from dep_issues.scanner import scan
from dep_issues.tracker import IssueTracker


def run(
    parent_pom,
    project_root,
    cache_root,
    tracker: IssueTracker | None,
    on_progress: Callable[[str], None] | None = None,
) -> list[dict]:
    """Return the report entries for every dependency with a tracker URL."""
    progress = on_progress or (lambda msg: None)

    table = load_property_table(parent_pom)
    progress(f"Loaded {len(table)} properties from '{parent_pom}'")

    raw_deps = scan(project_root)
    progress(f"Found {len(raw_deps)} declared dependencies under '{project_root}'")

    coords = valid_coordinates(collect(raw_deps, table))
    progress(f"{len(coords)} unique resolved coordinates")

    records = [lookup(coord, cache_root) for coord in coords]
    progress(f"{sum(1 for r in records if r.urls)} coordinates declare URLs in '{cache_root}'")

    return build_report(records, tracker)
