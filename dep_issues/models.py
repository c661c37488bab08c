"""Data models shared across the pipeline.

Contains frozen dataclasses:
    - Coordinate        (group, artifact, resolved version)
    - RawDependency     (dependency as written in a pom.xml)
    - IssueTrackerUrls  (URLs found for a coordinate in the local repository)
    - OpenIssue         (an open issue fetched from GitHub)
"""

from dataclasses import dataclass, field

PLACEHOLDER_START = "${"


@dataclass(frozen=True)
class Coordinate:
    group_id: str
    artifact_id: str
    version: str

    def is_valid(self) -> bool:
        """True when every field is set and the version is fully resolved."""
        return bool(
            self.group_id
            and self.artifact_id
            and self.version
            and PLACEHOLDER_START not in self.version
        )

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


@dataclass(frozen=True)
class RawDependency:
    group_id: str | None
    artifact_id: str | None
    raw_version: str | None


@dataclass(frozen=True)
class IssueTrackerUrls:
    """URLs declared by a dependency's published pom.

    Ordering: project homepage first, issue-management URL second.
    """

    coordinate: Coordinate
    urls: tuple[str, ...] = ()


@dataclass(frozen=True)
class OpenIssue:
    number: int
    title: str
    labels: frozenset[str] = field(default_factory=frozenset)

    def label_names(self) -> list[str]:
        return sorted(self.labels)
