"""Maven descriptor reader.

Usage:
    model = read_pom("module/pom.xml")          # raises PomParseError on bad XML
    model.properties    -> {"lib.version": "2.3.1"}
    model.dependencies  -> [RawDependency(...), ...]
    model.url, model.issue_management_url

Only the handful of elements the pipeline needs are read. Both namespaced
(``xmlns="http://maven.apache.org/POM/4.0.0"``) and bare poms are accepted.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path

from dep_issues.models import RawDependency


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class PomParseError(Exception):
    """Raised when a descriptor is not well-formed XML or not a Maven pom."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to parse '{path}': {reason}")
        self.path = path
        self.reason = reason


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------

@dataclass
class PomModel:
    path: Path
    properties: dict[str, str] = field(default_factory=dict)
    dependencies: list[RawDependency] = field(default_factory=list)
    url: str | None = None
    issue_management_url: str | None = None


# ---------------------------------------------------------------------------
# Reader
# ---------------------------------------------------------------------------

def read_pom(path) -> PomModel:
    """Parse the pom at *path*.

    Raises:
        PomParseError: malformed XML, or a root element other than <project>.
        OSError:       the file cannot be opened.
    """
    path = Path(path)
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise PomParseError(path, str(exc)) from exc

    if _local(root.tag) != "project":
        raise PomParseError(path, f"root element is <{_local(root.tag)}>, expected <project>")

    issue_management = _child(root, "issueManagement")
    return PomModel(
        path=path,
        properties=_properties(root),
        dependencies=_dependencies(root),
        url=_text(root, "url"),
        issue_management_url=_text(issue_management, "url") if issue_management is not None else None,
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _local(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on tag names."""
    return tag.rsplit("}", 1)[-1]


def _child(parent: ET.Element, name: str) -> ET.Element | None:
    for element in parent:
        if isinstance(element.tag, str) and _local(element.tag) == name:
            return element
    return None


def _text(parent: ET.Element, name: str) -> str | None:
    element = _child(parent, name)
    if element is None or element.text is None:
        return None
    return element.text.strip() or None


def _properties(root: ET.Element) -> dict[str, str]:
    block = _child(root, "properties")
    if block is None:
        return {}
    return {
        _local(prop.tag): (prop.text or "").strip()
        for prop in block
        if isinstance(prop.tag, str)  # skip comments
    }


def _dependencies(root: ET.Element) -> list[RawDependency]:
    block = _child(root, "dependencies")
    if block is None:
        return []
    return [
        RawDependency(
            group_id=_text(dep, "groupId"),
            artifact_id=_text(dep, "artifactId"),
            raw_version=_text(dep, "version"),
        )
        for dep in block
        if isinstance(dep.tag, str) and _local(dep.tag) == "dependency"
    ]
