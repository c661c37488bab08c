"""Module descriptor discovery.

Only the project root and its direct sub-directories are searched: a parent
pom plus one level of modules. Deeper modules are not visited.
"""

from pathlib import Path

from dep_issues.models import RawDependency
from dep_issues.pom import read_pom

DESCRIPTOR_NAME = "pom.xml"


def find_descriptors(project_root) -> list[Path]:
    """Return every pom.xml at depth <= 2 below *project_root*, sorted."""
    root = Path(project_root)
    if not root.is_dir():
        raise FileNotFoundError(f"Project root not found: '{project_root}'")

    candidates = [root / DESCRIPTOR_NAME]
    candidates += [child / DESCRIPTOR_NAME for child in root.iterdir() if child.is_dir()]
    return sorted(p for p in candidates if p.is_file())


def scan(project_root) -> list[RawDependency]:
    """Pool the declared dependencies of every module under *project_root*.

    Raises:
        PomParseError: on the first malformed descriptor (no partial result).
    """
    dependencies: list[RawDependency] = []
    for descriptor in find_descriptors(project_root):
        dependencies.extend(read_pom(descriptor).dependencies)
    return dependencies
