"""Placeholder resolution for dependency versions.

Usage:
    table = load_property_table("parent/pom.xml")
    resolve("${lib.version}", table)        # -> "2.3.1"
    resolve("${missing}-SNAPSHOT", table)   # -> "${missing}-SNAPSHOT"
"""

import re
from collections.abc import Mapping
from types import MappingProxyType

from dep_issues.pom import read_pom

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")


def resolve(raw: str, table: Mapping[str, str]) -> str:
    """Substitute every ``${name}`` token of *raw* found in *table*.

    Unknown names are left as-is, so the result may still contain tokens.
    Values are not re-scanned for placeholders.
    """
    def _replace(match: re.Match) -> str:
        return table.get(match.group(1), match.group(0))

    return _PLACEHOLDER_RE.sub(_replace, raw)


def load_property_table(parent_pom) -> Mapping[str, str]:
    """Return the <properties> of *parent_pom* as a read-only mapping.

    Raises:
        PomParseError: if the parent descriptor is malformed.
    """
    return MappingProxyType(dict(read_pom(parent_pom).properties))
