"""Coordinate collection: resolve versions and deduplicate."""

from collections.abc import Iterable, Mapping
from functools import reduce

from dep_issues.models import Coordinate, RawDependency
from dep_issues.properties import resolve


def to_coordinate(dep: RawDependency, table: Mapping[str, str]) -> Coordinate:
    version = resolve(dep.raw_version, table) if dep.raw_version else ""
    return Coordinate(dep.group_id or "", dep.artifact_id or "", version)


def collect(deps: Iterable[RawDependency], table: Mapping[str, str]) -> frozenset[Coordinate]:
    """Resolve each dependency and fold the results into a set.

    Identical coordinates declared by several modules collapse to one.
    The result is unordered.
    """
    return reduce(
        lambda acc, dep: acc | {to_coordinate(dep, table)},
        deps,
        frozenset(),
    )


def is_valid(coord: Coordinate) -> bool:
    return coord.is_valid()


def valid_coordinates(coords: Iterable[Coordinate]) -> list[Coordinate]:
    """Drop incomplete or unresolved coordinates; sort the rest."""
    return sorted(
        (c for c in coords if is_valid(c)),
        key=lambda c: (c.group_id, c.artifact_id, c.version),
    )
