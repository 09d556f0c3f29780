"""
Resource maps and card costs.

A resource map is a plain dict of ResourceType -> count. Missing keys
count as zero. Card costs are resource maps without VP.
"""

from __future__ import annotations
from typing import Any, Mapping

from .errors import InvalidInputError
from .types import ResourceType


ResourceMap = dict[ResourceType, int]

# Everything except VP
GOODS = (
    ResourceType.TWIG,
    ResourceType.RESIN,
    ResourceType.PEBBLE,
    ResourceType.BERRY,
)


def empty_resources() -> ResourceMap:
    """A player's starting supply: every counter at zero."""
    return {resource_type: 0 for resource_type in ResourceType}


def sum_resources(resources: Mapping[Any, int] | None) -> int:
    if not resources:
        return 0
    return sum(resources.values())


def parse_resources(raw: Mapping[Any, Any] | None, allow_vp: bool = True) -> ResourceMap:
    """
    Turn an untrusted mapping (string keys, zero entries) into a ResourceMap.

    Raises InvalidInputError on unknown resource types or negative counts.
    """
    resources: ResourceMap = {}
    if not raw:
        return resources
    for key, count in raw.items():
        try:
            resource_type = ResourceType(key)
        except ValueError:
            raise InvalidInputError(f"Unknown resource type: {key}") from None
        if resource_type == ResourceType.VP and not allow_vp:
            raise InvalidInputError("Cannot select VP here")
        if count is None:
            continue
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise InvalidInputError(f"Invalid count for {resource_type.value}: {count}")
        if count:
            resources[resource_type] = resources.get(resource_type, 0) + count
    return resources


def resources_to_json(resources: Mapping[ResourceType, int] | None) -> dict[str, int]:
    if not resources:
        return {}
    return {ResourceType(k).value: v for k, v in resources.items()}


def resources_from_json(data: Mapping[str, int] | None) -> ResourceMap:
    if not data:
        return {}
    return {ResourceType(k): v for k, v in data.items()}


def format_resources(resources: Mapping[ResourceType, int]) -> str:
    """Human readable form used in the game log, e.g. '2 TWIG, 1 RESIN'."""
    parts = [
        f"{count} {ResourceType(resource_type).value}"
        for resource_type, count in resources.items()
        if count
    ]
    return ", ".join(parts) if parts else "nothing"
