# wirecodec/core/resource.py
from __future__ import annotations

from typing import AbstractSet, Iterable, Mapping, Tuple

from .endian import INT32_MAX, INT32_MIN
from .errors import ValueOutOfRange

ResourceId = int
ResourceSet = AbstractSet[ResourceId]

RESOURCE_INVALID: ResourceId = -1


def check_resource_id(rid: int) -> ResourceId:
    if isinstance(rid, bool) or not isinstance(rid, int):
        raise ValueOutOfRange(f"Resource id must be an int, got {rid!r}")
    if not INT32_MIN <= rid <= INT32_MAX:
        raise ValueOutOfRange(
            f"Resource id {rid} outside signed 32-bit range",
            details={"value": rid},
        )
    return rid


def ordered(rset: Iterable[ResourceId]) -> Tuple[ResourceId, ...]:
    """Unique ids in ascending order (the on-wire order used by write_rset)."""
    return tuple(sorted({check_resource_id(r) for r in rset}))


def resources_for(mapping: Mapping[ResourceId, Iterable[ResourceId]], rid: ResourceId) -> frozenset:
    """Resource set stored under `rid`, or an empty frozenset if there is none."""
    found = mapping.get(rid)
    if found is None:
        return frozenset()
    return frozenset(found)
