"""
Hierarchy ordering of detector objects.

Lower rank takes precedence where shapes overlap. Within one rank the
input order decides.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple, TypeVar

T = TypeVar("T")


def hierarchy_groups(objects: Iterable[T]) -> List[Tuple[int, List[T]]]:
    """Group objects by ``hierarchy`` rank, ascending, keeping input order per group."""
    groups: Dict[int, List[T]] = {}
    for obj in objects:
        groups.setdefault(obj.hierarchy, []).append(obj)
    return [(rank, groups[rank]) for rank in sorted(groups)]


def sort_by_hierarchy(objects: Iterable[T]) -> List[T]:
    """Return a new list ordered by ascending rank.

    Ties keep their relative input order, so the result depends only on the
    ranks and positions.

    Example
    -------
    Ranks ``[2, 1, 2, 1]`` come back as input indices ``1, 3, 0, 2``.
    """
    return [obj for _, group in hierarchy_groups(objects) for obj in group]
