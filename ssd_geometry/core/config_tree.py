"""
Helpers for reading required fields out of a parsed configuration tree.
"""

from __future__ import annotations

from typing import Any, Mapping

from .errors import MissingConfigFieldError


def require(tree: Mapping[str, Any], key: str, path: str = "") -> Any:
    """Return ``tree[key]`` or fail with the dotted path of the missing field."""
    full_path = f"{path}.{key}" if path else key
    if not isinstance(tree, Mapping) or key not in tree:
        raise MissingConfigFieldError(full_path)
    return tree[key]
