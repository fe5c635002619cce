"""Tree transforms applied before ``@import`` rules are collected."""

from __future__ import annotations

from typing import Iterable

from atimport.stylesheet.model import Root
from atimport.transforms.base import Transform
from atimport.transforms.comment_imports import CommentImportTransform

BUILTIN_TRANSFORMS: list[Transform] = [
    CommentImportTransform(),
]


def apply_transforms(root: Root, custom_transforms: Iterable[Transform] | None = None) -> Root:
    """Run the built-in transforms, then *custom_transforms*, over *root*."""
    for transform in [*BUILTIN_TRANSFORMS, *(custom_transforms or ())]:
        root = transform.apply(root)
    return root
