from __future__ import annotations

from typing import Optional

from .errors import InvalidReleaseError
from .models.specs_config import Release


def resolve_checkout_target(
    release: Release,
    spec_name: str = "",
    index: Optional[int] = None,
) -> str:
    """Tag first, then commit. `branch` is never consulted."""
    if release.tag:
        return release.tag
    if release.commit:
        return release.commit
    where = f"release at index {index}" if index is not None else "release"
    raise InvalidReleaseError(
        f"[{spec_name}] invalid config for {where}: neither tag nor commit is set",
        data={"spec": spec_name, "release_index": index},
    )
