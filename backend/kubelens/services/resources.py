from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any, TypeVar

from kubelens.exceptions import UnknownResourceKindError
from kubelens.schemas.base import KubeResource
from kubelens.schemas.rbac import RBAC_VIEWS
from kubelens.services.k8s.utils import utc_now

ResourceT = TypeVar("ResourceT", bound=KubeResource)


def _build_registry(views: Iterable[type[KubeResource]]) -> dict[str, type[KubeResource]]:
    registry: dict[str, type[KubeResource]] = {}
    for view in views:
        for key in (view.kind.lower(), view.plural):
            registry[key] = view
    return registry


RESOURCE_KINDS: dict[str, type[KubeResource]] = _build_registry(RBAC_VIEWS)


def get_resource_class(name: str) -> type[KubeResource]:
    """Resolve a kind, singular or plural name (case-insensitive) to its viewmodel."""
    view = RESOURCE_KINDS.get(name.strip().lower())
    if view is None:
        raise UnknownResourceKindError(name, known=sorted({v.plural for v in RESOURCE_KINDS.values()}))
    return view


def convert_all(
    resource_cls: type[ResourceT],
    items: Iterable[Any],
    now: datetime | None = None,
) -> list[ResourceT]:
    """Convert raw objects in order; every record shares one reference instant."""
    reference = now or utc_now()
    return [resource_cls.from_api(item, now=reference) for item in items]
