"""Conversion contract shared by every resource viewmodel."""

from __future__ import annotations

import copy
from abc import abstractmethod
from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from kubelens.services.k8s.utils import safe_get, to_age, utc_now


class KubeResource(BaseModel):
    """Display-ready snapshot of one Kubernetes object.

    Subclasses implement :meth:`from_api` for a single resource kind. The
    original object is deep-copied into ``k8s_obj`` so describe-style
    follow-ups do not need another fetch. ``k8s_obj`` takes part in equality
    but is left out of dumps and repr.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # --- API metadata ---
    kind: ClassVar[str] = ""
    plural: ClassVar[str] = ""
    namespaced: ClassVar[bool] = False
    headers: ClassVar[tuple[str, ...]] = ()

    k8s_obj: Any = Field(default=None, exclude=True, repr=False)

    @classmethod
    @abstractmethod
    def from_api(cls, obj: Any, now: datetime | None = None) -> KubeResource:
        """Build the viewmodel from one raw API object."""

    @classmethod
    def from_raw(cls, obj: Any, now: datetime | None = None) -> KubeResource:
        return cls.from_api(obj, now=now)

    def get_k8s_obj(self) -> Any:
        return self.k8s_obj

    @property
    def retained_object(self) -> Any:
        return self.k8s_obj

    def row(self) -> list[str]:
        """Cells in ``headers`` order."""
        return [str(getattr(self, header.lower())) for header in self.headers]


def owned_copy(obj: Any) -> Any:
    return copy.deepcopy(obj)


def meta_name(obj: Any) -> str:
    return safe_get(obj, "metadata", "name", default="")


def meta_namespace(obj: Any) -> str:
    return safe_get(obj, "metadata", "namespace", default="")


def meta_age(obj: Any, now: datetime | None) -> str:
    return to_age(safe_get(obj, "metadata", "creation_timestamp"), now or utc_now())
