"""RBAC resource viewmodels."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from kubelens.schemas.base import KubeResource, meta_age, meta_name, meta_namespace, owned_copy
from kubelens.services.k8s.utils import safe_get


class RoleView(KubeResource):
    kind: ClassVar[str] = "Role"
    plural: ClassVar[str] = "roles"
    namespaced: ClassVar[bool] = True
    headers: ClassVar[tuple[str, ...]] = ("Namespace", "Name", "Age")

    namespace: str = ""
    name: str = ""
    age: str = ""

    @classmethod
    def from_api(cls, obj: Any, now: datetime | None = None) -> RoleView:
        """Create from a kubernetes V1Role object."""
        return cls(
            namespace=meta_namespace(obj),
            name=meta_name(obj),
            age=meta_age(obj, now),
            k8s_obj=owned_copy(obj),
        )


class ClusterRoleView(KubeResource):
    kind: ClassVar[str] = "ClusterRole"
    plural: ClassVar[str] = "clusterroles"
    headers: ClassVar[tuple[str, ...]] = ("Name", "Age")

    name: str = ""
    age: str = ""

    @classmethod
    def from_api(cls, obj: Any, now: datetime | None = None) -> ClusterRoleView:
        """Create from a kubernetes V1ClusterRole object."""
        return cls(
            name=meta_name(obj),
            age=meta_age(obj, now),
            k8s_obj=owned_copy(obj),
        )


class RoleBindingView(KubeResource):
    kind: ClassVar[str] = "RoleBinding"
    plural: ClassVar[str] = "rolebindings"
    namespaced: ClassVar[bool] = True
    headers: ClassVar[tuple[str, ...]] = ("Namespace", "Name", "Role", "Age")

    namespace: str = ""
    name: str = ""
    role: str = ""
    age: str = ""

    @classmethod
    def from_api(cls, obj: Any, now: datetime | None = None) -> RoleBindingView:
        """Create from a kubernetes V1RoleBinding object.

        A namespaced binding can only point at a Role or ClusterRole by name
        from within its own namespace, so the bare name is shown.
        """
        return cls(
            namespace=meta_namespace(obj),
            name=meta_name(obj),
            role=safe_get(obj, "role_ref", "name", default=""),
            age=meta_age(obj, now),
            k8s_obj=owned_copy(obj),
        )


class ClusterRoleBindingView(KubeResource):
    kind: ClassVar[str] = "ClusterRoleBinding"
    plural: ClassVar[str] = "clusterrolebindings"
    headers: ClassVar[tuple[str, ...]] = ("Name", "Role", "Age")

    name: str = ""
    role: str = ""
    age: str = ""

    @classmethod
    def from_api(cls, obj: Any, now: datetime | None = None) -> ClusterRoleBindingView:
        """Create from a kubernetes V1ClusterRoleBinding object.

        ``role`` is rendered as ``<kind>/<name>``, e.g. ``ClusterRole/cluster-admin``.
        """
        role_kind = safe_get(obj, "role_ref", "kind", default="")
        role_name = safe_get(obj, "role_ref", "name", default="")
        return cls(
            name=meta_name(obj),
            role=f"{role_kind}/{role_name}",
            age=meta_age(obj, now),
            k8s_obj=owned_copy(obj),
        )


RBAC_VIEWS: tuple[type[KubeResource], ...] = (
    RoleView,
    ClusterRoleView,
    RoleBindingView,
    ClusterRoleBindingView,
)
