from kubelens.schemas.base import KubeResource
from kubelens.schemas.rbac import (
    RBAC_VIEWS,
    ClusterRoleBindingView,
    ClusterRoleView,
    RoleBindingView,
    RoleView,
)

__all__ = [
    "KubeResource",
    "RBAC_VIEWS",
    "RoleView",
    "ClusterRoleView",
    "RoleBindingView",
    "ClusterRoleBindingView",
]
