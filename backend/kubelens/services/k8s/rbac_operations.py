"""
Kubernetes RBAC操作模块
提供Role、RoleBinding、ClusterRole、ClusterRoleBinding的列表功能
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Type

from kubernetes import client
from kubernetes.client.rest import ApiException

from ...core.logging import get_logger
from ...exceptions import ClusterAccessError
from ...schemas.base import KubeResource
from ...schemas.rbac import ClusterRoleBindingView, ClusterRoleView, RoleBindingView, RoleView
from ..resources import convert_all


logger = get_logger(__name__)


def _list_items(kind: str, fetch: Callable[[], Any]) -> List[Any]:
    try:
        return list(fetch().items or [])
    except ApiException as e:
        logger.warning("kubernetes.list_failed", kind=kind, status=e.status, reason=e.reason)
        raise ClusterAccessError(f"Failed to list {kind}: {e.reason}", status=e.status, reason=e.reason) from e


# ========== Role 操作 ==========

def list_roles(api_client: client.ApiClient, namespace: Optional[str] = None, now: Optional[datetime] = None) -> List[RoleView]:
    """获取Roles列表，未指定命名空间时返回所有"""
    rbac_v1 = client.RbacAuthorizationV1Api(api_client)

    if namespace:
        items = _list_items("roles", lambda: rbac_v1.list_namespaced_role(namespace))
    else:
        items = _list_items("roles", rbac_v1.list_role_for_all_namespaces)

    return convert_all(RoleView, items, now=now)


# ========== RoleBinding 操作 ==========

def list_role_bindings(
    api_client: client.ApiClient, namespace: Optional[str] = None, now: Optional[datetime] = None
) -> List[RoleBindingView]:
    """获取RoleBindings列表，未指定命名空间时返回所有"""
    rbac_v1 = client.RbacAuthorizationV1Api(api_client)

    if namespace:
        items = _list_items("rolebindings", lambda: rbac_v1.list_namespaced_role_binding(namespace))
    else:
        items = _list_items("rolebindings", rbac_v1.list_role_binding_for_all_namespaces)

    return convert_all(RoleBindingView, items, now=now)


# ========== ClusterRole 和 ClusterRoleBinding 操作 ==========

def list_cluster_roles(api_client: client.ApiClient, now: Optional[datetime] = None) -> List[ClusterRoleView]:
    """获取ClusterRoles列表"""
    rbac_v1 = client.RbacAuthorizationV1Api(api_client)
    items = _list_items("clusterroles", rbac_v1.list_cluster_role)
    return convert_all(ClusterRoleView, items, now=now)


def list_cluster_role_bindings(api_client: client.ApiClient, now: Optional[datetime] = None) -> List[ClusterRoleBindingView]:
    """获取ClusterRoleBindings列表"""
    rbac_v1 = client.RbacAuthorizationV1Api(api_client)
    items = _list_items("clusterrolebindings", rbac_v1.list_cluster_role_binding)
    return convert_all(ClusterRoleBindingView, items, now=now)


_LIST_OPERATIONS: Dict[Type[KubeResource], Callable[..., List[Any]]] = {
    RoleView: list_roles,
    RoleBindingView: list_role_bindings,
    ClusterRoleView: list_cluster_roles,
    ClusterRoleBindingView: list_cluster_role_bindings,
}


def list_resources(
    api_client: client.ApiClient,
    resource_cls: Type[KubeResource],
    namespace: Optional[str] = None,
    now: Optional[datetime] = None,
) -> List[KubeResource]:
    """按视图类型分发；集群级资源（namespaced 为 False）忽略命名空间"""
    operation = _LIST_OPERATIONS.get(resource_cls)
    if operation is None:
        raise TypeError(f"No list operation for {resource_cls.__name__}")

    if resource_cls.namespaced:
        return operation(api_client, namespace=namespace, now=now)
    return operation(api_client, now=now)
