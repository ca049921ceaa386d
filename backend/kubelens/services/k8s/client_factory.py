"""
Kubernetes客户端创建模块
根据配置加载 in-cluster 或 kubeconfig 并返回 ApiClient
"""

from typing import Optional

from kubernetes import client, config
from kubernetes.config.config_exception import ConfigException

from ...config import Settings, get_settings
from ...core.logging import get_logger
from ...exceptions import ClusterAccessError


logger = get_logger(__name__)


def create_k8s_client(settings: Optional[Settings] = None) -> client.ApiClient:
    """
    创建Kubernetes客户端

    Args:
        settings: 应用配置，默认读取环境变量

    Returns:
        已加载集群配置的 ApiClient

    Raises:
        ClusterAccessError: 无法加载集群配置
    """
    settings = settings or get_settings()
    configuration = client.Configuration()

    try:
        if settings.service_account_token_path:
            config.load_incluster_config(client_configuration=configuration)
            display_name = "in-cluster"
        else:
            config.load_kube_config(
                config_file=settings.kube_config_path,
                context=settings.kube_context,
                client_configuration=configuration,
            )
            display_name = settings.kube_context or "current-context"
    except ConfigException as exc:
        logger.warning("kubernetes.config_missing", error=str(exc))
        raise ClusterAccessError(f"Unable to load cluster configuration: {exc}") from exc

    logger.debug("kubernetes.client_created", cluster=display_name, host=configuration.host)
    return client.ApiClient(configuration)
