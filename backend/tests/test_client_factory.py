from unittest import mock

import pytest
from kubernetes import client
from kubernetes.config.config_exception import ConfigException

from kubelens.config import Settings
from kubelens.exceptions import ClusterAccessError
from kubelens.services.k8s import client_factory


def test_kubeconfig_is_loaded_with_context():
    settings = Settings(kube_context="staging", kube_config_path="/tmp/kubeconfig")

    with mock.patch.object(client_factory.config, "load_kube_config") as load_kube_config:
        api_client = client_factory.create_k8s_client(settings)

    kwargs = load_kube_config.call_args.kwargs
    assert kwargs["config_file"] == "/tmp/kubeconfig"
    assert kwargs["context"] == "staging"
    assert api_client.configuration is kwargs["client_configuration"]
    assert isinstance(api_client, client.ApiClient)


def test_in_cluster_when_token_path_configured():
    settings = Settings(service_account_token_path="/var/run/secrets/kubernetes.io/serviceaccount/token")

    with mock.patch.object(client_factory.config, "load_incluster_config") as load_incluster, mock.patch.object(
        client_factory.config, "load_kube_config"
    ) as load_kube_config:
        client_factory.create_k8s_client(settings)

    load_incluster.assert_called_once()
    load_kube_config.assert_not_called()


def test_config_errors_raise_cluster_access_error():
    with mock.patch.object(client_factory.config, "load_kube_config", side_effect=ConfigException("no config")):
        with pytest.raises(ClusterAccessError) as excinfo:
            client_factory.create_k8s_client(Settings())

    assert "no config" in excinfo.value.message
    assert excinfo.value.code == "CLUSTER_ACCESS_ERROR"
