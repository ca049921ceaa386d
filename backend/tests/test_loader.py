import json
from pathlib import Path
from unittest import mock

import pytest
import yaml
from kubernetes import client
from kubernetes.client import ApiClient

from kubelens.exceptions import ManifestLoadError
from kubelens.schemas.rbac import ClusterRoleBindingView, RoleBindingView, RoleView
from kubelens.services.k8s.loader import describe, load_manifest, load_manifest_file, model_type_name

FIXTURES = Path(__file__).parent / "fixtures"


def test_model_type_name():
    assert model_type_name(RoleView) == "V1Role"
    assert model_type_name(ClusterRoleBindingView) == "V1ClusterRoleBinding"


def test_load_fixture_returns_typed_models():
    items = load_manifest_file(FIXTURES / "clusterrole_binding.yaml", ClusterRoleBindingView)

    assert len(items) == 2
    assert all(isinstance(item, client.V1ClusterRoleBinding) for item in items)
    assert items[0].role_ref.kind == "ClusterRole"
    assert items[0].metadata.creation_timestamp.year == 2022


def test_load_single_object():
    text = """
apiVersion: rbac.authorization.k8s.io/v1
kind: Role
metadata:
  name: reader
  namespace: apps
  creationTimestamp: 2022-06-27T16:33:06Z
rules: []
"""
    items = load_manifest(text, RoleView)

    assert len(items) == 1
    assert items[0].metadata.name == "reader"
    assert items[0].metadata.creation_timestamp.hour == 16


def test_load_json_list():
    text = json.dumps(
        {
            "apiVersion": "rbac.authorization.k8s.io/v1",
            "kind": "RoleList",
            "items": [
                {"metadata": {"name": "a", "namespace": "ns"}},
                {"metadata": {"name": "b", "namespace": "ns"}},
            ],
        }
    )

    assert [item.metadata.name for item in load_manifest(text, RoleView)] == ["a", "b"]


def test_load_skips_other_kinds():
    text = """
apiVersion: v1
kind: List
items:
- kind: Role
  metadata: {name: r}
- kind: RoleBinding
  metadata: {name: rb}
  roleRef: {apiGroup: rbac.authorization.k8s.io, kind: Role, name: r}
"""
    items = load_manifest(text, RoleBindingView)

    assert [item.metadata.name for item in items] == ["rb"]


def test_load_multiple_documents():
    text = "kind: Role\nmetadata: {name: a}\n---\nkind: Role\nmetadata: {name: b}\n"

    assert [item.metadata.name for item in load_manifest(text, RoleView)] == ["a", "b"]


def test_malformed_yaml_raises():
    with pytest.raises(ManifestLoadError):
        load_manifest("kind: [unclosed", RoleView)


def test_non_mapping_document_raises():
    with pytest.raises(ManifestLoadError):
        load_manifest("- just\n- a list\n", RoleView)


def test_binding_without_role_ref_raises():
    with pytest.raises(ManifestLoadError):
        load_manifest("kind: RoleBinding\nmetadata: {name: rb}\n", RoleBindingView)


def test_deserialize_with_content_type_signature():
    calls = []

    def deserialize(self, response_text, response_type, content_type):
        calls.append((json.loads(response_text), response_type, content_type))
        return "role"

    with mock.patch.object(ApiClient, "deserialize", deserialize):
        items = load_manifest("kind: Role\nmetadata: {name: a, namespace: ns}\n", RoleView)

    assert items == ["role"]
    assert calls == [({"kind": "Role", "metadata": {"name": "a", "namespace": "ns"}}, "V1Role", "application/json")]


def test_deserialize_with_response_object_signature():
    calls = []

    def deserialize(self, response, response_type):
        calls.append((json.loads(response.data), response_type))
        return "role"

    with mock.patch.object(ApiClient, "deserialize", deserialize):
        items = load_manifest("kind: Role\nmetadata: {name: a}\n", RoleView)

    assert items == ["role"]
    assert calls == [({"kind": "Role", "metadata": {"name": "a"}}, "V1Role")]


def test_installed_client_deserializes_valid_role():
    items = load_manifest("kind: Role\nmetadata: {name: a, namespace: ns}\n", RoleView)

    assert isinstance(items[0], client.V1Role)
    assert (items[0].metadata.namespace, items[0].metadata.name) == ("ns", "a")


def test_unexpected_deserialize_signature_is_not_reported_as_bad_data():
    def deserialize(self, response_text):
        return "role"

    with mock.patch.object(ApiClient, "deserialize", deserialize):
        with pytest.raises(TypeError):
            load_manifest("kind: Role\nmetadata: {name: a}\n", RoleView)


def test_missing_file_raises(tmp_path):
    with pytest.raises(ManifestLoadError) as excinfo:
        load_manifest_file(tmp_path / "absent.yaml", RoleView)

    assert excinfo.value.details["path"].endswith("absent.yaml")


def test_describe_renders_retained_object(now):
    raw = client.V1Role(
        api_version="rbac.authorization.k8s.io/v1",
        kind="Role",
        metadata=client.V1ObjectMeta(
            name="reader",
            namespace="apps",
            managed_fields=[client.V1ManagedFieldsEntry(manager="kubectl", operation="Update")],
        ),
        rules=[client.V1PolicyRule(api_groups=[""], resources=["pods"], verbs=["get", "list"])],
    )

    data = yaml.safe_load(describe(RoleView.from_api(raw, now=now)))

    assert data["kind"] == "Role"
    assert data["metadata"] == {"name": "reader", "namespace": "apps"}
    assert data["rules"][0]["verbs"] == ["get", "list"]
