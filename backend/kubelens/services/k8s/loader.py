"""
Kubernetes清单加载模块
将 `kubectl get ... -o yaml|json` 的输出反序列化为客户端模型，并提供 describe 渲染
"""

import inspect
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

import yaml
from kubernetes.client import ApiClient

from ...core.logging import get_logger
from ...exceptions import ManifestLoadError
from ...schemas.base import KubeResource


logger = get_logger(__name__)


class _Payload:
    """旧版 ApiClient.deserialize 需要带 data 属性的响应对象"""

    def __init__(self, text: str) -> None:
        self.data = text


def _deserialize(api_client: ApiClient, document: Dict[str, Any], type_name: str) -> Any:
    """兼容两种 deserialize 签名：新版接收 (response_text, response_type, content_type)，旧版接收响应对象"""
    # yaml.safe_load 会把未加引号的时间戳解析为 datetime
    text = json.dumps(document, default=str)
    if "content_type" in inspect.signature(api_client.deserialize).parameters:
        return api_client.deserialize(text, type_name, "application/json")
    return api_client.deserialize(_Payload(text), type_name)


def model_type_name(resource_cls: Type[KubeResource]) -> str:
    """视图类型对应的客户端模型名，如 RoleView -> V1Role"""
    return f"V1{resource_cls.kind}"


def _documents(text: str) -> List[Dict[str, Any]]:
    try:
        docs = [doc for doc in yaml.safe_load_all(text) if doc]
    except yaml.YAMLError as exc:
        raise ManifestLoadError(f"Malformed manifest: {exc}") from exc

    objects: List[Dict[str, Any]] = []
    for doc in docs:
        if not isinstance(doc, dict):
            raise ManifestLoadError(f"Expected a mapping, got {type(doc).__name__}")
        # Role/RoleList/List 均展开为单个对象
        if "items" in doc and str(doc.get("kind", "List")).endswith("List"):
            objects.extend(item for item in (doc.get("items") or []) if isinstance(item, dict))
        else:
            objects.append(doc)
    return objects


def load_manifest(text: str, resource_cls: Type[KubeResource]) -> List[Any]:
    """
    解析清单文本

    Args:
        text: YAML 或 JSON 文本，可为单个对象或列表
        resource_cls: 目标视图类型

    Returns:
        按原顺序排列的客户端模型，其他类型的对象会被跳过
    """
    type_name = model_type_name(resource_cls)
    results: List[Any] = []

    with ApiClient() as api_client:
        for document in _documents(text):
            kind = document.get("kind")
            if kind and kind != resource_cls.kind:
                logger.debug("manifest.kind_skipped", kind=kind, expected=resource_cls.kind)
                continue
            try:
                results.append(_deserialize(api_client, document, type_name))
            except ValueError as exc:
                raise ManifestLoadError(f"Invalid {resource_cls.kind} object: {exc}") from exc

    return results


def load_manifest_file(path: Union[str, Path], resource_cls: Type[KubeResource]) -> List[Any]:
    """读取清单文件并解析"""
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestLoadError(f"Unable to read manifest: {exc}", path=str(file_path)) from exc

    try:
        return load_manifest(text, resource_cls)
    except ManifestLoadError as exc:
        exc.details.setdefault("path", str(file_path))
        raise


def describe(record: KubeResource, api_client: Optional[ApiClient] = None) -> str:
    """将保留的原始对象渲染为 YAML（去掉 managedFields）"""
    api_client = api_client or ApiClient()
    data: Dict[str, Any] = api_client.sanitize_for_serialization(record.get_k8s_obj())
    md = data.get("metadata", {}) if isinstance(data, dict) else {}
    if isinstance(md, dict) and "managedFields" in md:
        md.pop("managedFields", None)
    return yaml.safe_dump(data, sort_keys=False)
