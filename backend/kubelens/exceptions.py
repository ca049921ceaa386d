from typing import Any, Dict, Optional


class KubeLensError(Exception):
    """统一异常基类，便于在服务层抛出标准化错误。"""

    def __init__(self, message: str, *, code: str = "KUBELENS_ERROR", details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class UnknownResourceKindError(KubeLensError):
    """请求了未注册的资源类型。"""

    def __init__(self, kind: str, known: Optional[list[str]] = None) -> None:
        super().__init__(
            f"Unknown resource kind: {kind}",
            code="UNKNOWN_RESOURCE_KIND",
            details={"kind": kind, "known": known or []},
        )


class ClusterAccessError(KubeLensError):
    """集群配置加载或API调用失败。"""

    def __init__(self, message: str, *, status: Optional[int] = None, reason: Optional[str] = None) -> None:
        details: Dict[str, Any] = {}
        if status is not None:
            details["status"] = status
        if reason:
            details["reason"] = reason
        super().__init__(message, code="CLUSTER_ACCESS_ERROR", details=details)


class ManifestLoadError(KubeLensError):
    """清单文件无法读取或解析。"""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message, code="MANIFEST_LOAD_ERROR", details={"path": path} if path else None)
