"""
Kubernetes服务模块

按功能分为以下子模块：
- utils: 工具函数（资源年龄计算、属性读取）
- client_factory: 客户端创建
- rbac_operations: RBAC操作（Role、RoleBinding、ClusterRole、ClusterRoleBinding）
- loader: 清单文件加载与 describe 渲染

rbac_operations 与 loader 依赖视图模型，需直接从子模块导入。
"""

# ========== 工具函数 ==========
from .utils import (
    parse_timestamp,
    safe_get,
    to_age,
    utc_now,
)

# ========== 客户端创建 ==========
from .client_factory import create_k8s_client

__all__ = [
    "parse_timestamp",
    "safe_get",
    "to_age",
    "utc_now",
    "create_k8s_client",
]
