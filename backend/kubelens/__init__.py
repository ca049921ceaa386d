"""kubelens: display-ready viewmodels for Kubernetes RBAC resources."""

__version__ = "0.1.0"
