"""kubeconf - manage contexts in kubeconfig files."""

__version__ = "0.1.0"
