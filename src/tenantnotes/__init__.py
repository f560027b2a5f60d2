"""Multi-tenant notes API with per-plan note quotas."""

__version__ = "0.1.0"
