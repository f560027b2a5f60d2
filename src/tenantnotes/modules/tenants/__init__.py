"""Tenants module - tenant registry and plan quota."""

from tenantnotes.modules.tenants.routes import router


# Module metadata
__module_info__ = {
    "name": "tenants",
    "version": "1.0.0",
    "description": "Tenant registry, plans and note quota",
    "dependencies": [],
}

__all__ = ["router"]
