"""Notes module - tenant-scoped notes."""

from tenantnotes.modules.notes.routes import router


# Module metadata
__module_info__ = {
    "name": "notes",
    "version": "1.0.0",
    "description": "Tenant-scoped notes with plan quota",
    "dependencies": ["tenants"],
}

__all__ = ["router"]
