"""Users module - accounts that authenticate against a tenant."""
