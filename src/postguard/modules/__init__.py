"""Feature modules guarded by the permission engine."""
