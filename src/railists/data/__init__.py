"""Frame schemas and report column definitions."""
