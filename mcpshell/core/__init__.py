"""Core services: errors and logging."""
