"""Application configuration and logging."""
