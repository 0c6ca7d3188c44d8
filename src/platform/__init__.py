"""FastAPI wiring for the statistics service."""
