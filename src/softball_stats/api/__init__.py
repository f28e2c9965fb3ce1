"""HTTP API for Softball Stats (FastAPI)."""
