"""HTTP service exposing the OneAPI adapter (FastAPI)."""
