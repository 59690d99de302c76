"""Request models and handlers backing the FastAPI routes."""
