"""Small side-effect free helpers shared by the base layer."""

from .parsing import parse_json

__all__ = ["parse_json"]
