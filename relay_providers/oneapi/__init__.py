"""OneAPI (OpenAI-compatible) chat provider."""

from .client import OneAPIProvider
from .helpers import MODEL_BUDGETS, model_budget

__all__ = ["OneAPIProvider", "MODEL_BUDGETS", "model_budget"]
