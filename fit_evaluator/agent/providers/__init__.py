from .base import Provider
from .ollama import OllamaProvider

__all__ = ["Provider", "OllamaProvider"]
