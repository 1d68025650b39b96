from abc import ABC, abstractmethod
from typing import Optional


class Provider(ABC):
    """
    Transport to a text-generation engine.

    Implementations return the generated text of a single non-streaming
    request and raise ProviderError / EmptyResponse on failure.
    """

    @abstractmethod
    async def __call__(self, prompt: str, format: Optional[str] = None) -> str:
        ...

    async def healthcheck(self) -> None:
        """Raise ProviderError if the provider cannot serve requests."""
        return None
