import logging
from typing import Any, Dict, List, Optional

import httpx
import ollama
from ollama._types import ResponseError as OllamaResponseError

from ..exceptions import EmptyResponse, TransportFailure, TransportTimeout
from .base import Provider

logger = logging.getLogger(__name__)


class OllamaProvider(Provider):
    """
    Ollama text-generation provider.

    Issues one ``generate`` request per call with streaming disabled, so the
    whole answer arrives in a single envelope. Errors are mapped onto the
    transport taxonomy:

    - non-2xx from the server: terminal TransportFailure with the status code
    - connection refused: terminal TransportFailure
    - timeouts: TransportTimeout
    - resets while reading/writing: transient TransportFailure
    - malformed HTTP framing or body: terminal TransportFailure
    """

    def __init__(
        self,
        model_name: str,
        api_base_url: Optional[str] = None,
        opts: Optional[Dict[str, Any]] = None,
    ):
        self.opts = opts or {}
        self.model = model_name
        self._client = ollama.AsyncClient(host=api_base_url) if api_base_url else ollama.AsyncClient()

    async def __call__(self, prompt: str, format: Optional[str] = None) -> str:
        try:
            response = await self._client.generate(
                model=self.model,
                prompt=prompt,
                format=format,
                stream=False,
                options=self.opts,
            )
        except OllamaResponseError as e:
            logger.error(f"Ollama generation error: status={e.status_code}, message={e.error}")
            raise TransportFailure(e.error, status_code=e.status_code) from e
        except (ConnectionError, httpx.ConnectError) as e:
            logger.error(f"Ollama connection error: {e}")
            raise TransportFailure(str(e)) from e
        except httpx.TimeoutException as e:
            logger.warning(f"Ollama request timed out: {e!r}")
            raise TransportTimeout() from e
        except httpx.NetworkError as e:
            logger.warning(f"Ollama network error: {e!r}")
            raise TransportFailure(repr(e), transient=True) from e
        except httpx.TransportError as e:
            logger.error(f"Ollama transport error: {e!r}")
            raise TransportFailure(repr(e)) from e
        except ValueError as e:
            logger.error(f"Ollama returned an undecodable envelope: {e}")
            raise TransportFailure(f"Undecodable response envelope: {e}") from e

        text = response.get("response")
        if not isinstance(text, str) or not text.strip():
            raise EmptyResponse("Ollama response envelope has no 'response' text")
        return text.strip()

    async def _get_installed_models(self) -> List[str]:
        listing = await self._client.list()
        return [m.model for m in listing.models]

    async def healthcheck(self) -> None:
        """
        Verify the configured model is installed on the Ollama host.

        Raises:
            TransportFailure: If Ollama cannot be reached or the model is missing
        """
        try:
            installed = await self._get_installed_models()
        except OllamaResponseError as e:
            raise TransportFailure(e.error, status_code=e.status_code) from e
        except (ConnectionError, httpx.TransportError, ValueError) as e:
            raise TransportFailure(f"Failed to list Ollama models: {e}") from e

        # "llama3.1" should match "llama3.1:latest"
        if self.model in installed or any(m.startswith(self.model) for m in installed):
            logger.debug(f"Ollama model '{self.model}' is installed")
            return
        raise TransportFailure(
            f"Ollama model '{self.model}' not found. "
            f"Available models: {installed}. "
            f"Please run 'ollama pull {self.model}'."
        )
