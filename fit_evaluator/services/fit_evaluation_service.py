import asyncio
import logging
import uuid
from typing import Any, Dict

from pydantic import ValidationError

from ..agent.exceptions import InvalidInput, InvalidShape, ProviderError, TransportTimeout
from ..agent.providers import OllamaProvider, Provider
from ..agent.strategies import JSONWrapper
from ..core import Settings
from ..prompt import build_evaluation_request
from ..schemas.pydantic import EvaluationRequest, EvaluationResult

logger = logging.getLogger(__name__)


class FitEvaluationService:
    """
    Evaluates one resume against one job description through an LLM provider.

    The service holds only immutable configuration and its provider; every
    call to ``evaluate`` owns its whole request/response lifecycle. Failures
    are raised as EvaluationError subclasses, never turned into a default
    result.
    """

    def __init__(
        self,
        provider: Provider,
        timeout: float = 120.0,
        retry_budget: int = 1,
        strip_code_fences: bool = True,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        if retry_budget < 0:
            raise ValueError("retry_budget must be >= 0")
        self.provider = provider
        self.timeout = timeout
        self.retry_budget = retry_budget
        self.strategy = JSONWrapper(strip_fences=strip_code_fences)

    @classmethod
    def from_settings(cls, settings: Settings) -> "FitEvaluationService":
        provider = OllamaProvider(
            model_name=settings.LL_MODEL,
            api_base_url=settings.LLM_BASE_URL,
            opts={"temperature": settings.LLM_TEMPERATURE},
        )
        return cls(
            provider=provider,
            timeout=settings.LLM_TIMEOUT_SECONDS,
            retry_budget=settings.LLM_RETRY_BUDGET,
            strip_code_fences=settings.LLM_STRIP_CODE_FENCES,
        )

    async def evaluate(self, resume_text: str, job_description_text: str) -> EvaluationResult:
        """
        Evaluate how well the resume fits the job description.

        Raises:
            InvalidInput: Either document is blank. No provider call is made.
            TransportTimeout: No answer within ``timeout`` after all retries.
            TransportFailure: Connection or HTTP level failure.
            EmptyResponse: The provider returned no text.
            MalformedResponse: The text is not a JSON object.
            InvalidShape: A field of the JSON object violates its contract.
        """
        for field, value in (
            ("resume_text", resume_text),
            ("job_description_text", job_description_text),
        ):
            if not isinstance(value, str) or not value.strip():
                raise InvalidInput(field)

        evaluation_id = str(uuid.uuid4())
        request = build_evaluation_request(resume_text, job_description_text)
        raw = await self._generate(request, evaluation_id)
        data = self.strategy(raw)
        result = self._validate(data)
        logger.info(
            f"Evaluation {evaluation_id} completed: fitScore={result.fit_score}, "
            f"strengths={len(result.strengths)}, missing={len(result.missing)}"
        )
        return result

    async def _generate(self, request: EvaluationRequest, evaluation_id: str) -> str:
        """
        Call the provider under the timeout, retrying transient failures only.
        """
        attempts = self.retry_budget + 1
        attempt = 0
        while True:
            attempt += 1
            try:
                return await asyncio.wait_for(
                    self.provider(request.prompt, format=request.format),
                    timeout=self.timeout,
                )
            except asyncio.TimeoutError as e:
                error: ProviderError = TransportTimeout(self.timeout)
                error.__cause__ = e
            except ProviderError as e:
                error = e

            if not error.transient or attempt >= attempts:
                logger.error(
                    f"Evaluation {evaluation_id} failed on attempt {attempt}/{attempts}: {error}"
                )
                raise error
            logger.warning(
                f"Evaluation {evaluation_id} attempt {attempt}/{attempts} failed "
                f"with transient error, retrying: {error}"
            )

    @staticmethod
    def _validate(data: Dict[str, Any]) -> EvaluationResult:
        try:
            return EvaluationResult.model_validate(data)
        except ValidationError as e:
            # errors() follows field declaration order
            first = e.errors()[0]
            field = first["loc"][0] if first["loc"] else "__root__"
            raise InvalidShape(str(field), first["msg"]) from e
