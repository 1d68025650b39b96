from typing import Annotated, List, Literal

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, computed_field

NonBlankStr = Annotated[
    str, StringConstraints(strict=True, strip_whitespace=True, min_length=1)
]

ScoreBand = Literal["strong", "moderate", "weak"]


class EvaluationRequest(BaseModel):
    """Instruction payload for one evaluation call, plus its source documents."""

    model_config = ConfigDict(frozen=True)

    resume_text: str
    job_description_text: str
    prompt: str
    format: Literal["json"] = "json"


class EvaluationResult(BaseModel):
    """Validated verdict returned by the evaluation engine.

    Field names follow the engine contract (``fitScore`` etc.) on the wire and
    Python names in code. Anything outside the four fields is rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    fit_score: int = Field(alias="fitScore", strict=True, ge=0, le=100)
    analysis: NonBlankStr
    strengths: List[NonBlankStr]
    missing: List[NonBlankStr]

    @computed_field(alias="scoreBand")
    @property
    def score_band(self) -> ScoreBand:
        if self.fit_score >= 75:
            return "strong"
        if self.fit_score >= 50:
            return "moderate"
        return "weak"


class EvaluationPayload(BaseModel):
    """HTTP request body for an evaluation."""

    resume_text: str
    job_description_text: str
