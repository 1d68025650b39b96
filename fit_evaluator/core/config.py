import logging
import sys
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Candidate Fit Evaluator"
    LLM_BASE_URL: str = "http://localhost:11434"
    LL_MODEL: str = "llama3.1:8b-instruct-q4_K_M"
    LLM_TEMPERATURE: float = 0.0
    LLM_TIMEOUT_SECONDS: float = Field(default=120.0, gt=0)
    LLM_RETRY_BUDGET: int = Field(default=1, ge=0)
    LLM_STRIP_CODE_FENCES: bool = True
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once. Calling it again only adjusts the level.
    """
    root = logging.getLogger()
    root.setLevel(level)
    if any(getattr(h, "_fit_evaluator", False) for h in root.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("[%(asctime)s - %(name)s - %(levelname)s] %(message)s")
    )
    handler._fit_evaluator = True
    root.addHandler(handler)
