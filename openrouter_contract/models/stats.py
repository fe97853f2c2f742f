"""
Generation Stats - post-hoc billing and telemetry for one generation.

Fetched separately from the completion itself, keyed by the generation id
returned in ResponseSuccess.id.

Reference:
- https://openrouter.ai/docs/api-reference/get-a-generation
"""

from datetime import datetime
from typing import Literal

from pydantic import Field

from openrouter_contract.models.base import ResponseModel


class GenerationData(ResponseModel):
    """
    Usage and cost of a completed, non-streamed generation.

    ``tokens_*`` are normalized counts; ``native_tokens_*`` are counted with
    the serving model's own tokenizer and are what billing uses.
    """

    id: str
    model: str
    streamed: Literal[False]
    generation_time: float = Field(..., description="Generation time")
    created_at: datetime
    tokens_prompt: int
    tokens_completion: int
    native_tokens_prompt: int
    native_tokens_completion: int
    num_media_prompt: None
    num_media_completion: None
    origin: str
    total_cost: float = Field(..., description="Total cost in USD")
    cache_discount: None


class GenerationStats(ResponseModel):
    data: GenerationData

    @property
    def generation_id(self) -> str:
        return self.data.id
