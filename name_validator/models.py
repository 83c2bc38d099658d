from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

Status = Literal["valid", "invalid", "error"]


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Original, unnormalized input name")
    status: Status
    message: str


class BatchSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    validated: int = Field(ge=0, examples=[2])
    results: List[ValidationResult] = Field(default_factory=list)

    @property
    def validated_count(self) -> int:
        return self.validated


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    error: str
