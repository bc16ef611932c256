# Area: Round
"""
tx_battle._round.prediction_schema — Prediction payload validation
==================================================================

Turns a raw prediction payload (form fields, CLI arguments, JSON) into a
Prediction. Accepts snake_case and camelCase keys, numeric strings, and
treats blank strings as "not predicted". Unknown keys are ignored.
"""

from __future__ import annotations
from typing import Any, Mapping, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PositiveFloat,
    PositiveInt,
    ValidationError,
    field_validator,
)

from ..errors import InvalidPredictionError
from ..types import Prediction

EMPTY_PREDICTION_ERROR = "at least one of tx_count, block_size, difficulty is required"


class PredictionPayload(BaseModel):
    """Wire shape of a prediction."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    tx_count: Optional[PositiveInt] = Field(
        default=None, validation_alias=AliasChoices("tx_count", "txCount"),
    )
    block_size: Optional[PositiveInt] = Field(
        default=None, validation_alias=AliasChoices("block_size", "blockSize"),
    )
    difficulty: Optional[PositiveFloat] = Field(
        default=None, validation_alias=AliasChoices("difficulty"), allow_inf_nan=False,
    )

    @field_validator("tx_count", "block_size", "difficulty", mode="before")
    @classmethod
    def _blank_as_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


def parse_prediction(payload: Mapping[str, Any]) -> Prediction:
    """
    Validate a raw payload and build a Prediction.

    Raises:
        InvalidPredictionError: On a bad value, or when no recognized
            field is present
    """
    if not isinstance(payload, Mapping):
        raise InvalidPredictionError(None, ["prediction payload must be a mapping"])

    try:
        model = PredictionPayload.model_validate(dict(payload))
    except ValidationError as exc:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        ]
        raise InvalidPredictionError(payload, errors) from exc

    prediction = Prediction(**model.model_dump())
    if prediction.is_empty():
        raise InvalidPredictionError(payload, [EMPTY_PREDICTION_ERROR])
    return prediction
