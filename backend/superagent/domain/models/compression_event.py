from datetime import datetime, timezone
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from superagent.domain.models.compression_result import CompressionInfo


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CompressionTriggeredEvent(BaseModel):
    type: Literal["compression-triggered"] = "compression-triggered"
    timestamp: datetime = Field(default_factory=_utcnow)


class CompressionCompletedEvent(BaseModel):
    type: Literal["compression-completed"] = "compression-completed"
    timestamp: datetime = Field(default_factory=_utcnow)
    compression_info: CompressionInfo


class CompressionFailedEvent(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    type: Literal["compression-failed"] = "compression-failed"
    timestamp: datetime = Field(default_factory=_utcnow)
    error: BaseException


CompressionEvent = Annotated[
    Union[CompressionTriggeredEvent, CompressionCompletedEvent, CompressionFailedEvent],
    Field(discriminator="type"),
]
