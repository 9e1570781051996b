from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelTokenLimit(BaseModel):
    """Static context limits of a model"""
    model_config = ConfigDict(frozen=True)

    context_window: int = Field(gt=0)
    max_output: Optional[int] = None
    description: Optional[str] = None
