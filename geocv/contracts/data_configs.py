from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator


class DataModel(BaseModel):
    """Where the samples live and which columns the model sees."""

    path: Optional[str] = None
    target: str
    predictors: List[str] = Field(default_factory=list)

    # Optional parsing hints for tabular formats (csv/tsv/txt, xlsx).
    delimiter: Optional[str] = None
    encoding: Optional[str] = None
    sheet_name: Optional[Union[str, int]] = None

    @field_validator("predictors", mode="before")
    @classmethod
    def _split_predictor_string(cls, v):
        """Accept a comma-separated string as well as a list."""
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return [t.strip() for t in v.split(",") if t.strip()]
        return v
