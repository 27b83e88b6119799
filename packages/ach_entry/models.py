"""JSON payload model for Entry Detail records.

``EntryDetailPayload`` is the typed, validated shape used when records travel
as JSON rather than as 94-character lines. Keys are camelCase to match the
field names used in error reports (``"traceNumber"``, ``"dfiAccountNumber"``,
...); Python code may populate the model by attribute name as well.

Unlike rendering, which silently truncates long alphanumeric values, the
payload rejects values that would not fit their column.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .fields import RECORD_LENGTH


class EntryDetailPayload(BaseModel):
    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = ""
    transaction_code: int = Field(ge=0, le=99)
    rdfi_identification: str = Field(max_length=8)
    check_digit: str = Field(max_length=1)
    dfi_account_number: str = Field(max_length=17)
    amount: int = Field(ge=0, le=9_999_999_999)
    identification_number: str = Field(default="", max_length=15)
    individual_name: str = Field(max_length=22)
    discretionary_data: str = Field(default="", max_length=2)
    addenda_record_indicator: int = Field(default=0, ge=0, le=1)
    trace_number: int = Field(ge=0, le=999_999_999_999_999)
    addenda: list[str] = Field(default_factory=list)
    category: Literal["Forward", "Return", "NOC"] = "Forward"

    @field_validator("addenda")
    @classmethod
    def _addenda_lines_fixed_width(cls, v: list[str]) -> list[str]:
        for line in v:
            if len(line) != RECORD_LENGTH:
                raise ValueError(f"addenda lines must be {RECORD_LENGTH} characters")
        return v

    @model_validator(mode="after")
    def _indicator_matches_addenda(self) -> EntryDetailPayload:
        if self.addenda and self.addenda_record_indicator != 1:
            raise ValueError("addendaRecordIndicator must be 1 when addenda are present")
        return self


__all__ = ["EntryDetailPayload"]
