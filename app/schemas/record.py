import uuid
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.services.fields import to_amount, to_text

Amount = Annotated[float, BeforeValidator(to_amount)]
Text = Annotated[str, BeforeValidator(to_text)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordPayload(CamelModel):
    """Partial record sent by clients. `remaining` and bookkeeping keys are ignored."""

    number: Text = ""
    full_name: Text = ""
    birth_info: Text = ""
    specialization: Text = ""
    cycle: Text = ""
    group: Text = ""
    intermediary: Text = ""
    diploma: Text = ""
    note: Text = ""
    file_amount: Amount = 0
    payment1: Amount = 0
    payment_date1: Text = ""
    payment2: Amount = 0
    payment_date2: Text = ""
    row_color: Text = ""


class RecordResponse(CamelModel):
    id: uuid.UUID
    number: str
    full_name: str
    birth_info: str
    specialization: str
    cycle: str
    group: str
    intermediary: str
    diploma: str
    note: str
    file_amount: float
    payment1: float
    payment_date1: str
    payment2: float
    payment_date2: str
    remaining: float
    row_color: str
    column_colors: dict[str, str]
    created_at: datetime
    updated_at: datetime | None = None


class ColumnColorUpdate(BaseModel):
    field: str = Field(min_length=1)
    color: str


class RowColorsUpdate(BaseModel):
    ids: list[uuid.UUID]
    color: str


class ColorUpdateResponse(BaseModel):
    detail: str
    updated: int | None = None


class ImportResponse(BaseModel):
    detail: str
    imported: int
