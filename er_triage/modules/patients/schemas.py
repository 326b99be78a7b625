import math
import sys
import uuid
from datetime import datetime
from typing import Annotated, Union
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer, StrictInt, StrictFloat, StrictStr

def _storable(v: int | float) -> int | float:
    if isinstance(v, float) and not math.isfinite(v):
        raise ValueError("must be a finite number")
    if abs(v) > sys.float_info.max:
        raise ValueError("must fit in a double precision float")
    return v

def _compact(v: float) -> int | float:
    # JSON numbers have no int/float split: 15.0 goes out as 15
    return int(v) if v.is_integer() else v

# JSON numbers only: strings like "3", booleans, NaN and Infinity are rejected
Number = Annotated[Union[StrictInt, StrictFloat], AfterValidator(_storable)]
StoredNumber = Annotated[float, PlainSerializer(_compact, return_type=Union[int, float])]

class PatientCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: StrictStr = Field(..., min_length=1)
    code: StrictStr = Field(..., min_length=1)
    severity: Number
    wait_time: Number = Field(..., alias="waitTime")

class PatientOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: uuid.UUID
    name: str
    code: str
    severity: StoredNumber
    wait_time: StoredNumber = Field(..., alias="waitTime")
    created_at: datetime | None = Field(default=None, alias="createdAt")

class PatientCreated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    patient_id: uuid.UUID = Field(..., alias="patientId")

class WaitTimeOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    wait_time: StoredNumber = Field(..., alias="waitTime")
