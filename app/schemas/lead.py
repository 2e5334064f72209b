from pydantic import EmailStr, Field, field_validator
from typing import Optional
from app.core.models import CamelCaseModel


class LeadCreate(CamelCaseModel):
    report_id: str = Field(..., min_length=1)
    email: EmailStr
    name: Optional[str] = None
    company: Optional[str] = None

    @field_validator('name', 'company', mode='before')
    @classmethod
    def empty_str_to_none(cls, value):
        if isinstance(value, str) and value.strip() == '':
            return None
        return value


class LeadCaptureResponse(CamelCaseModel):
    success: bool = True
    lead_id: str
    message: str


class LeadInfo(CamelCaseModel):
    id: str
    name: Optional[str] = None
    company: Optional[str] = None


class LeadLookupResponse(CamelCaseModel):
    exists: bool
    lead: Optional[LeadInfo] = None
