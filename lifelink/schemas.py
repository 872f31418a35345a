from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from lifelink.services.blood_types import canonical_blood_type
from lifelink.services.matching import normalise_urgency

ACCOUNT_TYPES = ('donor', 'hospital')


class RequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')


def _text_or_blank(value):
    return value if isinstance(value, str) else ''


class LoginRequest(RequestSchema):
    email: str = ''
    password: str = ''
    user_type: str = Field('user', alias='userType')

    @field_validator('email', mode='before')
    @classmethod
    def normalise_email(cls, v):
        return _text_or_blank(v).strip().lower()

    @field_validator('password', mode='before')
    @classmethod
    def password_text(cls, v):
        return _text_or_blank(v)

    @field_validator('user_type', mode='before')
    @classmethod
    def user_type_text(cls, v):
        return v if isinstance(v, str) else 'user'


class RegisterRequest(RequestSchema):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    blood_type: Optional[str] = Field(None, alias='bloodType')
    location: Optional[str] = None

    @field_validator('email', mode='before')
    @classmethod
    def normalise_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @model_validator(mode='after')
    def check_account(self):
        if not (self.email and self.password and self.name and self.type):
            raise ValueError('Missing required fields')
        if self.type not in ACCOUNT_TYPES:
            raise ValueError('Invalid user type')
        if self.type == 'donor':
            canon = canonical_blood_type(self.blood_type)
            if canon is None:
                raise ValueError('A valid blood type is required for donors')
            self.blood_type = canon
        elif not (self.location and self.location.strip()):
            raise ValueError('Location is required for hospitals')
        return self


class ChatRequest(RequestSchema):
    message: str = ''

    @field_validator('message', mode='before')
    @classmethod
    def message_text(cls, v):
        return _text_or_blank(v)


class EligibilityRequest(RequestSchema):
    # age/weight stay loosely typed; the scorer coerces them itself
    name: Optional[str] = None
    age: Any = None
    weight: Any = None
    blood_type: Optional[str] = Field(None, alias='bloodType')
    location: Optional[str] = None
    recent_illness: Any = Field(False, alias='recentIllness')

    @field_validator('blood_type', mode='before')
    @classmethod
    def blood_type_or_none(cls, v):
        return canonical_blood_type(v) or (v if isinstance(v, str) else None)


class MatchSearchRequest(RequestSchema):
    blood_type: str = Field(alias='bloodType')
    urgency: str = 'normal'

    @field_validator('blood_type')
    @classmethod
    def known_blood_type(cls, v):
        canon = canonical_blood_type(v)
        if canon is None:
            raise ValueError(f'Invalid blood type: {v}')
        return canon

    @field_validator('urgency')
    @classmethod
    def known_urgency(cls, v):
        return normalise_urgency(v)


class NotifyRequest(MatchSearchRequest):
    donor_id: str = Field(alias='donorId')

    @field_validator('donor_id', mode='before')
    @classmethod
    def id_as_text(cls, v):
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v


class EmergencyCreateRequest(RequestSchema):
    type: Optional[str] = None
    location: Optional[str] = None
    blood_types: Optional[List[str]] = Field(None, alias='bloodTypes')

    @field_validator('blood_types')
    @classmethod
    def known_blood_types(cls, v):
        if v is None:
            return v
        canon = [canonical_blood_type(item) for item in v]
        if not canon or None in canon:
            raise ValueError('bloodTypes must list valid blood types')
        return canon


def _first_error(exc):
    err = exc.errors()[0]
    cause = (err.get('ctx') or {}).get('error')
    if cause is not None:
        return str(cause)
    if err.get('type') == 'missing':
        return f"Missing required field: {err['loc'][-1]}"
    field = '.'.join(str(part) for part in err.get('loc', ()))
    return f"{field}: {err['msg']}" if field else err['msg']


# (payload, None) on success, (None, first error message) otherwise
def parse_body(schema, data):
    if not isinstance(data, dict):
        return None, 'Invalid request body'
    try:
        return schema.model_validate(data), None
    except ValidationError as e:
        return None, _first_error(e)
