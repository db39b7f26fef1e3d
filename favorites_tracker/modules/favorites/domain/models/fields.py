# 📄 File: favorites_tracker/modules/favorites/domain/models/fields.py
# 🧭 Purpose (Layman Explanation):
# Describes the custom form fields users add to their items (text, numbers, dates, yes/no,
# links, pictures) and the building blocks templates use to define those forms.
# 🧪 Purpose (Technical Summary):
# Closed discriminated union of custom field values with canonical string projections,
# plus Location, ComponentType, ComponentDefinition and ValidationRule value objects.
# 🔗 Dependencies:
# pydantic, datetime, enum, typing, urllib.parse
# 🔄 Connected Modules / Calls From:
# item.py, template.py, domain/validation.py, Supabase row mappers

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, List, Literal, Optional, Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

ISO8601_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _require_absolute_url(v: str) -> str:
    parsed = urlparse(v)
    if not parsed.scheme or not (parsed.netloc or parsed.path):
        raise ValueError(f"URL must be absolute: {v!r}")
    return v


# =============================================================================
# CUSTOM FIELD VALUES
# =============================================================================

class _FieldValue(BaseModel):
    model_config = ConfigDict(frozen=True)


class TextFieldValue(_FieldValue):
    type: Literal["text"] = "text"
    value: str

    @property
    def string_value(self) -> str:
        return self.value


class NumberFieldValue(_FieldValue):
    type: Literal["number"] = "number"
    value: float

    @property
    def string_value(self) -> str:
        return str(self.value)


class DateFieldValue(_FieldValue):
    """Date value; projected as UTC ``YYYY-MM-DDTHH:MM:SSZ``. Naive datetimes are taken as UTC."""

    type: Literal["date"] = "date"
    value: datetime

    @property
    def string_value(self) -> str:
        value = self.value
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).strftime(ISO8601_FORMAT)


class BooleanFieldValue(_FieldValue):
    type: Literal["boolean"] = "boolean"
    value: bool

    @property
    def string_value(self) -> str:
        return "true" if self.value else "false"


class UrlFieldValue(_FieldValue):
    type: Literal["url"] = "url"
    value: str

    @field_validator("value")
    @classmethod
    def validate_url(cls, v: str) -> str:
        return _require_absolute_url(v)

    @property
    def string_value(self) -> str:
        return self.value


class ImageFieldValue(_FieldValue):
    type: Literal["image"] = "image"
    value: str

    @field_validator("value")
    @classmethod
    def validate_url(cls, v: str) -> str:
        return _require_absolute_url(v)

    @property
    def string_value(self) -> str:
        return self.value


CustomFieldValue = Annotated[
    Union[
        TextFieldValue,
        NumberFieldValue,
        DateFieldValue,
        BooleanFieldValue,
        UrlFieldValue,
        ImageFieldValue,
    ],
    Field(discriminator="type"),
]

custom_field_value_adapter: TypeAdapter = TypeAdapter(CustomFieldValue)


def field_value_from(value: Any):
    """
    Build the matching CustomFieldValue variant from a plain Python value.

    bool -> boolean, int/float -> number, datetime -> date, str -> text.
    URL and image variants must be built explicitly.
    """
    if isinstance(value, bool):
        return BooleanFieldValue(value=value)
    if isinstance(value, (int, float)):
        return NumberFieldValue(value=float(value))
    if isinstance(value, datetime):
        return DateFieldValue(value=value)
    if isinstance(value, str):
        return TextFieldValue(value=value)
    raise TypeError(f"No custom field variant for {type(value).__name__}")


# =============================================================================
# SUPPORTING VALUE OBJECTS
# =============================================================================

class Location(BaseModel):
    """Location information for items. Range checks happen at write time."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    address: Optional[str] = None
    name: Optional[str] = None


class ComponentType(str, Enum):
    """Form component kinds a template can define"""
    TEXT_FIELD = "textField"
    TEXT_AREA = "textArea"
    NUMBER_FIELD = "numberField"
    DATE_FIELD = "dateField"
    TOGGLE = "toggle"
    PICKER = "picker"
    RATING = "rating"
    IMAGE = "image"
    LOCATION = "location"


class ValidationRule(BaseModel):
    """
    Constraint description attached to a template component.
    Not enforced by the entity itself; form consumers apply it.
    """

    model_config = ConfigDict(frozen=True)

    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    pattern: Optional[str] = None
    required: bool = False


class ComponentDefinition(BaseModel):
    """A single form component inside a template."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    type: ComponentType
    label: str
    is_required: bool = False
    default_value: Optional[CustomFieldValue] = None
    options: Optional[List[str]] = None       # picker only
    validation: Optional[ValidationRule] = None
