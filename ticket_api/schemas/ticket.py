import uuid
from datetime import datetime, timezone
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel

from .validators import reject_null, validate_event_date

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]
EventDate = Annotated[NonEmptyStr, AfterValidator(validate_event_date)]


class TicketInput(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class TicketCreate(TicketInput):
    event_name: NonEmptyStr = Field(
        description="The name of the event", examples=["Summer Music Festival 2025"]
    )
    location: NonEmptyStr = Field(
        description="The location where the event will take place",
        examples=["Central Park, New York"],
    )
    time: EventDate = Field(
        description="The date of the event in YYYY-MM-DD format",
        examples=["2025-08-15"],
    )


class TicketUpdate(TicketInput):
    event_name: NonEmptyStr | None = None
    location: NonEmptyStr | None = None
    time: EventDate | None = None
    is_used: StrictBool | None = Field(
        default=None,
        description="Indicates if the ticket has been used",
        examples=[True],
    )

    @field_validator("event_name", "location", "time", "is_used", mode="before")
    @classmethod
    def _not_null(cls, value):
        return reject_null(value)


class TicketRead(BaseModel):
    id: uuid.UUID
    event_name: str
    location: str
    time: str
    is_used: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @field_serializer("created_at", "updated_at")
    def _as_utc(self, value: datetime) -> datetime:
        # Stored naive in UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
