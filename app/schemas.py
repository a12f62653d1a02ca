from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# largest id a SQL INTEGER column can hold
MAX_ID = 2**63 - 1


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class DeviceOut(CamelModel):
    id: int
    name: str


class UserOut(CamelModel):
    id: int
    name: str


class BookingOut(CamelModel):
    id: int
    device: DeviceOut
    user: UserOut
    booked_at: datetime
    returned_at: datetime | None = None

    @field_validator("booked_at", "returned_at")
    @classmethod
    def assume_utc(cls, value: datetime | None) -> datetime | None:
        # SQLite hands timestamps back without their offset; they are stored as UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class DeviceInfoOut(CamelModel):
    device: DeviceOut
    latest_booking: BookingOut | None = None
    is_available: bool


class BookDeviceBody(CamelModel):
    user_id: int = Field(ge=1, le=MAX_ID)
