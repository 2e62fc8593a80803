from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Dict, Optional, Tuple

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer


class TrackEventStatusCode(str, Enum):
    UNKNOWN = "Unknown"
    INFORMATION_RECEIVED = "InformationReceived"
    AT_PICKUP = "AtPickup"
    IN_TRANSIT = "InTransit"
    OUT_FOR_DELIVERY = "OutForDelivery"
    ATTEMPT_FAIL = "AttemptFail"
    DELIVERED = "Delivered"
    AVAILABLE_FOR_PICKUP = "AvailableForPickup"
    EXCEPTION = "Exception"


# Read-only view once validated; dumped back as a plain dict
CarrierSpecificData = Annotated[
    Dict[str, Any],
    AfterValidator(MappingProxyType),
    PlainSerializer(dict),
]


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, validate_default=True)


class CarrierTrackInput(FrozenModel):
    tracking_number: str


class TrackEventStatus(FrozenModel):
    code: TrackEventStatusCode
    name: Optional[str] = Field(default=None)
    carrier_specific_data: CarrierSpecificData = Field(default_factory=dict)


class Location(FrozenModel):
    country_code: Optional[str] = Field(default=None)
    name: Optional[str] = Field(default=None)
    postal_code: Optional[str] = Field(default=None)
    carrier_specific_data: CarrierSpecificData = Field(default_factory=dict)


class ContactInfo(FrozenModel):
    name: Optional[str] = Field(default=None)
    location: Optional[Location] = Field(default=None)
    phone_number: Optional[str] = Field(default=None)
    carrier_specific_data: CarrierSpecificData = Field(default_factory=dict)


class TrackEvent(FrozenModel):
    status: TrackEventStatus
    time: Optional[datetime] = Field(default=None)
    location: Optional[Location] = Field(default=None)
    contact: Optional[ContactInfo] = Field(default=None)
    description: Optional[str] = Field(default=None)
    carrier_specific_data: CarrierSpecificData = Field(default_factory=dict)


class TrackInfo(FrozenModel):
    sender: Optional[ContactInfo] = Field(default=None)
    recipient: Optional[ContactInfo] = Field(default=None)
    events: Tuple[TrackEvent, ...] = Field(default_factory=tuple)
    carrier_specific_data: CarrierSpecificData = Field(default_factory=dict)

    def __str__(self):
        return f"TrackInfo: ({len(self.events)} events)"

    @property
    def latest_event(self) -> Optional[TrackEvent]:
        return self.events[-1] if self.events else None
