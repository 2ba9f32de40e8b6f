from typing import List, Dict
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    # snake_case in Python, camelCase on the wire (bounceRate, cityData, ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CityRecord(_Record):
    city: str = "Unknown"
    users: int = Field(default=0, ge=0)
    sessions: int = Field(default=0, ge=0)
    bounce_rate: float = Field(default=0.0, ge=0.0)
    pageviews: int = Field(default=0, ge=0)


class TrafficSourceRecord(_Record):
    source: str = "Unknown"
    sessions: int = Field(default=0, ge=0)


class PlatformRecord(_Record):
    platform: str = "Unknown"
    sessions: int = Field(default=0, ge=0)


class LocationRecord(_Record):
    location: str = "Unknown"
    pageviews: int = Field(default=0, ge=0)


class DashboardEnvelope(_Record):
    city_data: List[CityRecord] = Field(default_factory=list)
    traffic_sources: List[TrafficSourceRecord] = Field(default_factory=list)
    platforms: List[PlatformRecord] = Field(default_factory=list)
    location_data: List[LocationRecord] = Field(default_factory=list)
    last_updated: str


class ErrorEnvelope(BaseModel):
    error: str
    message: str


class HealthReport(BaseModel):
    status: str = "OK"
    timestamp: str
    environment: Dict[str, bool]
