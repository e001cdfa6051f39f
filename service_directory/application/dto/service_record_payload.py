from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import asdict
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from service_directory.application.exceptions import CatalogLoadError
from service_directory.domain.entities.service_record import ServiceRecord

_TEXT_FIELDS = (
    "name",
    "tagline",
    "description",
    "category",
    "city",
    "price",
    "color",
    "image",
    "phone",
    "email",
    "address",
)


class ServiceRecordPayload(BaseModel):
    """Raw catalog entry as supplied by a catalog source."""

    model_config = ConfigDict(extra="ignore")

    id: int | str
    name: str = ""
    tagline: str = ""
    description: str = ""
    category: str = ""
    city: str = ""
    rating: float
    reviews: int = Field(ge=0)
    price: str = ""
    features: list[str] = Field(default_factory=list)
    color: str = ""
    image: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("features", mode="before")
    @classmethod
    def _features_or_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("rating")
    @classmethod
    def _finite_rating(cls, value: float) -> float:
        if math.isnan(value) or math.isinf(value):
            raise ValueError("rating must be a finite number")
        return value

    def to_record(self) -> ServiceRecord:
        return ServiceRecord(
            id=self.id,
            name=self.name,
            tagline=self.tagline,
            description=self.description,
            category=self.category,
            city=self.city,
            rating=self.rating,
            reviews=self.reviews,
            price=self.price,
            features=tuple(self.features),
            color=self.color,
            image=self.image,
            phone=self.phone,
            email=self.email,
            address=self.address,
        )


def parse_records(raw: Any) -> tuple[ServiceRecord, ...]:
    """
    Validate a raw catalog and convert it to immutable records.

    Missing text fields become empty strings. Missing or invalid numeric
    fields, missing ids and duplicate ids fail the whole load so that sort
    order can never depend on an undefined value. Ids must also be unique in
    their text form, since that is how callers outside the process name them.
    Ready-made ServiceRecord items go through the same checks.
    """
    if isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Sequence):
        raise CatalogLoadError(f"catalog must be a sequence of records, got {type(raw).__name__}")

    records: list[ServiceRecord] = []
    seen: set[str] = set()
    for index, item in enumerate(raw):
        if isinstance(item, ServiceRecord):
            payload = asdict(item)
        elif isinstance(item, Mapping):
            payload = dict(item)
        else:
            raise CatalogLoadError(f"catalog record #{index} is a {type(item).__name__}, expected a mapping")

        try:
            record = ServiceRecordPayload.model_validate(payload).to_record()
        except ValidationError as e:
            label = payload.get("id", f"#{index}")
            raise CatalogLoadError(f"invalid catalog record {label}: {e}") from e

        # Keep the caller's instance when validation changed nothing
        if isinstance(item, ServiceRecord) and record == item:
            record = item

        key = str(record.id)
        if key in seen:
            raise CatalogLoadError(f"duplicate catalog record id {record.id!r}")
        seen.add(key)
        records.append(record)

    return tuple(records)
