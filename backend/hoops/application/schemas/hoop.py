"""Pydantic DTO for the hoop record, shared by the JSON files and the API."""

import dataclasses
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal

from hoops.domain.entities import HoopAttributes


class HoopRecordSchema(BaseModel):
    """Serialized hoop record.

    Field names go over the wire in PascalCase (``Id``, ``ContactOk`` ...),
    the format records have always been stored in.
    """

    id: str
    location: str = ""
    lat: float = 0.0
    lng: float = 0.0
    image: str = ""
    story: str = ""
    contact_ok: bool = False
    email: str = ""
    phone: str = ""
    created: datetime

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        from_attributes=True,
    )

    @classmethod
    def from_domain(cls, attributes: HoopAttributes) -> "HoopRecordSchema":
        return cls(**dataclasses.asdict(attributes))

    def to_domain(self) -> HoopAttributes:
        return HoopAttributes(
            id=self.id,
            created=self.created,
            location=self.location,
            lat=self.lat,
            lng=self.lng,
            image=self.image,
            story=self.story,
            contact_ok=self.contact_ok,
            email=self.email,
            phone=self.phone,
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
