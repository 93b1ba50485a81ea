from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from models.user_model import isoformat


@dataclass
class PersonEntry:
    """A missing-person report as it appears in listings and feeds."""

    id: int
    name: str
    last_seen_location: str
    main_photo_url: Optional[str]
    created_at: datetime
    extra: dict = field(default_factory=dict)

    kind = "person"

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "type": self.kind,
            "personName": self.name,
            "animalName": None,
        }
        data.update({k: isoformat(v) for k, v in self.extra.items()})
        data.update({
            "last_seen_location": self.last_seen_location,
            "main_photo_url": self.main_photo_url,
            "created_at": isoformat(self.created_at),
        })
        return data


@dataclass
class AnimalEntry:
    """A missing-animal report as it appears in listings and feeds."""

    id: int
    name: Optional[str]
    last_seen_location: str
    main_photo_url: Optional[str]
    created_at: datetime
    extra: dict = field(default_factory=dict)

    kind = "animal"

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "type": self.kind,
            "personName": None,
            "animalName": self.name,
        }
        data.update({k: isoformat(v) for k, v in self.extra.items()})
        data.update({
            "last_seen_location": self.last_seen_location,
            "main_photo_url": self.main_photo_url,
            "created_at": isoformat(self.created_at),
        })
        return data


@dataclass
class SightingPin:
    """One point on the sightings map."""

    id: int
    kind: str
    name: Optional[str]
    sighting_location: str
    sighting_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.kind,
            "name": self.name,
            "sighting_location": self.sighting_location,
            "sighting_at": isoformat(self.sighting_at),
        }


def entry_from_row(row) -> "PersonEntry | AnimalEntry":
    """Build the tagged entry for a row of the unified report union."""
    if row.type == PersonEntry.kind:
        cls = PersonEntry
    elif row.type == AnimalEntry.kind:
        cls = AnimalEntry
    else:
        raise ValueError(f"Unknown report type {row.type!r}")
    return cls(
        id=row.id,
        name=row.name,
        last_seen_location=row.last_seen_location,
        main_photo_url=row.main_photo_url,
        created_at=row.created_at,
    )
