from models.post_model import AnimalEntry, PersonEntry, SightingPin, entry_from_row
from models.report_model import MissingAnimal, MissingPerson
from repositories.feed_repository import FeedRepository
from repositories.report_repository import ReportRepository


class FeedService:
    """Read-only views that fold person and animal rows into one shape."""

    @staticmethod
    def list_missing_persons(limit: int) -> list[PersonEntry]:
        return [
            PersonEntry(
                id=r.id,
                name=r.missing_person_name,
                last_seen_location=r.last_seen_location,
                main_photo_url=r.main_photo_url,
                created_at=r.created_at,
                extra={"age_at_missing": r.age_at_missing},
            )
            for r in ReportRepository.list_missing(MissingPerson, limit)
        ]

    @staticmethod
    def list_missing_animals(limit: int) -> list[AnimalEntry]:
        return [
            AnimalEntry(
                id=r.id,
                name=r.animal_name,
                last_seen_location=r.last_seen_location,
                main_photo_url=r.main_photo_url,
                created_at=r.created_at,
                extra={"breed": r.breed, "age": r.age},
            )
            for r in ReportRepository.list_missing(MissingAnimal, limit)
        ]

    @staticmethod
    def sightings_map(limit: int | None = None) -> list[SightingPin]:
        pins = [
            SightingPin(r.id, PersonEntry.kind, r.name, r.sighting_location, r.sighting_at)
            for r in FeedRepository.list_person_sightings(limit)
        ]
        pins += [
            SightingPin(r.id, AnimalEntry.kind, r.name, r.sighting_location, r.sighting_at)
            for r in FeedRepository.list_animal_sightings(limit)
        ]
        return pins

    @staticmethod
    def my_posts(user_id: int):
        return [entry_from_row(r) for r in FeedRepository.list_reports_by_owner(user_id)]
