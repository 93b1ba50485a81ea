from sqlalchemy import literal, select, union_all

from config import db
from models.report_model import MissingAnimal, MissingPerson
from models.sighting_model import AnimalSighting, PersonSighting


class FeedRepository:
    @staticmethod
    def list_reports_by_owner(user_id: int):
        persons = select(
            MissingPerson.id,
            literal("person").label("type"),
            MissingPerson.missing_person_name.label("name"),
            MissingPerson.last_seen_location,
            MissingPerson.main_photo_url,
            MissingPerson.created_at,
        ).where(MissingPerson.reporter_id == user_id)
        animals = select(
            MissingAnimal.id,
            literal("animal").label("type"),
            MissingAnimal.animal_name.label("name"),
            MissingAnimal.last_seen_location,
            MissingAnimal.main_photo_url,
            MissingAnimal.created_at,
        ).where(MissingAnimal.owner_id == user_id)

        posts = union_all(persons, animals).subquery()
        stmt = select(posts).order_by(posts.c.created_at.desc(), posts.c.id.desc())
        return db.session.execute(stmt).all()

    @staticmethod
    def list_person_sightings(limit: int | None = None):
        stmt = (
            select(
                PersonSighting.id,
                MissingPerson.missing_person_name.label("name"),
                PersonSighting.sighting_location,
                PersonSighting.sighting_at,
            )
            .join(MissingPerson, PersonSighting.missing_person_id == MissingPerson.id)
            .order_by(PersonSighting.id)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return db.session.execute(stmt).all()

    @staticmethod
    def list_animal_sightings(limit: int | None = None):
        stmt = (
            select(
                AnimalSighting.id,
                MissingAnimal.animal_name.label("name"),
                AnimalSighting.sighting_location,
                AnimalSighting.sighting_at,
            )
            .join(MissingAnimal, AnimalSighting.missing_animal_id == MissingAnimal.id)
            .order_by(AnimalSighting.id)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return db.session.execute(stmt).all()
