from config import db
from models.user_model import utcnow


class SightingMixin:
    id = db.Column(db.Integer, primary_key=True)
    sighting_at = db.Column(db.DateTime, nullable=False)
    sighting_location = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    sighting_photo_url = db.Column(db.String(512))
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)


class PersonSighting(SightingMixin, db.Model):
    __tablename__ = "person_sightings"

    missing_person_id = db.Column(
        db.Integer, db.ForeignKey("missing_persons.id", ondelete="CASCADE"), nullable=False, index=True
    )
    reporter_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)

    parent_column = "missing_person_id"


class AnimalSighting(SightingMixin, db.Model):
    __tablename__ = "animal_sightings"

    missing_animal_id = db.Column(
        db.Integer, db.ForeignKey("missing_animals.id", ondelete="CASCADE"), nullable=False, index=True
    )
    reporter_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)

    parent_column = "missing_animal_id"
