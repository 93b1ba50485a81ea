from config import db
from models.user_model import isoformat, utcnow


class ReportMixin:
    """Columns shared by both kinds of missing report."""

    id = db.Column(db.Integer, primary_key=True)
    gender = db.Column(db.String(20))
    last_seen_at = db.Column(db.DateTime, nullable=False)
    last_seen_location = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    main_photo_url = db.Column(db.String(512))
    # 'missing' | 'found' | 'closed', compared by exact value
    status = db.Column(db.String(20), nullable=False, default="missing", index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)

    def to_dict(self):
        return {
            column.name: isoformat(getattr(self, column.name))
            for column in self.__table__.columns
        }


class MissingPerson(ReportMixin, db.Model):
    __tablename__ = "missing_persons"

    reporter_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    missing_person_name = db.Column(db.String(100), nullable=False)
    age_at_missing = db.Column(db.Integer)
    height = db.Column(db.Float)
    weight = db.Column(db.Float)

    owner_column = "reporter_id"
    mutable_fields = (
        "status", "missing_person_name", "gender", "age_at_missing", "height",
        "weight", "last_seen_at", "last_seen_location", "description", "main_photo_url",
    )


class MissingAnimal(ReportMixin, db.Model):
    __tablename__ = "missing_animals"

    owner_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    animal_type = db.Column(db.String(50), nullable=False)
    breed = db.Column(db.String(100))
    animal_name = db.Column(db.String(100))
    age = db.Column(db.Integer)

    owner_column = "owner_id"
    mutable_fields = (
        "status", "animal_type", "breed", "animal_name", "gender", "age",
        "last_seen_at", "last_seen_location", "description", "main_photo_url",
    )
