from sqlalchemy import select

from config import db
from models.user_model import User
from repositories.db_utils import commit


class SightingRepository:
    @staticmethod
    def create_sighting(model, data: dict) -> int:
        sighting = model(**data)
        db.session.add(sighting)
        commit()
        return sighting.id

    @staticmethod
    def list_for_parent(model, parent_id: int):
        stmt = (
            select(
                model.id,
                model.sighting_at,
                model.sighting_location,
                model.description,
                model.sighting_photo_url,
                model.created_at,
                User.nickname.label("reporter_nickname"),
            )
            .join(User, model.reporter_id == User.id)
            .where(getattr(model, model.parent_column) == parent_id)
            .order_by(model.sighting_at.desc())
        )
        return db.session.execute(stmt).all()
