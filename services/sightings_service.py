import logging

from sqlalchemy.exc import IntegrityError

from models.sighting_model import AnimalSighting, PersonSighting
from models.user_model import User, isoformat
from repositories.sighting_repository import SightingRepository
from services.exceptions import ParentNotFound

logger = logging.getLogger(__name__)

PARENT_MISSING = {
    PersonSighting: "The specified missing person report does not exist.",
    AnimalSighting: "The specified missing animal report does not exist.",
}


class SightingService:
    @staticmethod
    def create_sighting(model, parent_id: int, reporter: User, payload: dict) -> int:
        data = dict(payload)
        data[model.parent_column] = parent_id
        data["reporter_id"] = reporter.id
        try:
            sighting_id = SightingRepository.create_sighting(model, data)
        except IntegrityError:
            # the only constraint the insert can break is the parent reference
            raise ParentNotFound(PARENT_MISSING[model])
        logger.info("%s %s recorded for report %s", model.__tablename__, sighting_id, parent_id)
        return sighting_id

    @staticmethod
    def list_sightings(model, parent_id: int) -> list[dict]:
        rows = SightingRepository.list_for_parent(model, parent_id)
        return [{k: isoformat(v) for k, v in row._mapping.items()} for row in rows]
