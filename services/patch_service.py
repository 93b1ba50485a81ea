import logging

from repositories.db_utils import update_by_id
from services.exceptions import NoFieldsProvided, ResourceNotFound

logger = logging.getLogger(__name__)


class PatchService:
    """
    Applies a sparse patch: only keys present in ``fields`` are written,
    whatever their value (None, 0 and "" included). Keys outside the
    model's ``mutable_fields`` allow-list are dropped, so owner columns
    and primary keys can never be reached through here.
    """

    @staticmethod
    def apply(model, resource_id: int, fields: dict,
              empty_message: str = "No fields to update provided.",
              missing_message: str = "Report not found.") -> dict:
        updates = {k: v for k, v in fields.items() if k in model.mutable_fields}
        if not updates:
            raise NoFieldsProvided(empty_message)

        logger.debug("patching %s id=%s fields=%s", model.__tablename__, resource_id, sorted(updates))
        if update_by_id(model, resource_id, updates) == 0:
            raise ResourceNotFound(missing_message)
        return updates
