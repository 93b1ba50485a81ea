import logging

from sqlalchemy.exc import IntegrityError

from models.report_model import MissingAnimal, MissingPerson
from models.user_model import User
from repositories.report_repository import ReportRepository
from services.exceptions import RequestValidationError, ResourceNotFound
from services.ownership_service import OwnershipService
from services.patch_service import PatchService

logger = logging.getLogger(__name__)


class ReportService:
    # ───────── private helpers ──────────────────────────
    @classmethod
    def _create_report_base(cls, model, owner: User, payload: dict) -> int:
        data = dict(payload)
        data[model.owner_column] = owner.id
        report_id = ReportRepository.create_report(model, data)
        logger.info("%s report %s created by user %s", model.__tablename__, report_id, owner.id)
        return report_id

    # ───────── public creators ─────────────────────────
    @classmethod
    def create_person_report(cls, owner: User, payload: dict) -> int:
        return cls._create_report_base(MissingPerson, owner, payload)

    @classmethod
    def create_animal_report(cls, owner: User, payload: dict) -> int:
        return cls._create_report_base(MissingAnimal, owner, payload)

    # ───────── retrieval ──────────────────────────────
    @classmethod
    def get_report(cls, model, report_id: int):
        report = ReportRepository.get_report_by_id(model, report_id)
        if report is None:
            raise ResourceNotFound("Report not found")
        return report

    # ───────── updates & deletes ───────────────────────
    @classmethod
    def authorize(cls, model, report_id: int, actor: User, action: str = "edit") -> None:
        OwnershipService.check(model, report_id, actor, action=action)

    @classmethod
    def update_report(cls, model, report_id: int, actor: User, update_fields: dict) -> dict:
        OwnershipService.check(model, report_id, actor, action="edit")
        try:
            return PatchService.apply(model, report_id, update_fields)
        except IntegrityError:
            raise RequestValidationError("Required fields cannot be cleared.")

    @classmethod
    def delete_report(cls, model, report_id: int, actor: User) -> None:
        OwnershipService.check(model, report_id, actor, action="delete")
        if ReportRepository.delete_report(model, report_id) == 0:
            raise ResourceNotFound("Report not found.")
        logger.info("%s report %s deleted by user %s", model.__tablename__, report_id, actor.id)
