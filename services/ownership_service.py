from models.user_model import User
from repositories.report_repository import ReportRepository
from services.exceptions import Forbidden, ResourceNotFound


class OwnershipService:
    # existence first (404), then ownership (403)
    @staticmethod
    def check(model, resource_id: int, actor: User, action: str = "edit") -> None:
        row = ReportRepository.get_owner_row(model, resource_id)
        if row is None:
            raise ResourceNotFound("Report not found.")
        if not actor.is_owner(row[0]):
            raise Forbidden(f"Forbidden. You do not have permission to {action} this report.")
