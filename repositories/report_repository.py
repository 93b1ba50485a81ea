from sqlalchemy import delete, select

from config import db
from repositories.db_utils import commit, execute_and_commit


# The ReportRepository class provides static methods shared by both
# report tables (missing_persons and missing_animals); the model is
# passed in so the same queries serve either kind.
class ReportRepository:
    @staticmethod
    def create_report(model, data: dict) -> int:
        report = model(**data)
        db.session.add(report)
        commit()
        return report.id

    @staticmethod
    def get_report_by_id(model, report_id: int):
        return db.session.get(model, report_id)

    @staticmethod
    def get_owner_row(model, report_id: int):
        owner_column = getattr(model, model.owner_column)
        stmt = select(owner_column).where(model.id == report_id).with_for_update()
        return db.session.execute(stmt).first()

    @staticmethod
    def delete_report(model, report_id: int) -> int:
        return execute_and_commit(delete(model).where(model.id == report_id))

    @staticmethod
    def list_missing(model, limit: int):
        stmt = (
            select(model)
            .where(model.status == "missing")
            .order_by(model.created_at.desc(), model.id.desc())
            .limit(limit)
        )
        return db.session.execute(stmt).scalars().all()
