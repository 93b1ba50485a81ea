from sqlalchemy import update

from config import db


def commit() -> None:
    """Commit the request session, rolling back before re-raising on failure."""
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


def execute_and_commit(stmt) -> int:
    """Run a single write statement in the current transaction and commit it."""
    try:
        result = db.session.execute(stmt)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return result.rowcount


def update_by_id(model, resource_id: int, values: dict) -> int:
    return execute_and_commit(
        update(model).where(model.id == resource_id).values(**values)
    )
