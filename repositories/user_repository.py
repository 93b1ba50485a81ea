from sqlalchemy import or_, select, update

from config import db
from models.user_model import User
from repositories.db_utils import commit, execute_and_commit


class UserRepository:
    @staticmethod
    def get_user_by_firebase_uid(firebase_uid: str, active_only: bool = True):
        stmt = select(User).where(User.firebase_uid == firebase_uid)
        if active_only:
            stmt = stmt.where(User.is_active.is_(True))
        return db.session.execute(stmt).scalar_one_or_none()

    @staticmethod
    def find_conflicting_user(nickname: str, ci: str, firebase_uid: str):
        stmt = (
            select(User.id)
            .where(or_(User.nickname == nickname, User.ci == ci, User.firebase_uid == firebase_uid))
            .limit(1)
        )
        return db.session.execute(stmt).first()

    @staticmethod
    def create_user(data: dict) -> User:
        user = User(**data)
        db.session.add(user)
        commit()
        return user

    @staticmethod
    def deactivate_user(user_id: int) -> int:
        return execute_and_commit(
            update(User).where(User.id == user_id).values(is_active=False)
        )
