import logging

from firebase_admin import auth as fb_auth
from sqlalchemy.exc import IntegrityError

from models.user_model import User
from repositories.user_repository import UserRepository
from services.exceptions import (
    InvalidCredential,
    ResourceNotFound,
    Unauthenticated,
    UniqueConstraintViolation,
    UnknownSubject,
)
from services.patch_service import PatchService

logger = logging.getLogger(__name__)


class AuthService:

    # ---------------------------- session ----------------------------
    @staticmethod
    def resolve_session(auth_header: str) -> User:
        """
        Turn an ``Authorization`` header into the local user behind it.

        Raises Unauthenticated (401) when no bearer token is present,
        InvalidCredential (403) when Firebase rejects it and UnknownSubject
        (404) when the token is fine but nobody registered with that uid.
        Nothing is cached; every request verifies and queries again.
        """
        if not auth_header or not auth_header.startswith("Bearer "):
            raise Unauthenticated()
        id_token = auth_header.split(" ", 1)[1].strip()
        if not id_token:
            raise Unauthenticated()

        try:
            claims = fb_auth.verify_id_token(id_token)
        except Exception as e:
            logger.info("token verification failed: %s", e)
            raise InvalidCredential()

        user = UserRepository.get_user_by_firebase_uid(claims["uid"])
        if user is None:
            raise UnknownSubject()
        return user

    # ---------------------------- create -----------------------------
    @staticmethod
    def register_user(phone_number: str, real_name: str, nickname: str,
                      ci: str, firebase_uid: str) -> int:
        if UserRepository.find_conflicting_user(nickname, ci, firebase_uid):
            raise UniqueConstraintViolation("User with this info already exists.")
        try:
            user = UserRepository.create_user({
                "phone_number": phone_number,
                "real_name": real_name,
                "nickname": nickname,
                "ci": ci,
                "firebase_uid": firebase_uid,
            })
        except IntegrityError:
            # lost a race with a concurrent registration
            raise UniqueConstraintViolation("User with this info already exists.")
        logger.info("registered user %s", user.id)
        return user.id

    # ----------------------------- update ----------------------------
    @staticmethod
    def update_profile(user: User, updates: dict) -> dict:
        try:
            return PatchService.apply(
                User, user.id, updates,
                empty_message="No fields to update.",
                missing_message="User not found",
            )
        except IntegrityError:
            raise UniqueConstraintViolation("Nickname already exists.")

    @staticmethod
    def deactivate_user(user: User) -> None:
        if UserRepository.deactivate_user(user.id) == 0:
            raise ResourceNotFound("User not found")
        logger.info("deactivated user %s", user.id)
