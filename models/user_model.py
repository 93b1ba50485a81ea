from datetime import datetime, timezone

from config import db


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    firebase_uid = db.Column(db.String(128), unique=True, nullable=False)

    # verified identity, fixed at registration
    phone_number = db.Column(db.String(20), nullable=False)
    real_name = db.Column(db.String(100), nullable=False)
    ci = db.Column(db.String(128), unique=True, nullable=False)

    nickname = db.Column(db.String(50), unique=True, nullable=False)
    profile_image_url = db.Column(db.String(512))
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    mutable_fields = ("nickname", "profile_image_url")

    def to_dict(self):
        return {
            "id": self.id,
            "firebase_uid": self.firebase_uid,
            "phone_number": self.phone_number,
            "real_name": self.real_name,
            "nickname": self.nickname,
            "profile_image_url": self.profile_image_url,
            "created_at": isoformat(self.created_at),
        }

    def is_owner(self, owner_id: int) -> bool:
        return self.id == owner_id         # Returns True if the given owner id is this user's id
