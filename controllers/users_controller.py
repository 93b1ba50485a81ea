from flask import Blueprint, request, jsonify, current_app
from pydantic import ValidationError
from controllers.auth_decorators import auth_required
from services.auth_service import AuthService
from services.feed_service import FeedService
from services.exceptions import ServiceError
from schemas.auth_schema import UpdateProfileSchema

users_bp = Blueprint("users", __name__)


# ---------------------------- GET ME ------------------------------
@users_bp.route("/me", methods=["GET"])
@auth_required
def get_me():
    return jsonify(request.user.to_dict()), 200


# ------------------------- UPDATE PROFILE -------------------------
@users_bp.route("/me", methods=["PATCH"])
@auth_required
def update_me():
    try:
        updates = UpdateProfileSchema.model_validate(request.get_json(silent=True) or {}) \
                      .model_dump(exclude_unset=True)
    except ValidationError as e:
        return jsonify(error="Invalid profile fields.",
                       details=e.errors(include_url=False, include_context=False)), 400

    current_app.logger.debug(f"PATCH /users/me ({request.user.id}) -> {sorted(updates)}")

    try:
        AuthService.update_profile(request.user, updates)
        return jsonify(message="Profile updated successfully"), 200
    except ServiceError as e:
        return jsonify(error=str(e)), e.status_code
    except Exception:
        current_app.logger.exception("Error updating user profile")
        return jsonify(error="Internal Server Error"), 500


# --------------------------- DEACTIVATE ---------------------------
@users_bp.route("/me", methods=["DELETE"])
@auth_required
def delete_me():
    try:
        AuthService.deactivate_user(request.user)
        return jsonify(message="User account deactivated successfully."), 200
    except ServiceError as e:
        return jsonify(error=str(e)), e.status_code
    except Exception:
        current_app.logger.exception("Error deactivating user account")
        return jsonify(error="Internal Server Error"), 500


# ---------------------------- MY POSTS ----------------------------
@users_bp.route("/me/posts", methods=["GET"])
@auth_required
def my_posts():
    try:
        posts = FeedService.my_posts(request.user.id)
        return jsonify([post.to_dict() for post in posts]), 200
    except Exception:
        current_app.logger.exception("Error fetching my posts")
        return jsonify(error="Internal Server Error"), 500
