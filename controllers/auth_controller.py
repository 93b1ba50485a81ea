from flask import Blueprint, request, jsonify, current_app
from pydantic import ValidationError
from services.auth_service import AuthService
from services.exceptions import ServiceError
from schemas.auth_schema import RegisterSchema

auth_bp = Blueprint("auth", __name__)


# -------------------------- REGISTER ------------------------------
@auth_bp.route("/register", methods=["POST"])
def register():
    try:
        data = RegisterSchema.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return jsonify(error="Required fields are missing.",
                       details=e.errors(include_url=False, include_context=False)), 400

    try:
        user_id = AuthService.register_user(
            data.phone_number,
            data.real_name,
            data.nickname,
            data.ci,
            data.firebase_uid,
        )
        return jsonify(message="User registered successfully", userId=user_id), 201
    except ServiceError as e:
        return jsonify(error=str(e)), e.status_code
    except Exception:
        current_app.logger.exception("Error during user registration")
        return jsonify(error="Internal Server Error"), 500
