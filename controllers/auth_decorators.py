# auth_decorators.py
from functools import wraps
from flask import current_app, request, jsonify
from services.auth_service import AuthService
from services.exceptions import ServiceError


def auth_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            request.user = AuthService.resolve_session(request.headers.get("Authorization", ""))
        except ServiceError as e:
            return jsonify(error=str(e)), e.status_code
        except Exception:
            current_app.logger.exception("Error verifying token or fetching user")
            return jsonify(error="Internal Server Error"), 500

        return fn(*args, **kwargs)
    return wrapper
