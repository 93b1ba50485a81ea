import re

from flask import Blueprint, request, jsonify, current_app
from pydantic import ValidationError
from controllers.auth_decorators import auth_required
from models.report_model import MissingAnimal, MissingPerson
from services.reports_service import ReportService
from services.feed_service import FeedService
from services.exceptions import ServiceError
from schemas.report_schema import (
    MissingPersonSchema, UpdateMissingPersonSchema,
    MissingAnimalSchema, UpdateMissingAnimalSchema,
)

reports_bp = Blueprint("reports", __name__)

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def list_limit() -> int:
    """
    `limit` query param, read the way parseInt would: leading digits count
    ("10abc" is 10). Absent, non-numeric or non-positive means the default;
    MAX_LIST_LIMIT, when set, caps it.
    """
    settings = current_app.config["SETTINGS"]
    match = LEADING_INT.match(request.args.get("limit", ""))
    limit = int(match.group(1)) if match else 0
    if limit <= 0:
        return settings.default_list_limit
    if settings.max_list_limit is not None:
        return min(limit, settings.max_list_limit)
    return limit


def _validation_error(e: ValidationError, message: str):
    return jsonify(error=message,
                   details=e.errors(include_url=False, include_context=False)), 400


def _update(model, report_id: int, schema, success_message: str):
    try:
        # 404 / 403 win over a malformed body
        ReportService.authorize(model, report_id, request.user, action="edit")
        update_fields = schema.model_validate(request.get_json(silent=True) or {}) \
                            .model_dump(exclude_unset=True)
        current_app.logger.debug(f"PATCH {model.__tablename__}/{report_id} → {update_fields}")
        ReportService.update_report(model, report_id, request.user, update_fields)
        return jsonify(message=success_message), 200
    except ValidationError as e:
        return _validation_error(e, "Invalid fields to update.")
    except ServiceError as e:
        return jsonify(error=str(e)), e.status_code
    except Exception:
        current_app.logger.exception(f"Error updating {model.__tablename__} report {report_id}")
        return jsonify(error="Internal Server Error"), 500


def _delete(model, report_id: int, success_message: str):
    try:
        ReportService.delete_report(model, report_id, request.user)
        return jsonify(message=success_message), 200
    except ServiceError as e:
        return jsonify(error=str(e)), e.status_code
    except Exception:
        current_app.logger.exception(f"Error deleting {model.__tablename__} report {report_id}")
        return jsonify(error="Internal Server Error"), 500


def _get(model, report_id: int):
    try:
        return jsonify(ReportService.get_report(model, report_id).to_dict()), 200
    except ServiceError as e:
        return jsonify(error=str(e)), e.status_code
    except Exception:
        current_app.logger.exception(f"Error fetching {model.__tablename__} report {report_id}")
        return jsonify(error="Internal Server Error"), 500


# ───────── create missing-person report ───────────────────────
@reports_bp.route("/missing-persons", methods=["POST"])
@auth_required
def create_missing_person():
    try:
        form = MissingPersonSchema.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return _validation_error(e, "Required fields are missing.")

    try:
        report_id = ReportService.create_person_report(request.user, form.model_dump())
        return jsonify(message="Missing person report registered successfully",
                       reportId=report_id), 201
    except ServiceError as e:
        return jsonify(error=str(e)), e.status_code
    except Exception:
        current_app.logger.exception("Error registering missing person")
        return jsonify(error="Internal Server Error"), 500


# ───────── list missing persons ───────────────────────────────
@reports_bp.route("/missing-persons", methods=["GET"])
def list_missing_persons():
    try:
        entries = FeedService.list_missing_persons(list_limit())
        return jsonify([entry.to_dict() for entry in entries]), 200
    except Exception:
        current_app.logger.exception("Error fetching missing persons list")
        return jsonify(error="Internal Server Error"), 500


@reports_bp.route("/missing-persons/<int:report_id>", methods=["GET"])
def get_missing_person(report_id):
    return _get(MissingPerson, report_id)


@reports_bp.route("/missing-persons/<int:report_id>", methods=["PATCH"])
@auth_required
def update_missing_person(report_id):
    return _update(MissingPerson, report_id, UpdateMissingPersonSchema,
                   "Report updated successfully")


@reports_bp.route("/missing-persons/<int:report_id>", methods=["DELETE"])
@auth_required
def delete_missing_person(report_id):
    return _delete(MissingPerson, report_id, "Report deleted successfully")


# ───────── create missing-animal report ───────────────────────
@reports_bp.route("/missing-animals", methods=["POST"])
@auth_required
def create_missing_animal():
    try:
        form = MissingAnimalSchema.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return _validation_error(
            e, "Missing required fields: animal_type, last_seen_at, last_seen_location are required.")

    try:
        report_id = ReportService.create_animal_report(request.user, form.model_dump())
        return jsonify(message="Missing animal report registered successfully",
                       reportId=report_id), 201
    except ServiceError as e:
        return jsonify(error=str(e)), e.status_code
    except Exception:
        current_app.logger.exception("Error registering missing animal")
        return jsonify(error="Internal Server Error"), 500


# ───────── list missing animals ───────────────────────────────
@reports_bp.route("/missing-animals", methods=["GET"])
def list_missing_animals():
    try:
        entries = FeedService.list_missing_animals(list_limit())
        return jsonify([entry.to_dict() for entry in entries]), 200
    except Exception:
        current_app.logger.exception("Error fetching missing animals list")
        return jsonify(error="Internal Server Error"), 500


@reports_bp.route("/missing-animals/<int:report_id>", methods=["GET"])
def get_missing_animal(report_id):
    return _get(MissingAnimal, report_id)


@reports_bp.route("/missing-animals/<int:report_id>", methods=["PATCH"])
@auth_required
def update_missing_animal(report_id):
    return _update(MissingAnimal, report_id, UpdateMissingAnimalSchema,
                   "Animal report updated successfully")


@reports_bp.route("/missing-animals/<int:report_id>", methods=["DELETE"])
@auth_required
def delete_missing_animal(report_id):
    return _delete(MissingAnimal, report_id, "Animal report deleted successfully")
