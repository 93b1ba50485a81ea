from flask import Blueprint, request, jsonify, current_app
from pydantic import ValidationError
from controllers.auth_decorators import auth_required
from models.sighting_model import AnimalSighting, PersonSighting
from services.sightings_service import SightingService
from services.feed_service import FeedService
from services.exceptions import ServiceError
from schemas.sighting_schema import SightingSchema

sightings_bp = Blueprint("sightings", __name__)


def _create(model, parent_id: int, success_message: str):
    try:
        form = SightingSchema.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        return jsonify(error="Missing required fields: sighting_at and sighting_location are required.",
                       details=e.errors(include_url=False, include_context=False)), 400

    try:
        sighting_id = SightingService.create_sighting(model, parent_id, request.user, form.model_dump())
        return jsonify(message=success_message, sightingId=sighting_id), 201
    except ServiceError as e:
        return jsonify(error=str(e)), e.status_code
    except Exception:
        current_app.logger.exception(f"Error registering {model.__tablename__} entry")
        return jsonify(error="Internal Server Error"), 500


def _list(model, parent_id: int):
    try:
        return jsonify(SightingService.list_sightings(model, parent_id)), 200
    except Exception:
        current_app.logger.exception(f"Error fetching {model.__tablename__}")
        return jsonify(error="Internal Server Error"), 500


# ───────── person sightings ──────────────────────────────────
@sightings_bp.route("/missing-persons/<int:missing_person_id>/sightings", methods=["POST"])
@auth_required
def create_person_sighting(missing_person_id):
    return _create(PersonSighting, missing_person_id, "Sighting report registered successfully")


@sightings_bp.route("/missing-persons/<int:missing_person_id>/sightings", methods=["GET"])
def list_person_sightings(missing_person_id):
    return _list(PersonSighting, missing_person_id)


# ───────── animal sightings ──────────────────────────────────
@sightings_bp.route("/missing-animals/<int:missing_animal_id>/sightings", methods=["POST"])
@auth_required
def create_animal_sighting(missing_animal_id):
    return _create(AnimalSighting, missing_animal_id, "Sighting report for animal registered successfully")


@sightings_bp.route("/missing-animals/<int:missing_animal_id>/sightings", methods=["GET"])
def list_animal_sightings(missing_animal_id):
    return _list(AnimalSighting, missing_animal_id)


# ───────── map: every sighting of every report ──────────────
@sightings_bp.route("/sightings/all", methods=["GET"])
def all_sightings():
    # unbounded unless the caller asks for a per-kind limit
    limit = request.args.get("limit", type=int)
    if limit is not None and limit <= 0:
        limit = None
    try:
        pins = FeedService.sightings_map(limit)
        return jsonify([pin.to_dict() for pin in pins]), 200
    except Exception:
        current_app.logger.exception("Error fetching all sightings")
        return jsonify(error="Internal Server Error"), 500
