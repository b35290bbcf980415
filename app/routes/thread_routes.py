from dataclasses import asdict

from flask import Blueprint, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required

from app import container
from app.domain.threads import NewThread
from app.schemas.thread_schema import NewThreadSchema, ThreadDetailSchema
from app.schemas.validation import load_payload


thread_bp = Blueprint("threads", __name__)


@thread_bp.route("/threads", methods=["POST"])
@jwt_required()
def create_thread():
    owner = get_jwt_identity()
    payload = load_payload(NewThreadSchema(), request.get_json(silent=True))

    added_thread = container.add_thread_use_case().execute(
        NewThread(owner=owner, **payload)
    )

    return jsonify({
        "status": "success",
        "data": {"addedThread": asdict(added_thread)},
    }), 201


@thread_bp.route("/threads/<thread_id>", methods=["GET"])
def get_thread(thread_id):
    thread = container.get_thread_use_case().execute(thread_id)

    return jsonify({
        "status": "success",
        "data": {"thread": ThreadDetailSchema().dump(thread)},
    }), 200
