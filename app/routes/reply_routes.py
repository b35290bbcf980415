from dataclasses import asdict

from flask import Blueprint, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required

from app import container
from app.domain.replies import NewReply
from app.schemas.comment_schema import NewContentSchema
from app.schemas.validation import load_payload


reply_bp = Blueprint("replies", __name__)


@reply_bp.route("/threads/<thread_id>/comments/<comment_id>/replies", methods=["POST"])
@jwt_required()
def create_reply(thread_id, comment_id):
    owner = get_jwt_identity()
    payload = load_payload(NewContentSchema(), request.get_json(silent=True))

    added_reply = container.add_reply_use_case().execute(
        NewReply(
            content=payload["content"],
            thread_id=thread_id,
            comment_id=comment_id,
            owner=owner,
        )
    )

    return jsonify({
        "status": "success",
        "data": {"addedReply": asdict(added_reply)},
    }), 201


@reply_bp.route(
    "/threads/<thread_id>/comments/<comment_id>/replies/<reply_id>",
    methods=["DELETE"],
)
@jwt_required()
def delete_reply(thread_id, comment_id, reply_id):
    owner = get_jwt_identity()

    container.delete_reply_use_case().execute(thread_id, comment_id, reply_id, owner)

    return jsonify({"status": "success"}), 200
