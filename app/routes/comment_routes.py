from dataclasses import asdict

from flask import Blueprint, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required

from app import container
from app.domain.comments import NewComment
from app.schemas.comment_schema import NewContentSchema
from app.schemas.validation import load_payload


comment_bp = Blueprint("comments", __name__)


@comment_bp.route("/threads/<thread_id>/comments", methods=["POST"])
@jwt_required()
def create_comment(thread_id):
    owner = get_jwt_identity()
    payload = load_payload(NewContentSchema(), request.get_json(silent=True))

    added_comment = container.add_comment_use_case().execute(
        NewComment(content=payload["content"], thread_id=thread_id, owner=owner)
    )

    return jsonify({
        "status": "success",
        "data": {"addedComment": asdict(added_comment)},
    }), 201


@comment_bp.route("/threads/<thread_id>/comments/<comment_id>", methods=["DELETE"])
@jwt_required()
def delete_comment(thread_id, comment_id):
    owner = get_jwt_identity()

    container.delete_comment_use_case().execute(thread_id, comment_id, owner)

    return jsonify({"status": "success"}), 200
