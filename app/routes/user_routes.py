from dataclasses import asdict

from flask import Blueprint, jsonify, request

from app import container
from app.domain.users import RegisterUser
from app.schemas.user_schema import RegisterUserSchema
from app.schemas.validation import load_payload


user_bp = Blueprint("users", __name__)


@user_bp.route("/users", methods=["POST"])
def register():
    payload = load_payload(RegisterUserSchema(), request.get_json(silent=True))

    added_user = container.add_user_use_case().execute(RegisterUser(**payload))

    return jsonify({
        "status": "success",
        "data": {"addedUser": asdict(added_user)},
    }), 201
