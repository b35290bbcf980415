from flask import Blueprint, jsonify, request

from app import container
from app.domain.authentications import UserLogin
from app.schemas.auth_schema import LoginSchema, RefreshTokenSchema
from app.schemas.validation import load_payload


auth_bp = Blueprint("authentications", __name__)


@auth_bp.route("/authentications", methods=["POST"])
def login():
    payload = load_payload(LoginSchema(), request.get_json(silent=True))

    new_auth = container.login_user_use_case().execute(UserLogin(**payload))

    return jsonify({
        "status": "success",
        "data": {
            "accessToken": new_auth.access_token,
            "refreshToken": new_auth.refresh_token,
        },
    }), 201


@auth_bp.route("/authentications", methods=["PUT"])
def refresh_token():
    payload = load_payload(RefreshTokenSchema(), request.get_json(silent=True))

    access_token = container.refresh_authentication_use_case().execute(
        payload["refresh_token"]
    )

    return jsonify({
        "status": "success",
        "data": {"accessToken": access_token},
    }), 200


@auth_bp.route("/authentications", methods=["DELETE"])
def logout():
    payload = load_payload(RefreshTokenSchema(), request.get_json(silent=True))

    container.logout_user_use_case().execute(payload["refresh_token"])

    return jsonify({"status": "success"}), 200
