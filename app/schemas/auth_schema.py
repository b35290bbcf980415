from marshmallow import EXCLUDE, validate

from app.extensions.extensions import ma


class LoginSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    username = ma.Str(required=True, validate=validate.Length(min=1))
    password = ma.Str(required=True, validate=validate.Length(min=1))


class RefreshTokenSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    refresh_token = ma.Str(
        required=True,
        data_key="refreshToken",
        validate=validate.Length(min=1),
    )
