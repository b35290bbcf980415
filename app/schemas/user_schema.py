from marshmallow import EXCLUDE, validate

from app.extensions.extensions import ma


class RegisterUserSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    username = ma.Str(
        required=True,
        validate=[
            validate.Length(min=1, max=50),
            validate.Regexp(r"^\w+$", error="username contains restricted characters"),
        ],
    )
    password = ma.Str(required=True, validate=validate.Length(min=1))
    fullname = ma.Str(required=True, validate=validate.Length(min=1))
