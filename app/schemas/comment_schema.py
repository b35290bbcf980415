from marshmallow import EXCLUDE, validate

from app.extensions.extensions import ma


class NewContentSchema(ma.Schema):
    """Body of a new comment or reply."""

    class Meta:
        unknown = EXCLUDE

    content = ma.Str(required=True, validate=validate.Length(min=1))
