from marshmallow import EXCLUDE, validate

from app.extensions.extensions import ma


class NewThreadSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    title = ma.Str(required=True, validate=validate.Length(min=1))
    body = ma.Str(required=True, validate=validate.Length(min=1))


class ReplyResponseSchema(ma.Schema):
    id = ma.Str()
    content = ma.Str()
    date = ma.DateTime()
    username = ma.Str()


class CommentResponseSchema(ma.Schema):
    id = ma.Str()
    username = ma.Str()
    date = ma.DateTime()
    content = ma.Str()
    replies = ma.List(ma.Nested(ReplyResponseSchema))


class ThreadDetailSchema(ma.Schema):
    id = ma.Str()
    title = ma.Str()
    body = ma.Str()
    date = ma.DateTime()
    username = ma.Str()
    comments = ma.List(ma.Nested(CommentResponseSchema))
