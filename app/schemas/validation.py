from marshmallow import ValidationError

from app.exceptions import InvariantError


def _format_errors(messages: dict) -> str:
    parts = []
    for field, errors in messages.items():
        if isinstance(errors, (list, tuple)):
            errors = " ".join(str(error) for error in errors)
        parts.append(f"{field}: {errors}")
    return "; ".join(parts)


def load_payload(schema, data):
    if not isinstance(data, dict):
        raise InvariantError("Invalid JSON body")

    try:
        return schema.load(data)
    except ValidationError as e:
        raise InvariantError(_format_errors(e.messages)) from e
