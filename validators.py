# validators.py
from marshmallow import Schema, fields, validate, pre_load, ValidationError


class EbookRequestSchema(Schema):
    name = fields.Str(
        required=True,
        validate=[
            validate.Length(min=1, error="Name is required"),
            validate.Length(max=100, error="Name too long"),
        ],
        error_messages={
            "required": "Name is required",
            "null": "Name is required",
            "invalid": "Name is required",
        },
    )
    email = fields.Email(
        required=True,
        validate=validate.Length(max=255, error="Email too long"),
        error_messages={
            "required": "Email is required",
            "null": "Email is required",
            "invalid": "Invalid email format",
        },
    )

    @pre_load
    def normalize(self, data, **kwargs):
        # emails are matched case-insensitively, so they are stored lowercased
        data = dict(data)
        if isinstance(data.get("name"), str):
            data["name"] = data["name"].strip()
        if isinstance(data.get("email"), str):
            data["email"] = data["email"].strip().lower()
        return data


_schema = EbookRequestSchema()


def validate_request(name, email):
    """Validate a raw form submission.

    Returns ``{"name": ..., "email": ...}`` with surrounding whitespace
    removed and the email lowercased.  Raises ``ValidationError`` if
    either field breaks its length or format rule.
    """
    return _schema.load({"name": name, "email": email})


def first_error(err):
    """Pick a single human-readable message out of a ``ValidationError``."""
    messages = err.messages
    if isinstance(messages, dict):
        for field in ("name", "email"):
            if field in messages:
                found = messages[field]
                return found[0] if isinstance(found, list) else str(found)
        messages = list(messages.values())
    if isinstance(messages, list) and messages:
        return str(messages[0])
    return str(messages)


__all__ = ["EbookRequestSchema", "ValidationError", "validate_request", "first_error"]
