# errors.py
"""
Failures raised while handling an ebook request.

Input shape problems use marshmallow's ``ValidationError`` directly;
the two classes below cover what can go wrong once input is valid.
"""


class DuplicateEmailError(Exception):
    """An ebook request already exists for this email address."""

    def __init__(self, email):
        super().__init__(f"ebook already requested for {email}")
        self.email = email


class StorageError(Exception):
    """The database rejected or failed a write."""
