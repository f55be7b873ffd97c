from datetime import datetime

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class EbookRequest(db.Model):
    __tablename__ = "ebook_requests"
    __table_args__ = (
        db.UniqueConstraint("email", name="uq_ebook_requests_email"),
    )

    id         = db.Column(db.Integer, primary_key=True)
    name       = db.Column(db.String(100), nullable=False)
    email      = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now, index=True)
    email_sent = db.Column(db.Boolean, nullable=False, default=False)  # flipped by tasks.deliver_ebook

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "created_at": self.created_at.isoformat(),
            "email_sent": self.email_sent,
        }

    def __repr__(self):
        return f"<EbookRequest {self.id} {self.email}>"
