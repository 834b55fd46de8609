from __future__ import annotations

from datetime import datetime, timezone

from ..extensions import db


def utcnow():
    return datetime.now(timezone.utc)


class Suggestion(db.Model):
    """Latest AI-generated suggestion for a user (replaced on every generation)."""

    __tablename__ = "suggestions"

    id = db.Column("suggestion_id", db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.user_id"), nullable=False, index=True)
    content = db.Column("suggestion_content", db.Text, nullable=False)
    created_at = db.Column(
        "suggestion_date",
        db.DateTime(timezone=True),
        default=utcnow,
        server_default=db.func.now(),
        nullable=False,
    )

    user = db.relationship("User", backref=db.backref("suggestions", cascade="all, delete-orphan"))
