from academy import db
from academy.models.base import BaseModel


class RejectionDetail(BaseModel):
    __tablename__ = "rejection_detail"

    rejection_type = db.Column(db.String(50), nullable=False)
    entity_type = db.Column(db.String(50), nullable=False)
    entity_id = db.Column(db.Integer, nullable=False)
    reason = db.Column(db.String(255), nullable=False)
    detailed_reason = db.Column(db.Text, nullable=True)

    rejected_by = db.Column(
        db.Integer, db.ForeignKey("users.id"), nullable=False, index=True
    )
    rejected_at = db.Column(db.DateTime, nullable=False)
