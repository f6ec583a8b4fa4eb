from app.extensions import db
from app.utils.timezone import get_local_time


class School(db.Model):
    __tablename__ = "schools"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)
    school_name = db.Column(db.String(200), nullable=False)
    contact_email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(30))
    address = db.Column(db.String(255))

    created_at = db.Column(db.DateTime, default=get_local_time)
    updated_at = db.Column(db.DateTime, default=get_local_time, onupdate=get_local_time)

    user = db.relationship("User", back_populates="school")
    students = db.relationship("Student", back_populates="school")
    questions = db.relationship(
        "EvaluationQuestion",
        back_populates="school",
        cascade="all, delete-orphan"
    )


class SchoolOption(db.Model):
    """Catalog of institutions students can pick at signup or explore."""
    __tablename__ = "school_options"

    id = db.Column(db.Integer, primary_key=True)
    school_name = db.Column(db.String(200), nullable=False)
    school_type = db.Column(db.String(50), nullable=False)
    location = db.Column(db.String(120))
    created_at = db.Column(db.DateTime, default=get_local_time)
