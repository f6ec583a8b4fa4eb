from app.extensions import db
from app.utils.timezone import get_local_time

QUESTION_TYPES = ("multiple_choice", "text")


class EvaluationQuestion(db.Model):
    __tablename__ = "school_evaluation_questions"

    id = db.Column(db.Integer, primary_key=True)

    # NULL school_id means a global question managed by admins
    school_id = db.Column(
        db.Integer,
        db.ForeignKey("schools.id", ondelete="CASCADE"),
        nullable=True
    )
    question_text = db.Column(db.Text, nullable=False)
    question_type = db.Column(db.String(30), nullable=False, default="multiple_choice")
    section = db.Column(db.String(50), nullable=False, default="psychology")
    options = db.Column(db.JSON)

    created_at = db.Column(db.DateTime, default=get_local_time)
    updated_at = db.Column(db.DateTime, default=get_local_time, onupdate=get_local_time)

    school = db.relationship("School", back_populates="questions")
    answers = db.relationship(
        "StudentCustomAnswer",
        back_populates="question",
        cascade="all, delete-orphan"
    )

    @property
    def is_global(self):
        return self.school_id is None


class StudentCustomAnswer(db.Model):
    __tablename__ = "student_custom_answers"

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(
        db.Integer,
        db.ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False
    )
    question_id = db.Column(
        db.Integer,
        db.ForeignKey("school_evaluation_questions.id", ondelete="CASCADE"),
        nullable=False
    )
    answer = db.Column(db.Text, nullable=False)
    answered_at = db.Column(db.DateTime, default=get_local_time)

    student = db.relationship("Student", back_populates="answers")
    question = db.relationship("EvaluationQuestion", back_populates="answers")
