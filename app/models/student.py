from app.extensions import db
from app.utils.timezone import get_local_time


class Student(db.Model):
    __tablename__ = "students"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)
    school_id = db.Column(db.Integer, db.ForeignKey("schools.id"), nullable=True)

    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    student_number = db.Column(db.String(50))
    education_level = db.Column(db.String(50))
    interests = db.Column(db.JSON, default=list)
    skills = db.Column(db.JSON, default=list)

    personality_type = db.Column(db.String(30))
    test_completed = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime, default=get_local_time)
    updated_at = db.Column(db.DateTime, default=get_local_time, onupdate=get_local_time)

    user = db.relationship("User", back_populates="student")
    school = db.relationship("School", back_populates="students")
    test_results = db.relationship(
        "StudentTestResult",
        back_populates="student",
        cascade="all, delete-orphan",
        order_by="StudentTestResult.completed_at.desc()"
    )
    progress = db.relationship(
        "StudentProgress",
        back_populates="student",
        cascade="all, delete-orphan"
    )
    answers = db.relationship(
        "StudentCustomAnswer",
        back_populates="student",
        cascade="all, delete-orphan"
    )

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"


class StudentTestResult(db.Model):
    __tablename__ = "student_test_results"

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(
        db.Integer,
        db.ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False
    )
    test_type = db.Column(db.String(50), nullable=False)
    personality_type = db.Column(db.String(30))
    scores = db.Column(db.JSON)
    recommendations = db.Column(db.JSON)
    completed_at = db.Column(db.DateTime, default=get_local_time)

    student = db.relationship("Student", back_populates="test_results")


class StudentProgress(db.Model):
    __tablename__ = "student_progress"

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(
        db.Integer,
        db.ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False
    )
    course_field = db.Column(db.String(200), nullable=False)
    progress_percentage = db.Column(db.Integer, default=0)
    universities_explored = db.Column(db.JSON, default=list)

    created_at = db.Column(db.DateTime, default=get_local_time)
    updated_at = db.Column(db.DateTime, default=get_local_time, onupdate=get_local_time)

    student = db.relationship("Student", back_populates="progress")
