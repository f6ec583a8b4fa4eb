from io import StringIO

import pandas as pd

from app.extensions import db
from app.models.student import Student, StudentProgress, StudentTestResult


def get_student_for_user(user_id: int):
    return Student.query.filter_by(user_id=user_id).first()


def get_all_students():
    return Student.query.order_by(Student.created_at.desc(), Student.id.desc()).all()


def get_student_dashboard(student: Student) -> dict:
    results = (
        StudentTestResult.query
        .filter_by(student_id=student.id)
        .order_by(StudentTestResult.completed_at.desc())
        .all()
    )
    progress = StudentProgress.query.filter_by(student_id=student.id).all()

    latest = results[0] if results else None
    return {
        "student": student,
        "test_results": results,
        "progress": progress,
        "latest_result": latest,
        "primary_career_field": (
            latest.recommendations[0]
            if latest and latest.recommendations else None
        ),
    }


def update_student_profile(student: Student, *, education_level=None, interests=None, skills=None):
    if education_level is not None:
        student.education_level = education_level.strip() or None
    if interests is not None:
        student.interests = _split_tags(interests)
    if skills is not None:
        student.skills = _split_tags(skills)
    db.session.commit()
    return student


def _split_tags(raw):
    return [t.strip() for t in raw.split(",") if t.strip()]


def delete_student(student_id: int):
    student = Student.query.get_or_404(student_id)
    db.session.delete(student)
    db.session.commit()


def get_students_as_csv():
    students = get_all_students()

    data = [
        {
            "ID": s.id,
            "First Name": s.first_name,
            "Last Name": s.last_name,
            "Email": s.email,
            "School": s.school.school_name if s.school else "",
            "Personality Type": s.personality_type or "",
            "Test Completed": "Yes" if s.test_completed else "No"
        }
        for s in students
    ]

    df = pd.DataFrame(data, columns=[
        "ID", "First Name", "Last Name", "Email",
        "School", "Personality Type", "Test Completed"
    ])
    buffer = StringIO()
    df.to_csv(buffer, index=False)
    buffer.seek(0)
    return buffer
