import logging
from collections import Counter
from io import StringIO

import pandas as pd

from app.extensions import db
from app.models.school import School
from app.models.student import Student, StudentProgress, StudentTestResult
from app.services.auth_service import create_account, validate_password

logger = logging.getLogger(__name__)


def get_all_schools():
    return School.query.order_by(School.created_at.desc(), School.id.desc()).all()


def get_school_for_user(user_id: int):
    return School.query.filter_by(user_id=user_id).first()


def add_school(school_name: str, contact_email: str, phone: str = None, address: str = None):
    if not school_name or not contact_email:
        raise ValueError("School name and contact email are required")

    school = School(
        school_name=school_name.strip(),
        contact_email=contact_email.strip(),
        phone=phone,
        address=address
    )
    db.session.add(school)
    db.session.commit()
    return school


def delete_school(school_id: int):
    school = School.query.get_or_404(school_id)

    if Student.query.filter_by(school_id=school.id).count() > 0:
        raise ValueError("Cannot delete school with registered students")

    db.session.delete(school)
    db.session.commit()


# ----------------------------
# SCHOOL DASHBOARD
# ----------------------------

def get_school_students(school_id: int):
    return (
        Student.query
        .filter_by(school_id=school_id)
        .order_by(Student.created_at.desc(), Student.id.desc())
        .all()
    )


def get_school_test_results(school_id: int):
    return (
        StudentTestResult.query
        .join(Student)
        .filter(Student.school_id == school_id)
        .order_by(StudentTestResult.completed_at.desc())
        .all()
    )


def get_school_progress(school_id: int):
    return (
        StudentProgress.query
        .join(Student)
        .filter(Student.school_id == school_id)
        .all()
    )


def personality_distribution(results):
    counts = Counter(r.personality_type or "Unknown" for r in results)
    return dict(counts)


def get_school_overview(school: School) -> dict:
    students = get_school_students(school.id)
    results = get_school_test_results(school.id)
    progress = get_school_progress(school.id)

    return {
        "students": students,
        "test_results": results,
        "progress": progress,
        "total_students": len(students),
        "tests_completed": sum(1 for s in students if s.test_completed),
        "personality_types": personality_distribution(results),
    }


def create_student_for_school(*, school: School, first_name, last_name, email, password) -> Student:
    if not first_name or not last_name or not email or not password:
        raise ValueError("Please fill in all fields")

    validate_password(password)
    user = create_account(email, password, "student")

    student = Student(
        user_id=user.id,
        first_name=first_name.strip(),
        last_name=last_name.strip(),
        email=user.email,
        school_id=school.id
    )
    db.session.add(student)
    db.session.commit()

    logger.info("School %s created student %s", school.id, student.id)
    return student


# ----------------------------
# CSV EXPORT
# ----------------------------

def get_schools_as_csv():
    schools = get_all_schools()

    data = [
        {
            "ID": s.id,
            "School Name": s.school_name,
            "Contact Email": s.contact_email,
            "Phone": s.phone or "",
            "Students": len(s.students)
        }
        for s in schools
    ]

    df = pd.DataFrame(data, columns=["ID", "School Name", "Contact Email", "Phone", "Students"])

    csv_buffer = StringIO()
    df.to_csv(csv_buffer, index=False)
    csv_buffer.seek(0)

    return csv_buffer
