# app/services/analytics_service.py
from sqlalchemy import func

from app.extensions import db
from app.models.booking import Booking
from app.models.school import School
from app.models.student import Student, StudentProgress, StudentTestResult
from app.services.document_service import count_documents
from app.utils.timezone import start_of_month


def get_personality_distribution(school_id=None):
    query = db.session.query(
        StudentTestResult.personality_type,
        func.count(StudentTestResult.id)
    )
    if school_id is not None:
        query = query.join(Student).filter(Student.school_id == school_id)

    rows = query.group_by(StudentTestResult.personality_type).all()
    return {(ptype or "Unknown"): count for ptype, count in rows}


def get_admin_stats():
    month_start = start_of_month()

    return {
        "total_students": Student.query.count(),
        "total_schools": School.query.count(),
        "total_tests": StudentTestResult.query.count(),
        "total_bookings": Booking.query.count(),
        "pending_consultations": count_documents("consultation_bookings", [("status", "==", "pending")]),
        "newsletter_subscribers": count_documents("newsletter_subscriptions", [("status", "==", "active")]),
        "new_students_this_month": Student.query.filter(Student.created_at >= month_start).count(),
        "new_schools_this_month": School.query.filter(School.created_at >= month_start).count(),
        "tests_completed": Student.query.filter_by(test_completed=True).count(),
    }


def get_admin_overview():
    return {
        "stats": get_admin_stats(),
        "personality_types": get_personality_distribution(),
        "students": Student.query.order_by(Student.created_at.desc()).all(),
        "schools": School.query.order_by(School.created_at.desc()).all(),
        "test_results": (
            StudentTestResult.query
            .order_by(StudentTestResult.completed_at.desc())
            .all()
        ),
        "bookings": Booking.query.order_by(Booking.created_at.desc()).all(),
        "progress": StudentProgress.query.all(),
    }
