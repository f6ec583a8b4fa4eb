# app/services/submission_service.py
import logging
from datetime import datetime

from app.extensions import db
from app.models.booking import Booking, ConsultationBooking
from app.models.submission import ContactSubmission, WaitlistEntry
from app.services.document_service import create_document, get_document, get_document_by_field, update_document
from app.utils.timezone import get_local_time

logger = logging.getLogger(__name__)

NEWSLETTER = "newsletter_subscriptions"


class SubmissionError(Exception):
    pass


def _require(**fields):
    missing = [name.replace("_", " ") for name, value in fields.items() if not value or not str(value).strip()]
    if missing:
        raise SubmissionError(f"Please fill in: {', '.join(missing)}")


def _clean(value):
    value = (value or "").strip()
    return value or None


def subscribe_newsletter(email: str, name: str = None) -> dict:
    email = (email or "").strip()
    if not email or "@" not in email:
        raise SubmissionError("Please enter a valid email address")

    existing = get_document_by_field(NEWSLETTER, "email", email)
    if existing:
        # resubscribing an existing address just reactivates it
        doc_id = existing["id"]
        update_document(NEWSLETTER, doc_id, {"status": "active"})
    else:
        doc_id = create_document(NEWSLETTER, {
            "email": email,
            "name": _clean(name),
            "status": "active",
            "subscribed_at": get_local_time(),
        })

    logger.info("Newsletter subscription for %s", email)
    return get_document(NEWSLETTER, doc_id)


def submit_contact(*, name, email, message, company=None, project_type=None) -> ContactSubmission:
    _require(name=name, email=email, message=message)

    submission = ContactSubmission(
        name=name.strip(),
        email=email.strip(),
        message=message.strip(),
        company=_clean(company),
        project_type=_clean(project_type)
    )
    db.session.add(submission)
    db.session.commit()
    return submission


def submit_consultation(*, name, email, phone=None, service=None, message=None,
                        preferred_date=None, preferred_time=None) -> ConsultationBooking:
    _require(name=name, email=email)

    booking = ConsultationBooking(
        name=name.strip(),
        email=email.strip(),
        phone=_clean(phone),
        service=_clean(service),
        message=_clean(message),
        preferred_date=_clean(preferred_date),
        preferred_time=_clean(preferred_time),
        status="pending"
    )
    db.session.add(booking)
    db.session.commit()
    logger.info("Consultation booking %s received", booking.id)
    return booking


def join_waitlist(*, name, email, phone=None, current_level=None, location=None, interests=None) -> WaitlistEntry:
    _require(name=name, email=email)

    entry = WaitlistEntry(
        name=name.strip(),
        email=email.strip(),
        phone=_clean(phone),
        current_level=_clean(current_level),
        location=_clean(location),
        interests=_clean(interests)
    )
    db.session.add(entry)
    db.session.commit()
    return entry


def _parse_date(value):
    value = value.strip()
    if not value:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise SubmissionError(f"Invalid date '{value}'")


def create_booking(*, booking_type, student_id=None, school_id=None, booking_date=None, notes=None) -> Booking:
    _require(booking_type=booking_type)

    if isinstance(booking_date, str):
        booking_date = _parse_date(booking_date)

    booking = Booking(
        booking_type=booking_type.strip(),
        student_id=student_id,
        school_id=school_id,
        booking_date=booking_date,
        notes=_clean(notes),
        status="pending"
    )
    db.session.add(booking)
    db.session.commit()
    return booking


def get_all_bookings():
    return Booking.query.order_by(Booking.created_at.desc(), Booking.id.desc()).all()


def get_consultation_bookings():
    return ConsultationBooking.query.order_by(ConsultationBooking.created_at.desc()).all()


def update_booking_status(booking_id: int, status: str):
    if status not in ("pending", "confirmed", "completed", "cancelled"):
        raise SubmissionError(f"Invalid status '{status}'")

    booking = Booking.query.get_or_404(booking_id)
    booking.status = status
    db.session.commit()
    return booking
