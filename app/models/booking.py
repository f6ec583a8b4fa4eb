from app.extensions import db
from app.utils.timezone import get_local_time


class Booking(db.Model):
    __tablename__ = "bookings"

    id = db.Column(db.Integer, primary_key=True)
    booking_type = db.Column(db.String(50), nullable=False)
    student_id = db.Column(db.Integer, db.ForeignKey("students.id"), nullable=True)
    school_id = db.Column(db.Integer, db.ForeignKey("schools.id"), nullable=True)
    booking_date = db.Column(db.DateTime)
    status = db.Column(db.String(20), default="pending")
    notes = db.Column(db.Text)

    created_at = db.Column(db.DateTime, default=get_local_time)
    updated_at = db.Column(db.DateTime, default=get_local_time, onupdate=get_local_time)

    student = db.relationship("Student")
    school = db.relationship("School")


class ConsultationBooking(db.Model):
    """Booking requests sent from the public 'Book Your Session' form."""
    __tablename__ = "consultation_bookings"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(30))
    service = db.Column(db.String(100))
    preferred_date = db.Column(db.String(20))
    preferred_time = db.Column(db.String(20))
    message = db.Column(db.Text)
    status = db.Column(db.String(20), nullable=False, default="pending")

    created_at = db.Column(db.DateTime, default=get_local_time)
    updated_at = db.Column(db.DateTime, default=get_local_time, onupdate=get_local_time)
