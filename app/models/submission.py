from app.extensions import db
from app.utils.timezone import get_local_time


class ContactSubmission(db.Model):
    __tablename__ = "contact_submissions"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    company = db.Column(db.String(200))
    project_type = db.Column(db.String(100))
    message = db.Column(db.Text, nullable=False)

    created_at = db.Column(db.DateTime, default=get_local_time)
    updated_at = db.Column(db.DateTime, default=get_local_time, onupdate=get_local_time)


class NewsletterSubscription(db.Model):
    __tablename__ = "newsletter_subscriptions"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(200))
    status = db.Column(db.String(20), nullable=False, default="active")
    subscribed_at = db.Column(db.DateTime, default=get_local_time)

    created_at = db.Column(db.DateTime, default=get_local_time)
    updated_at = db.Column(db.DateTime, default=get_local_time, onupdate=get_local_time)


class WaitlistEntry(db.Model):
    __tablename__ = "waitlist_entries"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(30))
    current_level = db.Column(db.String(50))
    location = db.Column(db.String(120))
    interests = db.Column(db.Text)

    created_at = db.Column(db.DateTime, default=get_local_time)
