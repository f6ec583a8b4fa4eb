import pytest

from app.models import ConsultationBooking, ContactSubmission, NewsletterSubscription, WaitlistEntry
from app.services.content_service import create_product, create_service, get_active_products, update_product
from app.services.document_service import update_document
from app.services.submission_service import (
    SubmissionError,
    create_booking,
    subscribe_newsletter,
    update_booking_status,
)


def test_newsletter_requires_email(app):
    with pytest.raises(SubmissionError):
        subscribe_newsletter("not-an-email")


def test_newsletter_resubscribe_reactivates(db):
    first = subscribe_newsletter("reader@example.com", "Reader")
    assert first["status"] == "active"
    assert first["subscribed_at"] is not None
    update_document("newsletter_subscriptions", first["id"], {"status": "unsubscribed"})

    again = subscribe_newsletter("reader@example.com")
    assert again["id"] == first["id"]
    assert again["status"] == "active"
    assert again["name"] == "Reader"
    assert NewsletterSubscription.query.count() == 1


def test_booking_status_transitions(db, student):
    booking = create_booking(booking_type="counselling", student_id=student.id)
    assert booking.status == "pending"

    update_booking_status(booking.id, "confirmed")
    assert booking.status == "confirmed"

    with pytest.raises(SubmissionError):
        update_booking_status(booking.id, "lost")


def test_public_forms_persist(client):
    response = client.post("/newsletter", data={"email": "fan@example.com"})
    assert response.status_code == 302

    client.post("/contact", data={"name": "Ife", "email": "ife@example.com", "message": "Hi"})
    client.post("/book", data={"name": "Ife", "email": "ife@example.com", "service": "career-guidance"})
    client.post("/waitlist", data={"name": "Ife", "email": "ife@example.com", "location": "Abuja"})

    assert NewsletterSubscription.query.filter_by(email="fan@example.com").count() == 1
    assert ContactSubmission.query.count() == 1
    assert ConsultationBooking.query.one().status == "pending"
    assert WaitlistEntry.query.one().location == "Abuja"


def test_public_form_validation_message(client):
    response = client.post("/contact", data={"name": "Ife"}, follow_redirects=True)
    assert b"Please fill in: email, message" in response.data
    assert ContactSubmission.query.count() == 0


def test_admin_booking_status_route(client, login, admin_user, student):
    booking = create_booking(booking_type="session", student_id=student.id)
    login(admin_user)

    response = client.post("/admin/bookings/status", data={"booking_id": booking.id, "status": "completed"})
    assert response.get_json()["success"] is True

    response = client.post("/admin/bookings/status", data={"booking_id": booking.id, "status": "??"})
    assert response.status_code == 400


# ----------------------------
# Site content
# ----------------------------

def test_products_are_ordered_and_filtered(app):
    first = create_product(title="Career Guru")
    create_product(title="Hidden", status="inactive")
    second = create_product(title="School Suite")

    assert second["order_position"] > first["order_position"]
    assert [p["title"] for p in get_active_products()] == ["Career Guru", "School Suite"]

    with pytest.raises(ValueError):
        update_product(first["id"], title="  ")


def test_homepage_lists_content(client):
    create_service(title="Psychology Assessment")
    create_product(title="Career Guru")

    response = client.get("/")
    assert response.status_code == 200
    assert b"Psychology Assessment" in response.data
    assert b"Career Guru" in response.data


def test_admin_content_routes(client, login, admin_user):
    login(admin_user)

    client.post("/admin/content/products", data={"title": "Career Guru", "status": "active"})
    product = get_active_products()[0]

    client.post(f"/admin/content/products/{product['id']}", data={"title": "Career Guru Pro"})
    assert get_active_products()[0]["title"] == "Career Guru Pro"

    response = client.post("/admin/content/products/999", data={"title": "Ghost"}, follow_redirects=True)
    assert b"not found" in response.data

    client.post(f"/admin/content/products/{product['id']}/delete")
    assert get_active_products() == []

    response = client.post("/admin/content/services/999/delete", follow_redirects=True)
    assert response.status_code == 200


def test_admin_stats_count_subscribers_and_consultations(client, admin_user):
    from app.services.analytics_service import get_admin_stats

    subscribe_newsletter("one@example.com")
    subscribe_newsletter("two@example.com")
    client.post("/book", data={"name": "Ife", "email": "ife@example.com"})

    stats = get_admin_stats()
    assert stats["newsletter_subscribers"] == 2
    assert stats["pending_consultations"] == 1
