# app/routes/main_routes.py
import logging

from flask import Blueprint, flash, redirect, render_template, request, url_for
from sqlalchemy.exc import SQLAlchemyError

from app.extensions import db
from app.services.assessment_service import CAREER_QUESTIONS, SKILL_OPTIONS, SKILL_QUESTIONS
from app.services.career_matcher_service import CareerMatchError, match_careers
from app.services.chatbot_service import GREETING, get_bot_response
from app.services.content_service import get_active_products, get_services
from app.services.psychology_service import PsychologyTestError, get_builtin_questions, score_builtin_test
from app.services.submission_service import (
    SubmissionError,
    join_waitlist,
    submit_consultation,
    submit_contact,
    subscribe_newsletter,
)
from app.services.university_service import get_finder_filters, search_universities

logger = logging.getLogger(__name__)

main_bp = Blueprint("main", __name__)


@main_bp.route("/")
def index():
    return render_template(
        "index.html",
        products=get_active_products(),
        services=get_services()
    )


# =========================
# FORMS
# =========================

def _handle_submission(action, success_message, failure_message):
    """
    Run a form submission and flash the outcome.
    Validation problems are shown as-is, storage failures are logged.
    """
    try:
        action()
        flash(success_message, "success")
    except SubmissionError as e:
        flash(str(e), "danger")
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Form submission failed")
        flash(failure_message, "danger")

    return redirect(request.referrer or url_for("main.index"))


@main_bp.route("/newsletter", methods=["POST"])
def newsletter():
    return _handle_submission(
        lambda: subscribe_newsletter(request.form.get("email"), request.form.get("name")),
        "Successfully subscribed to our newsletter!",
        "Failed to subscribe. Please try again."
    )


@main_bp.route("/contact", methods=["POST"])
def contact():
    form = request.form
    return _handle_submission(
        lambda: submit_contact(
            name=form.get("name"),
            email=form.get("email"),
            message=form.get("message"),
            company=form.get("company"),
            project_type=form.get("project_type")
        ),
        "Thanks for reaching out! We'll get back to you shortly.",
        "Failed to send your message. Please try again."
    )


@main_bp.route("/book", methods=["POST"])
def book_session():
    form = request.form
    return _handle_submission(
        lambda: submit_consultation(
            name=form.get("name"),
            email=form.get("email"),
            phone=form.get("phone"),
            service=form.get("service"),
            message=form.get("message"),
            preferred_date=form.get("preferred_date"),
            preferred_time=form.get("preferred_time")
        ),
        "Booking request submitted! We'll contact you within 24 hours to confirm.",
        "Failed to submit your booking. Please try again."
    )


@main_bp.route("/waitlist", methods=["POST"])
def waitlist():
    form = request.form
    return _handle_submission(
        lambda: join_waitlist(
            name=form.get("name"),
            email=form.get("email"),
            phone=form.get("phone"),
            current_level=form.get("current_level"),
            location=form.get("location"),
            interests=form.get("interests")
        ),
        "Welcome to the Career Guru waitlist!",
        "Failed to join the waitlist. Please try again."
    )


# =========================
# PSYCHOLOGY TEST (public)
# =========================

@main_bp.route("/psychology-test", methods=["GET", "POST"])
def psychology_test():
    questions = get_builtin_questions()

    if request.method == "POST":
        raw = [request.form.get(f"q{q['number']}") for q in questions]
        raw = [value for value in raw if value is not None]
        try:
            result = score_builtin_test(raw)
        except PsychologyTestError as e:
            flash(str(e), "danger")
            return render_template("psychology_test.html", questions=questions), 400

        flash("Psychology assessment completed! Check your results below.", "success")
        return render_template("psychology_result.html", result=result)

    return render_template("psychology_test.html", questions=questions)


# =========================
# CAREER GURU
# =========================

@main_bp.route("/career-guru", methods=["GET", "POST"])
def career_guru():
    matches = None
    form = request.form

    if request.method == "POST":
        try:
            matches = match_careers(
                form.get("personality_type"),
                form.get("interests"),
                form.get("skills", "")
            )
            flash(f"Found {len(matches)} career matches for you!", "success")
        except CareerMatchError as e:
            flash(str(e), "danger")

    args = request.args
    return render_template(
        "career_guru.html",
        matches=matches,
        universities=search_universities(
            args.get("search", ""),
            state=args.get("state") or None,
            uni_type=args.get("type") or None,
            program=args.get("program") or None
        ),
        filters=get_finder_filters(),
        career_questions=CAREER_QUESTIONS,
        skill_questions=SKILL_QUESTIONS,
        skill_options=SKILL_OPTIONS,
        greeting=GREETING,
        bot_reply=get_bot_response(args["message"]) if args.get("message") else None
    )
