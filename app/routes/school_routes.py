# app/routes/school_routes.py
from flask import Blueprint, abort, flash, g, redirect, render_template, request, url_for

from app.services.auth_service import RegistrationError
from app.services.question_service import (
    create_question,
    delete_question,
    get_school_questions,
    get_student_answers_for_school,
)
from app.services.school_service import create_student_for_school, get_school_for_user, get_school_overview
from app.utils.decorators import login_required, role_required

school_bp = Blueprint("school", __name__)


def _current_school():
    school = get_school_for_user(g.user.id)
    if school is None:
        abort(404)
    return school


@school_bp.route("/")
@login_required
@role_required("school")
def dashboard():
    school = _current_school()
    return render_template(
        "school/dashboard.html",
        school=school,
        **get_school_overview(school)
    )


@school_bp.route("/students", methods=["POST"])
@login_required
@role_required("school")
def create_student():
    school = _current_school()
    try:
        create_student_for_school(
            school=school,
            first_name=request.form.get("first_name"),
            last_name=request.form.get("last_name"),
            email=request.form.get("email"),
            password=request.form.get("password")
        )
        flash("Student created successfully", "success")
    except (ValueError, RegistrationError) as e:
        flash(str(e) or "Failed to create student", "danger")
    return redirect(url_for("school.dashboard"))


# =========================
# CUSTOM QUESTIONS
# =========================

@school_bp.route("/questions", methods=["GET", "POST"])
@login_required
@role_required("school")
def manage_questions():
    school = _current_school()

    if request.method == "POST":
        try:
            create_question(
                question_text=request.form.get("question_text"),
                question_type=request.form.get("question_type", "multiple_choice"),
                section=request.form.get("section", "school"),
                options=request.form.getlist("options"),
                school_id=school.id
            )
            flash("Question created successfully", "success")
        except ValueError as e:
            flash(str(e), "danger")
        return redirect(url_for("school.manage_questions"))

    return render_template(
        "school/questions.html",
        school=school,
        questions=get_school_questions(school.id)
    )


@school_bp.route("/questions/delete", methods=["POST"])
@login_required
@role_required("school")
def remove_question():
    school = _current_school()
    question_id = request.form.get("question_id", type=int)
    try:
        delete_question(question_id, school_id=school.id)
        flash("Question deleted successfully", "success")
    except ValueError as e:
        flash(str(e), "danger")
    return redirect(url_for("school.manage_questions"))


@school_bp.route("/answers")
@login_required
@role_required("school")
def student_answers():
    school = _current_school()
    return render_template(
        "school/answers.html",
        school=school,
        answers=get_student_answers_for_school(school.id)
    )
