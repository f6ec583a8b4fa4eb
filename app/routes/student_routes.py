# app/routes/student_routes.py
from flask import Blueprint, flash, g, jsonify, redirect, render_template, request, url_for

from app.services.psychology_service import (
    PsychologyTestError,
    get_description,
    get_global_psychology_questions,
    submit_student_test,
)
from app.services.question_service import get_school_questions, save_custom_answers
from app.services.submission_service import SubmissionError, create_booking
from app.services.student_service import get_student_dashboard, get_student_for_user, update_student_profile
from app.services.university_service import (
    ExplorationError,
    explore_university,
    get_explored_universities,
    get_universities,
)
from app.utils.decorators import login_required, role_required

student_bp = Blueprint("student", __name__)


def _current_student():
    student = get_student_for_user(g.user.id)
    if student is None:
        flash("Your student profile could not be found", "danger")
    return student


@student_bp.route("/")
@login_required
@role_required("student")
def dashboard():
    student = _current_student()
    if student is None:
        return render_template("dashboard/pending.html")

    data = get_student_dashboard(student)
    return render_template(
        "student/dashboard.html",
        description=get_description(student.personality_type),
        **data
    )


@student_bp.route("/profile", methods=["POST"])
@login_required
@role_required("student")
def update_profile():
    student = _current_student()
    if student is None:
        return redirect(url_for("student.dashboard"))

    update_student_profile(
        student,
        education_level=request.form.get("education_level"),
        interests=request.form.get("interests"),
        skills=request.form.get("skills")
    )
    flash("Profile updated", "success")
    return redirect(url_for("student.dashboard"))


@student_bp.route("/bookings", methods=["POST"])
@login_required
@role_required("student")
def request_booking():
    student = _current_student()
    if student is None:
        return redirect(url_for("student.dashboard"))

    try:
        create_booking(
            booking_type=request.form.get("booking_type"),
            student_id=student.id,
            school_id=student.school_id,
            booking_date=request.form.get("booking_date", ""),
            notes=request.form.get("notes")
        )
        flash("Booking request sent", "success")
    except SubmissionError as e:
        flash(str(e), "danger")
    return redirect(url_for("student.dashboard"))


# =========================
# PSYCHOLOGY TEST
# =========================

@student_bp.route("/psychology-test", methods=["GET", "POST"])
@login_required
@role_required("student")
def psychology_test():
    student = _current_student()
    if student is None:
        return redirect(url_for("student.dashboard"))

    questions = get_global_psychology_questions()

    if request.method == "POST":
        answers = {
            q.id: request.form.get(f"q_{q.id}")
            for q in questions
        }
        try:
            result = submit_student_test(student=student, answers=answers)
        except PsychologyTestError as e:
            flash(str(e), "danger")
            return render_template("student/psychology_test.html", questions=questions), 400

        flash("Psychology test completed! Check your results below.", "success")
        return render_template(
            "student/test_result.html",
            result=result,
            description=get_description(result.personality_type),
            universities=get_universities(),
            explored=get_explored_universities(student.id)
        )

    if not questions:
        flash("No questions found. Please contact the administrator.", "warning")
    return render_template("student/psychology_test.html", questions=questions)


# =========================
# SCHOOL QUESTIONS
# =========================

@student_bp.route("/school-questions", methods=["GET", "POST"])
@login_required
@role_required("student")
def school_questions():
    student = _current_student()
    if student is None or not student.school_id:
        flash("You are not linked to a school", "warning")
        return redirect(url_for("student.dashboard"))

    questions = get_school_questions(student.school_id)

    if request.method == "POST":
        answers = {q.id: request.form.get(f"q_{q.id}", "") for q in questions}
        try:
            saved = save_custom_answers(student=student, answers=answers)
            flash(f"{saved} answers saved", "success")
            return redirect(url_for("student.dashboard"))
        except ValueError as e:
            flash(str(e), "danger")

    return render_template("student/school_questions.html", questions=questions)


# =========================
# UNIVERSITIES
# =========================

@student_bp.route("/universities")
@login_required
@role_required("student")
def universities():
    student = _current_student()
    if student is None:
        return redirect(url_for("student.dashboard"))

    data = get_student_dashboard(student)
    return render_template(
        "student/universities.html",
        universities=get_universities(),
        explored=get_explored_universities(student.id),
        course_field=data["primary_career_field"]
    )


@student_bp.route("/universities/explore", methods=["POST"])
@login_required
@role_required("student")
def explore():
    student = _current_student()
    if student is None:
        return jsonify({"success": False, "message": "Student profile not found"}), 404

    university_id = request.form.get("university_id", type=int)
    course_field = get_student_dashboard(student)["primary_career_field"]

    try:
        progress = explore_university(
            student_id=student.id,
            university_id=university_id,
            course_field=course_field
        )
    except ExplorationError as e:
        return jsonify({"success": False, "message": str(e)}), 400

    return jsonify({
        "success": True,
        "progress_percentage": progress.progress_percentage,
        "universities_explored": progress.universities_explored
    })
