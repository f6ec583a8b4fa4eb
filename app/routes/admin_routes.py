# app/routes/admin_routes.py
import logging

from flask import (Response, jsonify, Blueprint,
                   render_template, request,
                   redirect, url_for, flash, g)
from app.models.user import ROLES
from app.utils.decorators import login_required, role_required
from app.services.analytics_service import get_admin_overview
from app.services.user_service import (
    get_all_users,
    create_user,
    delete_user,
    change_user_role,
    reset_user_password,
)
from app.services.auth_service import RegistrationError
from app.services.school_service import (
    add_school,
    delete_school,
    get_all_schools,
    get_schools_as_csv,
)
from app.services.student_service import (
    delete_student,
    get_students_as_csv,
)
from app.services.question_service import (
    QuestionImportError,
    create_question,
    delete_question,
    get_global_questions,
    import_questions_excel,
)
from app.services.content_service import (
    create_product,
    create_service,
    delete_product,
    delete_service,
    get_products,
    get_services,
    update_product,
    update_service,
)
from app.services.submission_service import (
    SubmissionError,
    get_all_bookings,
    get_consultation_bookings,
    update_booking_status,
)
from app.services.document_service import DocumentStoreError
from app.services.university_service import add_school_option, get_school_options

logger = logging.getLogger(__name__)

admin_bp = Blueprint("admin", __name__)


@admin_bp.route("/")
@login_required
@role_required("admin")
def dashboard():
    return render_template("admin/dashboard.html", **get_admin_overview())


# =========================
# USERS
# =========================

@admin_bp.route("/users", methods=["GET", "POST"])
@login_required
@role_required("admin")
def manage_users():
    if request.method == "POST":
        email = request.form.get("email")
        role = request.form.get("role")
        try:
            create_user(email, request.form.get("password"), role)
            flash(f"User {email} ({role}) created successfully", "success")
        except (ValueError, RegistrationError) as e:
            flash(str(e), "danger")
        return redirect(url_for("admin.manage_users"))

    return render_template("admin/users.html", users=get_all_users(), roles=ROLES)


@admin_bp.route("/users/role", methods=["POST"])
@login_required
@role_required("admin")
def update_role():
    user_id = request.form.get("user_id", type=int)
    try:
        change_user_role(user_id, request.form.get("role"))
        return jsonify({"success": True, "message": "Role updated successfully."})
    except ValueError as e:
        return jsonify({"success": False, "message": str(e)}), 400


@admin_bp.route("/users/delete", methods=["POST"])
@login_required
@role_required("admin")
def remove_user():
    user_id = request.form.get("user_id", type=int)
    try:
        delete_user(user_id, g.user.id)
        return jsonify({"success": True})
    except ValueError as e:
        return jsonify({"success": False, "message": str(e)}), 400


@admin_bp.route("/users/reset-password", methods=["POST"])
@login_required
@role_required("admin")
def admin_reset_password():
    user_id = request.form.get("user_id", type=int)
    try:
        reset_user_password(user_id, request.form.get("new_password"))
        flash("Password reset successfully", "success")
    except RegistrationError as e:
        flash(str(e), "danger")
    return redirect(url_for("admin.manage_users"))


# =========================
# SCHOOLS & STUDENTS
# =========================

@admin_bp.route("/schools", methods=["GET", "POST"])
@login_required
@role_required("admin")
def manage_schools():
    if request.method == "POST":
        try:
            add_school(
                request.form.get("school_name"),
                request.form.get("contact_email"),
                phone=request.form.get("phone"),
                address=request.form.get("address")
            )
            flash("School added successfully", "success")
        except ValueError as e:
            flash(str(e), "danger")
        return redirect(url_for("admin.manage_schools"))

    return render_template(
        "admin/schools.html",
        schools=get_all_schools(),
        school_options=get_school_options()
    )


@admin_bp.route("/schools/delete", methods=["POST"])
@login_required
@role_required("admin")
def remove_school():
    try:
        delete_school(request.form.get("school_id", type=int))
        flash("School deleted successfully", "success")
    except ValueError as e:
        flash(str(e), "danger")
    return redirect(url_for("admin.manage_schools"))


@admin_bp.route("/school-options", methods=["POST"])
@login_required
@role_required("admin")
def create_school_option():
    try:
        add_school_option(
            request.form.get("school_name"),
            request.form.get("school_type"),
            request.form.get("location")
        )
        flash("Institution added", "success")
    except ValueError as e:
        flash(str(e), "danger")
    return redirect(url_for("admin.manage_schools"))


@admin_bp.route("/students/delete", methods=["POST"])
@login_required
@role_required("admin")
def remove_student():
    delete_student(request.form.get("student_id", type=int))
    flash("Student deleted", "success")
    return redirect(url_for("admin.dashboard"))


@admin_bp.route("/schools/export")
@login_required
@role_required("admin")
def export_schools():
    return Response(
        get_schools_as_csv().getvalue(),
        mimetype="text/csv",
        headers={"Content-Disposition": "attachment;filename=schools.csv"}
    )


@admin_bp.route("/students/export")
@login_required
@role_required("admin")
def export_students():
    return Response(
        get_students_as_csv().getvalue(),
        mimetype="text/csv",
        headers={"Content-Disposition": "attachment;filename=students.csv"}
    )


# =========================
# QUESTIONS
# =========================

@admin_bp.route("/questions", methods=["GET", "POST"])
@login_required
@role_required("admin")
def manage_questions():
    if request.method == "POST":
        try:
            create_question(
                question_text=request.form.get("question_text"),
                question_type=request.form.get("question_type", "multiple_choice"),
                section=request.form.get("section", "psychology"),
                options=request.form.getlist("options")
            )
            flash("Question created successfully", "success")
        except ValueError as e:
            flash(str(e), "danger")
        return redirect(url_for("admin.manage_questions"))

    return render_template("admin/questions.html", questions=get_global_questions())


@admin_bp.route("/questions/delete", methods=["POST"])
@login_required
@role_required("admin")
def remove_question():
    try:
        delete_question(request.form.get("question_id", type=int))
        flash("Question deleted successfully", "success")
    except ValueError as e:
        flash(str(e), "danger")
    return redirect(url_for("admin.manage_questions"))


@admin_bp.route("/questions/import", methods=["POST"])
@login_required
@role_required("admin")
def import_questions():
    upload = request.files.get("file")
    if not upload or not upload.filename:
        flash("Please choose an Excel file", "danger")
        return redirect(url_for("admin.manage_questions"))

    try:
        created = import_questions_excel(file_bytes=upload.read())
        flash(f"{created} questions imported", "success")
    except QuestionImportError as e:
        logger.warning("Question import rejected: %s", e)
        flash(str(e), "danger")
    return redirect(url_for("admin.manage_questions"))


# =========================
# CONTENT
# =========================

@admin_bp.route("/content")
@login_required
@role_required("admin")
def manage_content():
    return render_template(
        "admin/content.html",
        products=get_products(),
        services=get_services()
    )


@admin_bp.route("/content/products", methods=["POST"])
@admin_bp.route("/content/products/<int:product_id>", methods=["POST"])
@login_required
@role_required("admin")
def save_product(product_id=None):
    fields = {
        "title": request.form.get("title"),
        "subtitle": request.form.get("subtitle"),
        "description": request.form.get("description"),
        "image_url": request.form.get("image_url"),
        "status": request.form.get("status"),
    }
    try:
        if product_id is None:
            create_product(**fields)
            flash("Product created successfully", "success")
        else:
            update_product(product_id, **fields)
            flash("Product updated successfully", "success")
    except (ValueError, DocumentStoreError) as e:
        flash(str(e), "danger")
    return redirect(url_for("admin.manage_content"))


@admin_bp.route("/content/products/<int:product_id>/delete", methods=["POST"])
@login_required
@role_required("admin")
def remove_product(product_id):
    try:
        delete_product(product_id)
        flash("Product deleted successfully", "success")
    except DocumentStoreError as e:
        flash(str(e), "danger")
    return redirect(url_for("admin.manage_content"))


@admin_bp.route("/content/services", methods=["POST"])
@admin_bp.route("/content/services/<int:service_id>", methods=["POST"])
@login_required
@role_required("admin")
def save_service(service_id=None):
    fields = {
        "title": request.form.get("title"),
        "description": request.form.get("description"),
        "icon": request.form.get("icon"),
    }
    try:
        if service_id is None:
            create_service(**fields)
            flash("Service created successfully", "success")
        else:
            update_service(service_id, **fields)
            flash("Service updated successfully", "success")
    except (ValueError, DocumentStoreError) as e:
        flash(str(e), "danger")
    return redirect(url_for("admin.manage_content"))


@admin_bp.route("/content/services/<int:service_id>/delete", methods=["POST"])
@login_required
@role_required("admin")
def remove_service(service_id):
    try:
        delete_service(service_id)
        flash("Service deleted successfully", "success")
    except DocumentStoreError as e:
        flash(str(e), "danger")
    return redirect(url_for("admin.manage_content"))


# =========================
# BOOKINGS
# =========================

@admin_bp.route("/bookings")
@login_required
@role_required("admin")
def bookings():
    return render_template(
        "admin/bookings.html",
        bookings=get_all_bookings(),
        consultations=get_consultation_bookings()
    )


@admin_bp.route("/bookings/status", methods=["POST"])
@login_required
@role_required("admin")
def booking_status():
    try:
        update_booking_status(
            request.form.get("booking_id", type=int),
            request.form.get("status")
        )
        return jsonify({"success": True})
    except SubmissionError as e:
        return jsonify({"success": False, "message": str(e)}), 400
