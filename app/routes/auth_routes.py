from flask import Blueprint, render_template, request, redirect, url_for, session, flash, g
from app.extensions import db
from app.models.user import User
from app.services.auth_service import RegistrationError, authenticate_user, register_user
from app.services.school_service import get_all_schools

auth_bp = Blueprint("auth", __name__)


@auth_bp.before_app_request
def load_logged_in_user():
    user_id = session.get("user_id")

    if user_id is None:
        g.user = None
        return

    user = db.session.get(User, user_id)

    # Deleted accounts lose their session on the next request
    if user is None:
        session.clear()
        g.user = None
        if request.endpoint not in ("auth.login", "static"):
            return redirect(url_for("auth.login"))
    else:
        g.user = user


def _safe_next(target):
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return None


@auth_bp.route("/auth", methods=["GET", "POST"])
@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    if g.user is not None:
        return redirect(url_for("dashboard.dashboard"))

    if request.method == "POST":
        email = request.form.get("email")
        password = request.form.get("password")

        user = authenticate_user(email, password)

        if not user:
            flash("Invalid email or password", "danger")
            return render_template("auth/login.html", schools=get_all_schools()), 401

        session.clear()
        session["user_id"] = user.id
        session["email"] = user.email
        session["role"] = user.role

        flash("Welcome back! You have been successfully signed in.", "success")
        return redirect(_safe_next(request.args.get("next")) or url_for("dashboard.dashboard"))

    return render_template("auth/login.html", schools=get_all_schools())


@auth_bp.route("/signup", methods=["POST"])
def signup():
    form = request.form
    try:
        register_user(
            email=form.get("email"),
            password=form.get("password"),
            confirm_password=form.get("confirm_password"),
            role=form.get("role", "student"),
            first_name=form.get("first_name"),
            last_name=form.get("last_name"),
            school_name=form.get("school_name"),
            contact_email=form.get("contact_email"),
            school_id=form.get("school_id")
        )
    except RegistrationError as e:
        flash(str(e), "danger")
        return render_template("auth/login.html", schools=get_all_schools(), signup=True), 400

    flash("Account created! You can now sign in.", "success")
    return redirect(url_for("auth.login"))


@auth_bp.route("/logout")
def logout():
    session.clear()
    flash("Signed out successfully", "success")
    return redirect(url_for("auth.login"))
