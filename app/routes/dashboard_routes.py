from flask import Blueprint, g, redirect, render_template, url_for

from app.utils.decorators import login_required

dashboard_bp = Blueprint("dashboard", __name__)

ROLE_HOMES = {
    "student": "student.dashboard",
    "school": "school.dashboard",
    "admin": "admin.dashboard",
}


@dashboard_bp.route("/dashboard")
@login_required
def dashboard():
    endpoint = ROLE_HOMES.get(g.user.role)
    if endpoint is None:
        return render_template("dashboard/pending.html")
    return redirect(url_for(endpoint))
