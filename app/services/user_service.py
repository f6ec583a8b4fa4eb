from app.extensions import db
from app.models.user import ROLES, User
from app.services.auth_service import create_account, validate_password


def create_user(email, password, role):
    if role not in ROLES:
        raise ValueError(f"Unknown role '{role}'")

    validate_password(password)
    user = create_account(email, password, role)
    db.session.commit()
    return user


def get_all_users():
    return User.query.order_by(User.created_at.desc(), User.id.desc()).all()


def change_user_role(user_id, role):
    if role not in ROLES:
        raise ValueError(f"Unknown role '{role}'")

    user = User.query.get_or_404(user_id)
    if user.role == "admin" and role != "admin" and _admin_count() <= 1:
        raise ValueError("Cannot demote the last administrator in the system.")

    user.role = role
    db.session.commit()
    return user


def reset_user_password(user_id, new_password):
    validate_password(new_password)
    user = User.query.get_or_404(user_id)
    user.set_password(new_password)
    db.session.commit()


def delete_user(user_id, current_admin_id):
    """
    Deletes a user and their student or school profile.
    Self-deletion and removing a school that still has students are refused.
    """
    if int(user_id) == current_admin_id:
        raise ValueError("You cannot delete your own account.")

    user = User.query.get_or_404(user_id)

    if user.role == "admin" and _admin_count() <= 1:
        raise ValueError("Cannot delete the last administrator in the system.")

    if user.school is not None and user.school.students:
        raise ValueError("Cannot delete school with registered students")

    for profile in (user.student, user.school):
        if profile is not None:
            db.session.delete(profile)

    db.session.delete(user)
    db.session.commit()
    return True


def _admin_count():
    return User.query.filter_by(role="admin").count()
