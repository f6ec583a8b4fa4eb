import logging

from app.extensions import db
from app.models.school import School
from app.models.student import Student
from app.models.user import User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
SIGNUP_ROLES = ("student", "school")


class RegistrationError(Exception):
    pass


def authenticate_user(email: str, password: str):
    """
    Authenticate user using email & password.
    Returns User object if valid, else None.
    """
    if not email or not password:
        return None

    user = User.query.filter_by(email=email.strip().lower()).first()
    if not user:
        return None

    if not user.check_password(password):
        return None

    return user


def validate_password(password, confirm_password=None):
    if confirm_password is not None and password != confirm_password:
        raise RegistrationError("Passwords do not match")

    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise RegistrationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )


def create_account(email: str, password: str, role: str) -> User:
    """Adds the login record only; the caller commits."""
    email = (email or "").strip().lower()
    if not email or "@" not in email:
        raise RegistrationError("A valid email address is required")

    if User.query.filter_by(email=email).first():
        raise RegistrationError("An account with this email already exists")

    user = User(email=email, role=role)
    user.set_password(password)
    db.session.add(user)
    db.session.flush()
    return user


def _resolve_school(school_id):
    if not school_id:
        return None
    try:
        school = db.session.get(School, int(school_id))
    except (TypeError, ValueError):
        school = None
    if school is None:
        raise RegistrationError("Please choose a valid school")
    return school


def register_user(
    *,
    email,
    password,
    confirm_password,
    role,
    first_name=None,
    last_name=None,
    school_name=None,
    contact_email=None,
    school_id=None
) -> User:
    """
    Sign up a student or a school and create the matching profile.
    """
    if role not in SIGNUP_ROLES:
        raise RegistrationError("Please choose a valid account type")

    validate_password(password, confirm_password)

    if role == "student" and (not first_name or not last_name):
        raise RegistrationError("First and last name are required")
    if role == "school" and not school_name:
        raise RegistrationError("School name is required")

    school = _resolve_school(school_id) if role == "student" else None

    user = create_account(email, password, role)

    if role == "student":
        db.session.add(Student(
            user_id=user.id,
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            email=user.email,
            school_id=school.id if school else None
        ))
    else:
        db.session.add(School(
            user_id=user.id,
            school_name=school_name.strip(),
            contact_email=(contact_email or "").strip() or user.email
        ))

    db.session.commit()
    logger.info("Registered %s account %s", role, user.email)
    return user


def has_role(user_id: int, role: str) -> bool:
    user = db.session.get(User, user_id)
    return bool(user and user.has_role(role))
