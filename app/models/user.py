from app.extensions import db
from app.utils.timezone import get_local_time
from werkzeug.security import generate_password_hash, check_password_hash

ROLES = ("admin", "moderator", "user", "student", "school")


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255))
    role = db.Column(db.String(20), nullable=False, default="student")
    created_at = db.Column(db.DateTime, default=get_local_time)

    student = db.relationship("Student", back_populates="user", uselist=False)
    school = db.relationship("School", back_populates="user", uselist=False)

    def set_password(self, raw_password):
        self.password = generate_password_hash(raw_password)

    def check_password(self, raw_password):
        return check_password_hash(self.password, raw_password)

    def has_role(self, role):
        return self.role == role
