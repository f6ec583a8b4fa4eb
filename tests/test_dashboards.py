import pytest

from app.models import Booking, School, Student, StudentProgress, StudentTestResult, User
from app.services.analytics_service import get_admin_stats, get_personality_distribution
from app.services.school_service import delete_school, get_school_overview, personality_distribution
from app.services.student_service import get_student_dashboard, update_student_profile
from app.services.university_service import ExplorationError, explore_university, get_explored_universities
from app.services.user_service import change_user_role, create_user, delete_user


def _add_result(db, student, ptype, recommendations=("Field A", "Field B")):
    result = StudentTestResult(
        student_id=student.id,
        test_type="psychology",
        personality_type=ptype,
        scores={},
        recommendations=list(recommendations)
    )
    db.session.add(result)
    db.session.commit()
    return result


# ----------------------------
# Student
# ----------------------------

def test_student_dashboard_uses_first_recommendation(db, student):
    _add_result(db, student, "social", ["Clinical Psychology", "Social Work"])
    data = get_student_dashboard(student)
    assert data["latest_result"].personality_type == "social"
    assert data["primary_career_field"] == "Clinical Psychology"


def test_update_profile_splits_tags(db, student):
    update_student_profile(student, education_level="SS3", interests="art, music ,", skills="")
    assert student.interests == ["art", "music"]
    assert student.skills == []
    assert student.education_level == "SS3"


def test_explore_university_progress(db, student, university):
    progress = explore_university(student_id=student.id, university_id=university.id, course_field="Law")
    assert progress.progress_percentage == 10
    assert progress.universities_explored == [university.id]

    for _ in range(12):
        progress = explore_university(student_id=student.id, university_id=university.id, course_field="Law")

    assert progress.progress_percentage == 100
    assert progress.universities_explored == [university.id]
    assert StudentProgress.query.filter_by(student_id=student.id).count() == 1
    assert get_explored_universities(student.id) == [university.id]


def test_explore_requires_career_field_and_valid_university(student, university):
    with pytest.raises(ExplorationError):
        explore_university(student_id=student.id, university_id=university.id, course_field=None)
    with pytest.raises(ExplorationError):
        explore_university(student_id=student.id, university_id=9999, course_field="Law")


def test_explore_route(db, client, login, student, university):
    login(student.user)

    response = client.post("/student/universities/explore", data={"university_id": university.id})
    assert response.status_code == 400

    _add_result(db, student, "analytical", ["Computer Science"])
    response = client.post("/student/universities/explore", data={"university_id": university.id})
    body = response.get_json()
    assert body["success"] is True
    assert body["progress_percentage"] == 10

    assert client.get("/student/universities").status_code == 200


def test_student_school_questions(db, client, login, student, school):
    from app.models import EvaluationQuestion

    question = EvaluationQuestion(
        school_id=school.id, question_text="Why us?", question_type="text", section="school"
    )
    db.session.add(question)
    db.session.commit()

    login(student.user)
    assert client.get("/student/school-questions").status_code == 200

    response = client.post("/student/school-questions", data={f"q_{question.id}": "Great teachers"})
    assert response.status_code == 302
    assert question.answers[0].answer == "Great teachers"


# ----------------------------
# School
# ----------------------------

def test_personality_distribution_counts_unknown():
    class R:
        def __init__(self, ptype):
            self.personality_type = ptype

    assert personality_distribution([R("social"), R(None), R("social")]) == {"social": 2, "Unknown": 1}


def test_school_overview(db, school, student):
    _add_result(db, student, "creative")
    student.test_completed = True
    db.session.commit()

    overview = get_school_overview(school)
    assert overview["total_students"] == 1
    assert overview["tests_completed"] == 1
    assert overview["personality_types"] == {"creative": 1}


def test_school_dashboard_and_student_creation(client, login, school):
    login(school.user)
    assert client.get("/school/").status_code == 200

    response = client.post("/school/students", data={
        "first_name": "Chi",
        "last_name": "Eze",
        "email": "chi@example.com",
        "password": "secret123",
    })
    assert response.status_code == 302

    created = Student.query.filter_by(email="chi@example.com").one()
    assert created.school_id == school.id
    assert created.user.role == "student"


def test_school_questions_are_scoped(db, client, login, school):
    other = School(school_name="Other", contact_email="o@example.com")
    db.session.add(other)
    db.session.commit()

    login(school.user)
    client.post("/school/questions", data={
        "question_text": "Favourite subject?",
        "question_type": "multiple_choice",
        "options": ["Maths", "English", ""],
    })
    question = school.questions[0]
    assert question.options == ["Maths", "English"]
    assert question.section == "school"

    question.school_id = other.id
    db.session.commit()
    client.post("/school/questions/delete", data={"question_id": question.id})
    assert db.session.get(type(question), question.id) is not None

    assert client.get("/school/answers").status_code == 200


def test_delete_school_with_students_is_refused(school, student):
    with pytest.raises(ValueError):
        delete_school(school.id)


# ----------------------------
# Admin
# ----------------------------

def test_admin_stats(db, admin_user, school, student):
    _add_result(db, student, "practical")
    db.session.add(Booking(booking_type="counselling", student_id=student.id))
    db.session.commit()

    stats = get_admin_stats()
    assert stats["total_students"] == 1
    assert stats["total_schools"] == 1
    assert stats["total_tests"] == 1
    assert stats["total_bookings"] == 1
    assert stats["new_students_this_month"] == 1
    assert get_personality_distribution() == {"practical": 1}
    assert get_personality_distribution(school_id=school.id + 1) == {}


def test_admin_pages_render(client, login, admin_user, student):
    login(admin_user)
    for url in ("/admin/", "/admin/users", "/admin/schools", "/admin/questions",
                "/admin/content", "/admin/bookings"):
        assert client.get(url).status_code == 200, url


def test_admin_csv_exports(client, login, admin_user, student):
    login(admin_user)

    response = client.get("/admin/students/export")
    assert response.mimetype == "text/csv"
    assert "ada@example.com" in response.get_data(as_text=True)

    response = client.get("/admin/schools/export")
    assert "Kings College" in response.get_data(as_text=True)


def test_last_admin_is_protected(admin_user):
    with pytest.raises(ValueError):
        change_user_role(admin_user.id, "user")

    other = create_user("second@example.com", "secret123", "user")
    with pytest.raises(ValueError):
        delete_user(other.id, other.id)
    with pytest.raises(ValueError):
        delete_user(admin_user.id, other.id)

    delete_user(other.id, admin_user.id)
    assert User.query.count() == 1


def test_admin_user_routes(client, login, admin_user):
    login(admin_user)

    client.post("/admin/users", data={"email": "mod@example.com", "password": "secret123", "role": "moderator"})
    user = User.query.filter_by(email="mod@example.com").one()

    response = client.post("/admin/users/role", data={"user_id": user.id, "role": "bogus"})
    assert response.status_code == 400

    response = client.post("/admin/users/role", data={"user_id": user.id, "role": "admin"})
    assert response.get_json()["success"] is True

    response = client.post("/admin/users/delete", data={"user_id": admin_user.id})
    assert response.status_code == 400


def test_admin_collection_api(client, login, admin_user, student):
    login(admin_user)

    response = client.get("/api/collections/users?role=student")
    docs = response.get_json()["documents"]
    assert [d["email"] for d in docs] == ["ada@example.com"]
    assert "password" not in docs[0]

    assert client.get("/api/collections/nope").status_code == 400


def test_explore_without_university_id(db, client, login, student):
    with pytest.raises(ExplorationError, match="Invalid university"):
        explore_university(student_id=student.id, university_id=None, course_field="Law")

    _add_result(db, student, "analytical", ["Computer Science"])
    login(student.user)
    response = client.post("/student/universities/explore", data={})
    assert response.status_code == 400
    assert response.get_json()["message"] == "Invalid university"


def test_deleting_student_account_removes_profile(db, client, login, admin_user, student):
    _add_result(db, student, "social")
    student_id = student.id
    user_id = student.user_id

    login(admin_user)
    response = client.post("/admin/users/delete", data={"user_id": user_id})
    assert response.get_json()["success"] is True

    assert db.session.get(User, user_id) is None
    assert db.session.get(Student, student_id) is None
    assert StudentTestResult.query.count() == 0
    assert get_admin_stats()["total_students"] == 0


def test_deleting_school_account_with_students_is_refused(db, admin_user, school, student):
    with pytest.raises(ValueError, match="registered students"):
        delete_user(school.user_id, admin_user.id)
    assert db.session.get(School, school.id) is not None


def test_deleting_school_account_removes_school(db, admin_user, school):
    school_id = school.id
    delete_user(school.user_id, admin_user.id)
    assert db.session.get(School, school_id) is None


def test_student_booking_request(client, login, student):
    login(student.user)

    response = client.post("/student/bookings", data={
        "booking_type": "career-counselling",
        "booking_date": "2026-11-02",
        "notes": "Before exams",
    })
    assert response.status_code == 302

    booking = Booking.query.one()
    assert booking.student_id == student.id
    assert booking.school_id == student.school_id
    assert booking.booking_date.day == 2
    assert booking.status == "pending"

    response = client.post("/student/bookings", data={
        "booking_type": "career-counselling",
        "booking_date": "next week",
    }, follow_redirects=True)
    assert b"Invalid date" in response.data
    assert Booking.query.count() == 1


def test_admin_bookings_page_lists_bookings(client, login, admin_user, student):
    from app.services.submission_service import create_booking

    create_booking(booking_type="assessment-review", student_id=student.id)
    login(admin_user)

    response = client.get("/admin/bookings")
    assert response.status_code == 200
    assert b"assessment-review" in response.data
    assert b"Ada Obi" in response.data
