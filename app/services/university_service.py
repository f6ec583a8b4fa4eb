# app/services/university_service.py
import logging

from app.data.universities import UNIVERSITIES
from app.extensions import db
from app.models.school import SchoolOption
from app.models.student import StudentProgress

logger = logging.getLogger(__name__)

EXPLORE_STEP = 10


class ExplorationError(Exception):
    pass


# ----------------------------
# SCHOOL OPTIONS (database)
# ----------------------------

def get_school_options():
    return (
        SchoolOption.query
        .order_by(SchoolOption.school_type, SchoolOption.school_name)
        .all()
    )


def get_universities():
    return (
        SchoolOption.query
        .filter_by(school_type="University")
        .order_by(SchoolOption.school_name)
        .all()
    )


def add_school_option(school_name: str, school_type: str, location: str = None):
    if not school_name or not school_type:
        raise ValueError("School name and type are required")

    option = SchoolOption(
        school_name=school_name.strip(),
        school_type=school_type.strip(),
        location=(location or "").strip() or None
    )
    db.session.add(option)
    db.session.commit()
    return option


# ----------------------------
# UNIVERSITY FINDER (catalog)
# ----------------------------

def search_universities(search="", state=None, uni_type=None, program=None):
    term = (search or "").lower()

    results = []
    for uni in UNIVERSITIES:
        haystack = " ".join([uni["name"], uni["location"]] + uni["programs"]).lower()
        if term and term not in haystack:
            continue
        if state and uni["state"] != state:
            continue
        if uni_type and uni["type"] != uni_type:
            continue
        if program and program not in uni["programs"]:
            continue
        results.append(uni)
    return results


def get_finder_filters():
    return {
        "states": sorted({u["state"] for u in UNIVERSITIES}),
        "types": sorted({u["type"] for u in UNIVERSITIES}),
        "programs": sorted({p for u in UNIVERSITIES for p in u["programs"]}),
    }


# ----------------------------
# PROGRESS TRACKING
# ----------------------------

def get_explored_universities(student_id: int):
    rows = StudentProgress.query.filter_by(student_id=student_id).all()

    explored = []
    for row in rows:
        for uni_id in row.universities_explored or []:
            if uni_id not in explored:
                explored.append(uni_id)
    return explored


def explore_university(*, student_id: int, university_id: int, course_field: str) -> StudentProgress:
    """
    Record that a student looked at a university for a career field.
    The first visit starts progress at 10%, each new one adds 10% up to 100%.
    """
    if not course_field:
        raise ExplorationError("Complete the psychology test to get a career field first")

    option = db.session.get(SchoolOption, university_id) if university_id is not None else None
    if option is None:
        raise ExplorationError("Invalid university")

    progress = StudentProgress.query.filter_by(
        student_id=student_id,
        course_field=course_field
    ).first()

    if progress is None:
        progress = StudentProgress(
            student_id=student_id,
            course_field=course_field,
            universities_explored=[university_id],
            progress_percentage=EXPLORE_STEP
        )
        db.session.add(progress)
    else:
        explored = list(progress.universities_explored or [])
        if university_id not in explored:
            explored.append(university_id)
        # reassign so the JSON column is flagged dirty
        progress.universities_explored = explored
        progress.progress_percentage = min(
            100, (progress.progress_percentage or 0) + EXPLORE_STEP
        )

    db.session.commit()
    logger.info("Student %s explored university %s", student_id, university_id)
    return progress
