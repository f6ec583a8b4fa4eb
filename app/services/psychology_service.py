# app/services/psychology_service.py
import logging

from app.data.psychology_questions import PSYCHOLOGY_QUESTIONS
from app.extensions import db
from app.models.question import EvaluationQuestion, StudentCustomAnswer
from app.models.student import StudentTestResult
from app.utils.timezone import get_local_time

logger = logging.getLogger(__name__)

# Order matters: ties on the top tally go to the earliest category.
CATEGORIES = ("analytical", "creative", "social", "practical", "leadership")

# answer index -> category credited for question positions 0..4 (mod 5)
ROTATION = {
    0: ("analytical", "creative", "leadership", "social", "practical"),
    1: ("creative", "social", "practical", "analytical", "leadership"),
    2: ("social", "practical", "analytical", "leadership", "creative"),
    3: ("practical", "leadership", "creative", "analytical", "social"),
}

RECOMMENDATIONS = {
    "analytical": [
        "Computer Science and Software Engineering",
        "Data Science and Business Analytics",
        "Research and Development",
        "Financial Analysis and Investment Banking",
        "Mathematics and Statistics",
        "Engineering (Mechanical, Electrical, Chemical)",
    ],
    "creative": [
        "Graphic Design and Visual Arts",
        "Creative Writing and Content Creation",
        "Architecture and Urban Planning",
        "Marketing and Brand Strategy",
        "Film and Media Production",
        "Fashion Design and Styling",
    ],
    "social": [
        "Clinical Psychology and Counseling",
        "Social Work and Community Development",
        "Human Resources and Organizational Development",
        "Teaching and Educational Leadership",
        "Healthcare and Nursing",
        "Public Relations and Communications",
    ],
    "practical": [
        "Information Technology and System Administration",
        "Engineering Technology and Technical Support",
        "Agriculture and Environmental Science",
        "Construction and Building Management",
        "Medical Technology and Laboratory Sciences",
        "Supply Chain and Logistics Management",
    ],
    "leadership": [
        "Business Administration and Management",
        "Law and Legal Studies",
        "Political Science and Public Administration",
        "Entrepreneurship and Business Development",
        "Consulting and Strategy Advisory",
        "International Relations and Diplomacy",
    ],
}

DESCRIPTIONS = {
    "analytical": "You lean toward logical thinking, problem-solving and data-driven decisions.",
    "creative": "You thrive on innovation, artistic expression and unconventional ideas.",
    "social": "You are drawn to helping others, building relationships and social impact.",
    "practical": "You prefer hands-on work, tangible results and real-world solutions.",
    "leadership": "You take charge, inspire others and think strategically.",
}


class PsychologyTestError(Exception):
    pass


def tally_answers(answer_indices):
    """
    Count answers into the category buckets.
    `answer_indices` is the chosen option index per question, in question order.
    """
    scores = {category: 0 for category in CATEGORIES}

    for position, answer in enumerate(answer_indices):
        row = ROTATION.get(answer)
        if row is None:
            continue
        scores[row[position % 5]] += 1

    return scores


def pick_primary_type(scores):
    # max() keeps the first maximal key, in dict insertion order
    return max(scores, key=scores.get)


def get_recommendations(personality_type):
    return list(RECOMMENDATIONS.get(personality_type, []))


def get_description(personality_type):
    return DESCRIPTIONS.get(personality_type, "")


def score_answers(answer_indices) -> dict:
    scores = tally_answers(answer_indices)
    primary_type = pick_primary_type(scores)

    return {
        "scores": scores,
        "primary_type": primary_type,
        "description": get_description(primary_type),
        "recommendations": get_recommendations(primary_type),
    }


# ---------------------------------------------------
# Built-in comprehensive assessment
# ---------------------------------------------------

def get_builtin_questions():
    return [
        {"number": i + 1, "question": text, "options": options}
        for i, (text, options) in enumerate(PSYCHOLOGY_QUESTIONS)
    ]


def parse_answer_indices(raw_values, question_count):
    """
    Convert submitted form values into option indices.
    Every question must be answered.
    """
    if len(raw_values) != question_count:
        raise PsychologyTestError(
            f"Please answer all {question_count} questions"
        )

    indices = []
    for value in raw_values:
        try:
            indices.append(int(value))
        except (TypeError, ValueError):
            raise PsychologyTestError(f"Invalid answer '{value}'")
    return indices


def score_builtin_test(raw_values) -> dict:
    indices = parse_answer_indices(raw_values, len(PSYCHOLOGY_QUESTIONS))
    return score_answers(indices)


# ---------------------------------------------------
# Database-driven assessment (dashboard)
# ---------------------------------------------------

def get_global_psychology_questions():
    return (
        EvaluationQuestion.query
        .filter(EvaluationQuestion.school_id.is_(None))
        .filter_by(section="psychology")
        .order_by(EvaluationQuestion.created_at.asc(), EvaluationQuestion.id.asc())
        .all()
    )


def _answer_index(question, answer):
    options = question.options or []
    try:
        return options.index(answer)
    except ValueError:
        return None


def submit_student_test(*, student, answers: dict) -> StudentTestResult:
    """
    Score and persist a completed psychology test.

    `answers` maps question id -> chosen answer text. Questions are scored in
    their display order so the rotation table sees the same positions the
    student saw.
    """
    questions = get_global_psychology_questions()

    if not questions:
        raise PsychologyTestError(
            "No questions found. Please contact the administrator."
        )

    missing = [q.id for q in questions if not answers.get(q.id)]
    if missing:
        raise PsychologyTestError("Please answer every question before submitting")

    indices = [_answer_index(q, answers[q.id]) for q in questions]
    result = score_answers(indices)

    now = get_local_time()
    test_result = StudentTestResult(
        student_id=student.id,
        test_type="psychology",
        personality_type=result["primary_type"],
        scores=result["scores"],
        recommendations=result["recommendations"],
        completed_at=now
    )
    db.session.add(test_result)

    for q in questions:
        db.session.add(StudentCustomAnswer(
            student_id=student.id,
            question_id=q.id,
            answer=answers[q.id],
            answered_at=now
        ))

    student.personality_type = result["primary_type"]
    student.test_completed = True

    db.session.commit()
    logger.info(
        "Student %s completed psychology test: %s",
        student.id, result["primary_type"]
    )
    return test_result
