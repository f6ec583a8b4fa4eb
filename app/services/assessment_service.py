# app/services/assessment_service.py
from app.services.psychology_service import pick_primary_type

CAREER_AREAS = ("technical", "business", "healthcare", "education", "creative")
SKILLS = ("analytical", "communication", "technical", "leadership", "creative")

# Options are listed in CAREER_AREAS order for every question.
CAREER_QUESTIONS = [
    ("What type of work environment appeals to you most?", [
        "High-tech labs and research facilities",
        "Corporate offices and boardrooms",
        "Hospitals and clinics",
        "Schools and educational institutions",
        "Studios and creative spaces",
    ]),
    ("Which type of impact do you want to make?", [
        "Develop innovative technologies",
        "Build successful businesses",
        "Improve people's health and wellbeing",
        "Educate and inspire others",
        "Create beautiful and meaningful art",
    ]),
    ("What motivates you most in your work?", [
        "Solving complex technical problems",
        "Leading teams and making strategic decisions",
        "Caring for and helping people",
        "Sharing knowledge and mentoring",
        "Expressing creativity and originality",
    ]),
    ("Which skills do you want to develop further?", [
        "Programming, engineering, and data analysis",
        "Management, finance, and entrepreneurship",
        "Medical knowledge and patient care",
        "Teaching methods and curriculum design",
        "Artistic techniques and design thinking",
    ]),
    ("What type of challenges excite you?", [
        "Building systems and optimizing processes",
        "Growing markets and increasing profits",
        "Diagnosing and treating conditions",
        "Helping students overcome learning barriers",
        "Bringing imaginative ideas to life",
    ]),
]

# One question per skill, options ordered from strongest to weakest self-rating.
SKILL_QUESTIONS = [
    ("analytical", "How comfortable are you with analyzing data and identifying patterns?"),
    ("communication", "How would you rate your ability to explain complex ideas to others?"),
    ("technical", "How comfortable are you with technology and learning new software?"),
    ("leadership", "How do you feel about taking charge and leading a team?"),
    ("creative", "How would you describe your ability to come up with original ideas?"),
]
SKILL_OPTIONS = ["Very strong", "Good", "Average", "Needs improvement"]


class AssessmentError(Exception):
    pass


def _validate(answers, question_count, option_count):
    if len(answers) != question_count:
        raise AssessmentError(f"Please answer all {question_count} questions")

    for answer in answers:
        if answer not in range(option_count):
            raise AssessmentError(f"Invalid answer '{answer}'")


def score_career_assessment(answers) -> dict:
    _validate(answers, len(CAREER_QUESTIONS), len(CAREER_AREAS))

    scores = {area: 0 for area in CAREER_AREAS}
    for answer in answers:
        scores[CAREER_AREAS[answer]] += 1

    return {
        "scores": scores,
        "primary_area": pick_primary_type(scores),
    }


def score_skills_assessment(answers) -> dict:
    _validate(answers, len(SKILL_QUESTIONS), len(SKILL_OPTIONS))

    scores = {
        skill: 100 - 25 * answer
        for (skill, _), answer in zip(SKILL_QUESTIONS, answers)
    }

    return {
        "scores": scores,
        "strongest_skill": pick_primary_type(scores),
    }
