# app/services/career_matcher_service.py
from app.data.careers import CAREERS

PERSONALITY_POINTS = 30
INTEREST_POINTS = 15
SKILL_POINTS = 20
MIN_SCORE = 20
MAX_RESULTS = 4


class CareerMatchError(Exception):
    pass


def _words(text):
    # words of 3 characters or fewer are too generic to match on
    return [w for w in (text or "").lower().split(" ") if len(w) > 3]


def score_career(career, personality_type, interests, skills=""):
    score = 0
    personality = personality_type.lower()

    if any(personality in fit.lower() for fit in career["personality_fit"]):
        score += PERSONALITY_POINTS

    career_text = " ".join(
        [career["title"], career["description"]] + career["skills_required"]
    ).lower()
    for word in _words(interests):
        if word in career_text:
            score += INTEREST_POINTS

    career_skills = " ".join(career["skills_required"]).lower()
    for word in _words(skills):
        if word in career_skills:
            score += SKILL_POINTS

    return min(100, score)


def match_careers(personality_type, interests, skills="", careers=None):
    """
    Rank careers against a student's profile.
    Returns at most four careers with a score above 20, best first.
    """
    if not personality_type or not interests:
        raise CareerMatchError("Please fill in your personality type and interests")

    careers = CAREERS if careers is None else careers

    scored = [
        {**career, "match_score": score_career(career, personality_type, interests, skills)}
        for career in careers
    ]

    # sorted() is stable, equal scores keep catalog order
    matches = sorted(
        (c for c in scored if c["match_score"] > MIN_SCORE),
        key=lambda c: c["match_score"],
        reverse=True
    )
    return matches[:MAX_RESULTS]
