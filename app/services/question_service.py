# app/services/question_service.py
import logging
import re
from io import BytesIO

import pandas as pd

from app.extensions import db
from app.models.question import QUESTION_TYPES, EvaluationQuestion, StudentCustomAnswer
from app.models.student import Student

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {"QUESTION", "SECTION"}
MIN_OPTIONS = 2


class QuestionImportError(Exception):
    pass


# ----------------------------
# READ
# ----------------------------

def get_global_questions():
    return (
        EvaluationQuestion.query
        .filter(EvaluationQuestion.school_id.is_(None))
        .order_by(EvaluationQuestion.created_at.desc(), EvaluationQuestion.id.desc())
        .all()
    )


def get_school_questions(school_id: int):
    return (
        EvaluationQuestion.query
        .filter_by(school_id=school_id)
        .order_by(EvaluationQuestion.created_at.desc(), EvaluationQuestion.id.desc())
        .all()
    )


def get_student_answers_for_school(school_id: int):
    """Answers given by a school's students to that school's own questions."""
    return (
        StudentCustomAnswer.query
        .join(EvaluationQuestion)
        .join(Student, StudentCustomAnswer.student_id == Student.id)
        .filter(EvaluationQuestion.school_id == school_id)
        .filter(Student.school_id == school_id)
        .order_by(StudentCustomAnswer.answered_at.desc())
        .all()
    )


# ----------------------------
# CREATE / DELETE
# ----------------------------

def clean_options(options):
    return [o.strip() for o in (options or []) if o and o.strip()]


def create_question(*, question_text, question_type="multiple_choice", section="psychology",
                    options=None, school_id=None) -> EvaluationQuestion:
    if not question_text or not question_text.strip():
        raise ValueError("Question text is required")

    if question_type not in QUESTION_TYPES:
        raise ValueError(f"Unknown question type '{question_type}'")

    valid_options = None
    if question_type == "multiple_choice":
        valid_options = clean_options(options)
        if len(valid_options) < MIN_OPTIONS:
            raise ValueError("Please provide at least 2 options")

    question = EvaluationQuestion(
        question_text=question_text.strip(),
        question_type=question_type,
        section=(section or "psychology").strip(),
        options=valid_options,
        school_id=school_id
    )
    db.session.add(question)
    db.session.commit()
    return question


def delete_question(question_id: int, school_id=None):
    """
    Delete a question. A school may only delete its own questions,
    admins (school_id=None) only global ones.
    """
    question = EvaluationQuestion.query.get_or_404(question_id)

    if question.school_id != school_id:
        raise ValueError("You cannot delete this question")

    db.session.delete(question)
    db.session.commit()


def save_custom_answers(*, student: Student, answers: dict):
    """Store a student's answers to their school's custom questions."""
    if not student.school_id:
        raise ValueError("You are not linked to a school")

    questions = {q.id: q for q in get_school_questions(student.school_id)}
    saved = 0

    for question_id, answer in answers.items():
        question = questions.get(question_id)
        if question is None or not answer or not answer.strip():
            continue
        db.session.add(StudentCustomAnswer(
            student_id=student.id,
            question_id=question.id,
            answer=answer.strip()
        ))
        saved += 1

    if not saved:
        raise ValueError("Please answer at least one question")

    db.session.commit()
    return saved


# ---------------------------------------------------
# Excel import (global questions)
# ---------------------------------------------------

def _normalize(text: str) -> str:
    text = text.strip().lower()
    text = re.sub(r"\s+", " ", text)
    return text


def _find_header_row(raw_df):
    for i in range(min(40, len(raw_df))):
        row_values = {
            str(v).strip().upper()
            for v in raw_df.iloc[i].values
            if pd.notna(v)
        }
        if REQUIRED_COLUMNS.issubset(row_values):
            return i
    return None


def validate_questions_excel(*, file_bytes: bytes) -> dict:
    try:
        raw_df = pd.read_excel(BytesIO(file_bytes), header=None)
    except Exception:
        return _fail("FILE_INVALID", "Unable to read Excel file")

    header_row_idx = _find_header_row(raw_df)
    if header_row_idx is None:
        return _fail(
            "HEADER_NOT_FOUND",
            "Required columns QUESTION and SECTION not found within first 40 rows"
        )

    df = pd.read_excel(BytesIO(file_bytes), header=header_row_idx)
    df.columns = [str(c).strip().upper() for c in df.columns]
    option_columns = [c for c in df.columns if c.startswith("OPTION")]

    errors = []
    rows = []
    for idx, row in df.iterrows():
        excel_row = header_row_idx + idx + 2

        text = row.get("QUESTION")
        if pd.isna(text) or not str(text).strip():
            errors.append(_row_err("QUESTION_MISSING", excel_row, "Question text is empty"))
            continue

        q_type = row.get("TYPE")
        q_type = "multiple_choice" if pd.isna(q_type) else str(q_type).strip().lower()
        if q_type not in QUESTION_TYPES:
            errors.append(_row_err(
                "TYPE_INVALID",
                excel_row,
                f"Invalid type '{q_type}' (allowed {', '.join(QUESTION_TYPES)})"
            ))
            continue

        options = clean_options(
            str(row[c]) for c in option_columns if pd.notna(row[c])
        )
        if q_type == "multiple_choice" and len(options) < MIN_OPTIONS:
            errors.append(_row_err(
                "OPTIONS_INSUFFICIENT",
                excel_row,
                "Multiple choice questions need at least 2 options"
            ))
            continue

        section = row.get("SECTION")
        rows.append({
            "question_text": str(text).strip(),
            "question_type": q_type,
            "section": "psychology" if pd.isna(section) else str(section).strip().lower(),
            "options": options if q_type == "multiple_choice" else None,
        })

    if errors:
        return {"valid": False, "errors": errors}

    return {"valid": True, "rows": rows, "summary": {"rows": len(rows)}}


def import_questions_excel(*, file_bytes: bytes) -> int:
    """
    Import global questions from a spreadsheet.
    Questions whose text already exists in the same section are skipped.
    Returns the number of questions created.
    """
    validation = validate_questions_excel(file_bytes=file_bytes)
    if not validation["valid"]:
        raise QuestionImportError(
            "; ".join(e["message"] for e in validation["errors"])
        )

    existing = {
        (q.section, _normalize(q.question_text))
        for q in get_global_questions()
    }

    created = 0
    for data in validation["rows"]:
        key = (data["section"], _normalize(data["question_text"]))
        if key in existing:
            continue
        existing.add(key)
        db.session.add(EvaluationQuestion(school_id=None, **data))
        created += 1

    db.session.commit()
    logger.info("Imported %s questions from spreadsheet", created)
    return created


def _fail(code, message):
    return {
        "valid": False,
        "errors": [{
            "type": code,
            "message": message
        }]
    }


def _row_err(code, row, message):
    return {
        "type": code,
        "row": row,
        "message": message
    }
