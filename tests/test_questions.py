from io import BytesIO

import pandas as pd
import pytest

from app.models import EvaluationQuestion
from app.services.question_service import (
    QuestionImportError,
    create_question,
    delete_question,
    get_global_questions,
    import_questions_excel,
    save_custom_answers,
    validate_questions_excel,
)


def _workbook(rows):
    buffer = BytesIO()
    pd.DataFrame(rows).to_excel(buffer, header=False, index=False)
    return buffer.getvalue()


HEADER = ["QUESTION", "SECTION", "TYPE", "OPTION 1", "OPTION 2"]


def test_create_question_needs_two_options(app):
    with pytest.raises(ValueError):
        create_question(question_text="Pick", options=["only one", "  "])

    question = create_question(question_text="Describe yourself", question_type="text", options=["ignored"])
    assert question.options is None
    assert question.is_global


def test_delete_question_checks_ownership(app, school):
    own = create_question(question_text="Ours?", question_type="text", school_id=school.id)

    with pytest.raises(ValueError):
        delete_question(own.id)

    delete_question(own.id, school_id=school.id)
    assert EvaluationQuestion.query.count() == 0


def test_save_custom_answers_ignores_other_schools(db, student, school):
    own = create_question(question_text="Ours?", question_type="text", school_id=school.id)
    foreign = create_question(question_text="Global?", question_type="text")

    saved = save_custom_answers(student=student, answers={own.id: " yes ", foreign.id: "no"})
    assert saved == 1

    with pytest.raises(ValueError):
        save_custom_answers(student=student, answers={own.id: "   "})


def test_validate_finds_header_below_title_rows(app):
    file_bytes = _workbook([
        ["Question bank export", None, None, None, None],
        HEADER,
        ["Do you like puzzles?", "Psychology", None, "Yes", "No"],
        ["Tell us about you", "Intro", "text", None, None],
    ])

    result = validate_questions_excel(file_bytes=file_bytes)
    assert result["valid"] is True
    assert result["rows"][0]["section"] == "psychology"
    assert result["rows"][0]["options"] == ["Yes", "No"]
    assert result["rows"][1]["question_type"] == "text"
    assert result["rows"][1]["options"] is None


def test_validate_reports_row_errors(app):
    file_bytes = _workbook([
        HEADER,
        ["Only one option", "psychology", "multiple_choice", "Yes", None],
        ["Bad type", "psychology", "essay", "A", "B"],
    ])

    result = validate_questions_excel(file_bytes=file_bytes)
    assert result["valid"] is False
    assert [e["type"] for e in result["errors"]] == ["OPTIONS_INSUFFICIENT", "TYPE_INVALID"]


def test_validate_missing_header(app):
    result = validate_questions_excel(file_bytes=_workbook([["foo", "bar"], ["1", "2"]]))
    assert result["errors"][0]["type"] == "HEADER_NOT_FOUND"


def test_validate_unreadable_file(app):
    result = validate_questions_excel(file_bytes=b"not a spreadsheet")
    assert result["errors"][0]["type"] == "FILE_INVALID"


def test_import_skips_duplicates(app):
    create_question(question_text="Do you like   PUZZLES?", options=["Yes", "No"])
    file_bytes = _workbook([
        HEADER,
        ["Do you like puzzles?", "psychology", None, "Yes", "No"],
        ["Do you enjoy teamwork?", "psychology", None, "Yes", "No"],
        ["Do you enjoy teamwork?", "psychology", None, "Yes", "No"],
    ])

    assert import_questions_excel(file_bytes=file_bytes) == 1
    assert len(get_global_questions()) == 2


def test_import_rejects_invalid_workbook(app):
    with pytest.raises(QuestionImportError):
        import_questions_excel(file_bytes=b"garbage")


def test_admin_import_route(client, login, admin_user):
    login(admin_user)
    file_bytes = _workbook([HEADER, ["Do you plan ahead?", "psychology", None, "Always", "Rarely"]])

    response = client.post(
        "/admin/questions/import",
        data={"file": (BytesIO(file_bytes), "questions.xlsx")},
        content_type="multipart/form-data",
        follow_redirects=True
    )
    assert response.status_code == 200
    assert b"1 questions imported" in response.data
    assert b"Do you plan ahead?" in response.data
