import pytest

from app.services.document_service import (
    DocumentStoreError,
    count_documents,
    create_document,
    delete_document,
    get_document,
    get_document_by_field,
    query_documents,
    update_document,
)


def _student(first_name, interests, **extra):
    data = {
        "first_name": first_name,
        "last_name": "Test",
        "email": f"{first_name.lower()}@example.com",
        "interests": interests,
    }
    data.update(extra)
    return create_document("students", data)


def test_create_and_get_sets_timestamps(app):
    doc_id = create_document("school_options", {"school_name": "UNIBEN", "school_type": "University"})
    doc = get_document("school_options", doc_id)

    assert doc["id"] == doc_id
    assert doc["school_name"] == "UNIBEN"
    assert doc["created_at"] is not None
    assert get_document("school_options", 999) is None


def test_unknown_collection_and_field(app):
    with pytest.raises(DocumentStoreError):
        query_documents("nowhere")
    with pytest.raises(DocumentStoreError):
        create_document("services", {"colour": "blue"})
    with pytest.raises(DocumentStoreError):
        query_documents("services", [("title", "~=", "x")])


def test_query_filters_order_and_limit(app):
    _student("Ada", ["art"], personality_type="creative")
    _student("Bola", ["maths", "art"], personality_type="analytical")
    _student("Chi", ["music"], personality_type="creative")

    creative = query_documents(
        "students",
        [("personality_type", "==", "creative")],
        order_by="first_name",
        direction="asc"
    )
    assert [d["first_name"] for d in creative] == ["Ada", "Chi"]

    newest = query_documents("students", order_by="first_name", limit=1)
    assert newest[0]["first_name"] == "Chi"

    picked = query_documents("students", [("first_name", "in", ["Ada", "Bola"])])
    assert {d["first_name"] for d in picked} == {"Ada", "Bola"}


def test_array_contains_runs_after_sql(app):
    _student("Ada", ["art"])
    _student("Bola", ["maths", "art"])
    _student("Chi", ["music"])

    docs = query_documents("students", [("interests", "array-contains", "art")], order_by="first_name", direction="asc")
    assert [d["first_name"] for d in docs] == ["Ada", "Bola"]

    limited = query_documents("students", [("interests", "array-contains", "art")], limit=1)
    assert len(limited) == 1
    assert count_documents("students", [("interests", "array-contains", "music")]) == 1


def test_field_helpers(app):
    _student("Ada", [])
    assert get_document_by_field("students", "first_name", "Ada")["last_name"] == "Test"
    assert get_document_by_field("students", "first_name", "Zed") is None


def test_update_and_delete(app):
    doc_id = create_document("services", {"title": "Old"})

    update_document("services", doc_id, {"title": "New", "id": 42})
    assert get_document("services", doc_id)["title"] == "New"

    delete_document("services", doc_id)
    assert get_document("services", doc_id) is None

    with pytest.raises(DocumentStoreError):
        update_document("services", doc_id, {"title": "Gone"})
    with pytest.raises(DocumentStoreError):
        delete_document("services", doc_id)


def test_password_is_hidden(app, admin_user):
    doc = get_document("users", admin_user.id)
    assert doc["email"] == "admin@example.com"
    assert "password" not in doc
