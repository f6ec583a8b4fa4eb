# app/services/document_service.py
"""
Collection-style access to the portal's records.

Callers use collection names and plain dict documents instead of model
classes. Documents are dicts of column values including ``id``.
"""
from sqlalchemy import inspect

from app.extensions import db
from app.models import (
    Booking, ConsultationBooking, ContactSubmission, EvaluationQuestion,
    NewsletterSubscription, Product, School, SchoolOption, Service, Student,
    StudentCustomAnswer, StudentProgress, StudentTestResult, User, WaitlistEntry,
)
from app.utils.timezone import get_local_time

COLLECTIONS = {
    "users": User,
    "students": Student,
    "schools": School,
    "school_options": SchoolOption,
    "student_test_results": StudentTestResult,
    "student_progress": StudentProgress,
    "bookings": Booking,
    "consultation_bookings": ConsultationBooking,
    "contact_submissions": ContactSubmission,
    "newsletter_subscriptions": NewsletterSubscription,
    "waitlist_entries": WaitlistEntry,
    "products": Product,
    "services": Service,
    "school_evaluation_questions": EvaluationQuestion,
    "student_custom_answers": StudentCustomAnswer,
}

# never exposed through documents
HIDDEN_FIELDS = {"password"}


class DocumentStoreError(Exception):
    pass


def _model(collection):
    try:
        return COLLECTIONS[collection]
    except KeyError:
        raise DocumentStoreError(f"Unknown collection '{collection}'")


def _column(model, field):
    columns = inspect(model).columns
    if field not in columns:
        raise DocumentStoreError(f"Unknown field '{field}' on {model.__tablename__}")
    return getattr(model, field)


def to_document(record):
    if record is None:
        return None
    return {
        c.key: getattr(record, c.key)
        for c in inspect(record).mapper.column_attrs
        if c.key not in HIDDEN_FIELDS
    }


def _apply_timestamps(model, data, creating):
    columns = inspect(model).columns
    now = get_local_time()
    if creating and "created_at" in columns:
        data.setdefault("created_at", now)
    if "updated_at" in columns:
        data["updated_at"] = now
    return data


def _check_fields(model, data):
    for field in data:
        _column(model, field)


# ----------------------------
# CREATE
# ----------------------------

def create_document(collection, data: dict):
    """Insert a document with a generated id; returns the id."""
    model = _model(collection)
    data = dict(data)
    data.pop("id", None)
    _check_fields(model, data)

    record = model(**_apply_timestamps(model, data, creating=True))
    db.session.add(record)
    db.session.commit()
    return record.id


# ----------------------------
# READ
# ----------------------------

def get_document(collection, doc_id):
    return to_document(db.session.get(_model(collection), doc_id))


def _filter_clause(column, operator, value):
    if operator == "==":
        return column == value
    if operator == "!=":
        return column != value
    if operator == "<":
        return column < value
    if operator == "<=":
        return column <= value
    if operator == ">":
        return column > value
    if operator == ">=":
        return column >= value
    if operator == "in":
        return column.in_(list(value))
    raise DocumentStoreError(f"Unsupported operator '{operator}'")


def query_documents(collection, filters=None, order_by=None, direction="desc", limit=None):
    """
    Query a collection.

    ``filters`` is a list of ``(field, operator, value)`` tuples. JSON list
    columns support ``array-contains``, which is evaluated after the SQL
    query because list membership is not portable across databases.
    """
    model = _model(collection)
    query = model.query
    contains = []

    for field, operator, value in filters or []:
        column = _column(model, field)
        if operator == "array-contains":
            contains.append((field, value))
            continue
        query = query.filter(_filter_clause(column, operator, value))

    if order_by:
        column = _column(model, order_by)
        query = query.order_by(column.asc() if direction == "asc" else column.desc())

    if limit and not contains:
        query = query.limit(limit)

    docs = [to_document(r) for r in query.all()]
    for field, value in contains:
        docs = [d for d in docs if value in (d.get(field) or [])]

    return docs[:limit] if limit else docs


def get_document_by_field(collection, field, value):
    docs = query_documents(collection, [(field, "==", value)], limit=1)
    return docs[0] if docs else None


def count_documents(collection, filters=None):
    return len(query_documents(collection, filters))


# ----------------------------
# UPDATE / DELETE
# ----------------------------

def update_document(collection, doc_id, data: dict):
    model = _model(collection)
    record = db.session.get(model, doc_id)
    if record is None:
        raise DocumentStoreError(f"Document {doc_id} not found in '{collection}'")

    data = dict(data)
    data.pop("id", None)
    _check_fields(model, data)

    for field, value in _apply_timestamps(model, data, creating=False).items():
        setattr(record, field, value)
    db.session.commit()


def delete_document(collection, doc_id):
    model = _model(collection)
    record = db.session.get(model, doc_id)
    if record is None:
        raise DocumentStoreError(f"Document {doc_id} not found in '{collection}'")

    db.session.delete(record)
    db.session.commit()
