# app/services/content_service.py
"""
Site content managed from the admin dashboard.
Products and services are handled as documents so the admin pages and the
landing page share one collection-style access path.
"""
from app.services.document_service import (
    create_document,
    delete_document,
    get_document,
    query_documents,
    update_document,
)

PRODUCTS = "products"
SERVICES = "services"


def get_products():
    return query_documents(PRODUCTS, order_by="order_position", direction="asc")


def get_active_products():
    return query_documents(
        PRODUCTS,
        [("status", "==", "active")],
        order_by="order_position",
        direction="asc"
    )


def get_services():
    return query_documents(SERVICES, order_by="order_position", direction="asc")


def _next_position(collection):
    last = query_documents(collection, order_by="order_position", limit=1)
    return (last[0]["order_position"] or 0) + 1 if last else 0


def _require_title(title, label):
    if not title or not title.strip():
        raise ValueError(f"{label} title is required")
    return title.strip()


def create_product(*, title, subtitle=None, description=None, image_url=None, status="active"):
    doc_id = create_document(PRODUCTS, {
        "title": _require_title(title, "Product"),
        "subtitle": subtitle or None,
        "description": description or None,
        "image_url": image_url or None,
        "status": status or "active",
        "order_position": _next_position(PRODUCTS),
    })
    return get_document(PRODUCTS, doc_id)


def update_product(product_id, *, title, subtitle=None, description=None, image_url=None, status=None):
    data = {
        "title": _require_title(title, "Product"),
        "subtitle": subtitle or None,
        "description": description or None,
        "image_url": image_url or None,
    }
    if status:
        data["status"] = status

    update_document(PRODUCTS, product_id, data)
    return get_document(PRODUCTS, product_id)


def delete_product(product_id):
    delete_document(PRODUCTS, product_id)


def create_service(*, title, description=None, icon=None):
    doc_id = create_document(SERVICES, {
        "title": _require_title(title, "Service"),
        "description": description or None,
        "icon": icon or None,
        "order_position": _next_position(SERVICES),
    })
    return get_document(SERVICES, doc_id)


def update_service(service_id, *, title, description=None, icon=None):
    update_document(SERVICES, service_id, {
        "title": _require_title(title, "Service"),
        "description": description or None,
        "icon": icon or None,
    })
    return get_document(SERVICES, service_id)


def delete_service(service_id):
    delete_document(SERVICES, service_id)
