# app/routes/api_routes.py
from flask import Blueprint, jsonify, request

from app.services.assessment_service import AssessmentError, score_career_assessment, score_skills_assessment
from app.services.career_matcher_service import CareerMatchError, match_careers
from app.services.chatbot_service import get_bot_response
from app.services.document_service import DocumentStoreError, query_documents
from app.services.psychology_service import score_answers
from app.services.university_service import search_universities
from app.utils.decorators import login_required, role_required

api_bp = Blueprint("api", __name__)


def _int_list(values):
    if not isinstance(values, list):
        raise AssessmentError("'answers' must be a list of option indices")
    try:
        return [int(v) for v in values]
    except (TypeError, ValueError):
        raise AssessmentError("'answers' must be a list of option indices")


@api_bp.route("/health")
def health():
    return {"status": "ok"}


@api_bp.route("/psychology/score", methods=["POST"])
def psychology_score():
    payload = request.get_json(silent=True) or {}
    try:
        answers = _int_list(payload.get("answers"))
    except AssessmentError as e:
        return jsonify({"success": False, "message": str(e)}), 400
    return jsonify(score_answers(answers))


@api_bp.route("/assessments/<kind>", methods=["POST"])
def assessment_score(kind):
    scorers = {
        "career": score_career_assessment,
        "skills": score_skills_assessment,
    }
    scorer = scorers.get(kind)
    if scorer is None:
        return jsonify({"success": False, "message": f"Unknown assessment '{kind}'"}), 404

    payload = request.get_json(silent=True) or {}
    try:
        return jsonify(scorer(_int_list(payload.get("answers"))))
    except AssessmentError as e:
        return jsonify({"success": False, "message": str(e)}), 400


@api_bp.route("/careers/match", methods=["POST"])
def careers_match():
    payload = request.get_json(silent=True) or {}
    try:
        matches = match_careers(
            payload.get("personality_type"),
            payload.get("interests"),
            payload.get("skills", "")
        )
    except CareerMatchError as e:
        return jsonify({"success": False, "message": str(e)}), 400
    return jsonify({"success": True, "matches": matches})


@api_bp.route("/universities")
def universities():
    args = request.args
    return jsonify(search_universities(
        args.get("search", ""),
        state=args.get("state") or None,
        uni_type=args.get("type") or None,
        program=args.get("program") or None
    ))


@api_bp.route("/chat", methods=["POST"])
def chat():
    payload = request.get_json(silent=True) or {}
    message = (payload.get("message") or "").strip()
    if not message:
        return jsonify({"success": False, "message": "Message is empty"}), 400
    return jsonify({"reply": get_bot_response(message)})


@api_bp.route("/collections/<collection>")
@login_required
@role_required("admin")
def collection(collection):
    """
    Read-only browse of a collection for admins.
    Query string pairs become equality filters, except the reserved
    `order_by`, `direction` and `limit` keys.
    """
    args = request.args.to_dict()
    order_by = args.pop("order_by", None)
    direction = args.pop("direction", "desc")
    limit = args.pop("limit", None)

    try:
        docs = query_documents(
            collection,
            [(field, "==", value) for field, value in args.items()],
            order_by=order_by,
            direction=direction,
            limit=int(limit) if limit else None
        )
    except (DocumentStoreError, ValueError) as e:
        return jsonify({"success": False, "message": str(e)}), 400

    return jsonify({"success": True, "documents": docs})
