from flask import (
    Blueprint,
    abort,
    current_app,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    url_for,
)

from models import CATEGORIES, DIFFICULTIES, ROLE_TYPES
from services.profile_service import build_generation_params, create_profile, parse_profile_form
from services.question_generator import categorize_questions, generate_interview_questions
from services.store import get_store


main_bp = Blueprint("main", __name__)


def _generate_for(data: dict):
    # Returns (profile, questions); profile is None if it could not be stored.
    store = get_store()
    profile = create_profile(store, data)
    if profile is None:
        return None, []
    questions = generate_interview_questions(store, build_generation_params(data), profile["id"])
    return profile, questions


@main_bp.route("/", methods=["GET"])
def home():
    return render_template("home.html", role_types=ROLE_TYPES)


@main_bp.route("/generate", methods=["POST"])
def generate():
    data, errors = parse_profile_form(request.form)
    if errors:
        for message in errors:
            flash(message, "error")
        return redirect(url_for("main.home"))

    profile, questions = _generate_for(data)
    return render_template(
        "results.html",
        profile=profile,
        questions=questions,
        grouped=categorize_questions(questions),
    )


@main_bp.route("/history", methods=["GET"])
def history():
    result = get_store().select("interview_profiles", order_desc="created_at")
    if result.error:
        current_app.logger.error("Error loading profiles: %s", result.error)
    return render_template("history.html", profiles=result.data or [])


@main_bp.route("/profiles/<int:profile_id>", methods=["GET"])
def profile_detail(profile_id: int):
    store = get_store()
    found = store.select("interview_profiles", eq={"id": profile_id})
    if found.error:
        # Store failure renders an empty page; 404 is only for a missing profile.
        current_app.logger.error("Error loading profile %s: %s", profile_id, found.error)
        return render_template("results.html", profile=None, questions=[], grouped=categorize_questions([]))
    if not found.data:
        abort(404)

    result = store.select("generated_questions", eq={"profile_id": profile_id})
    if result.error:
        current_app.logger.error("Error loading questions for profile %s: %s", profile_id, result.error)
    questions = result.data or []
    return render_template(
        "results.html",
        profile=found.data[0],
        questions=questions,
        grouped=categorize_questions(questions),
    )


@main_bp.route("/questions", methods=["GET"])
def question_bank():
    result = get_store().select("question_banks", order_desc="created_at")
    if result.error:
        current_app.logger.error("Error loading question bank: %s", result.error)
    return render_template(
        "question_bank.html",
        questions=result.data or [],
        categories=CATEGORIES,
        difficulties=DIFFICULTIES,
        role_types=ROLE_TYPES,
    )


@main_bp.route("/questions", methods=["POST"])
def add_question():
    category = request.form.get("category", "Technical").strip()
    subcategory = request.form.get("subcategory", "").strip()
    question = request.form.get("question", "").strip()
    difficulty = request.form.get("difficulty", "Medium").strip()
    role_type = request.form.get("role_type", "Software Engineering").strip()

    if category not in CATEGORIES:
        flash("Please select a valid category.", "error")
        return redirect(url_for("main.question_bank"))
    if difficulty not in DIFFICULTIES:
        flash("Please select a valid difficulty.", "error")
        return redirect(url_for("main.question_bank"))
    if role_type not in ROLE_TYPES:
        flash("Please select a valid role type.", "error")
        return redirect(url_for("main.question_bank"))
    if not question:
        flash("Please enter the question text.", "error")
        return redirect(url_for("main.question_bank"))

    result = get_store().insert(
        "question_banks",
        [
            {
                "category": category,
                "subcategory": subcategory or None,
                "question": question,
                "difficulty": difficulty,
                "role_type": role_type,
            }
        ],
    )
    if result.error:
        current_app.logger.error("Error adding question: %s", result.error)
        flash("Could not add the question.", "error")
    else:
        flash("Question added.", "success")
    return redirect(url_for("main.question_bank"))


@main_bp.route("/questions/delete/<int:question_id>", methods=["POST"])
def delete_question(question_id: int):
    result = get_store().delete("question_banks", question_id)
    if result.error:
        current_app.logger.error("Error deleting question %s: %s", question_id, result.error)
        flash("Could not delete the question.", "error")
    elif result.data:
        flash("Question deleted.", "success")
    else:
        flash("No matching question found.", "error")
    return redirect(url_for("main.question_bank"))


@main_bp.route("/api/questions", methods=["GET"])
def api_questions():
    result = get_store().select("question_banks", order_desc="created_at")
    if result.error:
        current_app.logger.error("Error loading question bank: %s", result.error)
    questions = result.data or []
    return jsonify({"count": len(questions), "results": questions})


@main_bp.route("/api/generate", methods=["POST"])
def api_generate():
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        return jsonify({"errors": ["Request body must be a JSON object."]}), 400
    data, errors = parse_profile_form(payload)
    if errors:
        return jsonify({"errors": errors}), 400

    profile, questions = _generate_for(data)
    return jsonify({"profile": profile, "questions": questions})
