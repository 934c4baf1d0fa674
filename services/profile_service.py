import re

from flask import current_app

from models import ROLE_TYPES
from services.question_generator import GenerationParams


DEFAULT_ROLE_TYPE = "Software Engineering"
URL_FIELDS = ("linkedin_url", "github_url", "deployment_url")


def _text(value) -> str:
    return "" if value is None else str(value).strip()


def parse_skills(raw) -> list:
    # Accepts a list (JSON API) or one comma/newline separated string (HTML form).
    if isinstance(raw, (list, tuple)):
        parts = [_text(item) for item in raw]
    else:
        parts = [part.strip() for part in re.split(r"[,\n]", _text(raw))]
    skills = []
    for skill in parts:
        if skill and skill not in skills:
            skills.append(skill)
    return skills


def parse_profile_form(form):
    # Returns (data, errors); data is only meaningful when errors is empty.
    errors = []
    job_title = _text(form.get("job_title"))
    job_description = _text(form.get("job_description"))
    required_skills = parse_skills(form.get("required_skills"))
    role_type = _text(form.get("role_type")) or DEFAULT_ROLE_TYPE

    if not job_title:
        errors.append("Job title is required.")
    if not job_description:
        errors.append("Job description is required.")
    if not required_skills:
        errors.append("Add at least one required skill.")
    if role_type not in ROLE_TYPES:
        errors.append("Please select a valid role type.")

    data = {
        "job_title": job_title,
        "job_description": job_description,
        "required_skills": required_skills,
        "role_type": role_type,
    }
    for name in URL_FIELDS:
        data[name] = _text(form.get(name)) or None
    return data, errors


def create_profile(store, data: dict):
    record = {key: data[key] for key in ("job_title", "job_description", "required_skills") + URL_FIELDS}
    result = store.insert("interview_profiles", [record])
    if result.error or not result.data:
        current_app.logger.error("Error creating profile: %s", result.error)
        return None
    return result.data[0]


def build_generation_params(data: dict) -> GenerationParams:
    return GenerationParams(
        job_title=data["job_title"],
        job_description=data["job_description"],
        required_skills=list(data["required_skills"]),
        role_type=data["role_type"],
    )
