import random
from dataclasses import dataclass, field
from typing import List

from flask import current_app


TECHNICAL_LIMIT = 5
BEHAVIORAL_LIMIT = 3


@dataclass
class GenerationParams:
    job_title: str
    job_description: str
    required_skills: List[str] = field(default_factory=list)
    role_type: str = "Software Engineering"


def _is_relevant(entry: dict, keywords: List[str], description: str) -> bool:
    question = entry["question"].lower()
    subcategory = (entry.get("subcategory") or "").lower()
    return any(
        skill in question or skill in subcategory or skill in description
        for skill in keywords
    )


def _matched_skills(entry: dict, keywords: List[str]) -> List[str]:
    # Description hits make an entry relevant but are not cited in the reasoning.
    question = entry["question"].lower()
    subcategory = (entry.get("subcategory") or "").lower()
    return [skill for skill in keywords if skill in question or skill in subcategory]


def select_technical(technical: List[dict], keywords: List[str], description: str) -> List[dict]:
    # Relevant entries first (fetch order), padded with the rest up to the limit.
    relevant = [q for q in technical if _is_relevant(q, keywords, description)]
    if len(relevant) >= TECHNICAL_LIMIT:
        return relevant[:TECHNICAL_LIMIT]
    rest = [q for q in technical if not _is_relevant(q, keywords, description)]
    return (relevant + rest)[:TECHNICAL_LIMIT]


def select_behavioral(behavioral: List[dict], rng=None) -> List[dict]:
    pool = list(behavioral)
    (rng or random).shuffle(pool)
    return pool[:BEHAVIORAL_LIMIT]


def technical_reasoning(entry: dict, keywords: List[str], role_type: str) -> str:
    matched = _matched_skills(entry, keywords)
    if matched:
        return f"Matches required skills: {', '.join(matched)}"
    return f"Relevant for {role_type} role"


def _draft(profile_id, entry: dict, reasoning: str) -> dict:
    return {
        "profile_id": profile_id,
        "question": entry["question"],
        "category": entry["category"],
        "difficulty": entry["difficulty"],
        "reasoning": reasoning,
    }


def generate_interview_questions(store, params: GenerationParams, profile_id, rng=None) -> List[dict]:
    # Fetch candidates for the role type plus "All" entries.
    result = store.select(
        "question_banks",
        any_of=[("role_type", params.role_type), ("role_type", "All")],
    )
    if result.error:
        current_app.logger.error("Error fetching question bank: %s", result.error)
        return []

    bank = result.data or []
    technical = [q for q in bank if q["category"] == "Technical"]
    behavioral = [q for q in bank if q["category"] == "Behavioral"]

    keywords = [skill.lower() for skill in params.required_skills]
    description = params.job_description.lower()

    drafts = []
    for entry in select_technical(technical, keywords, description):
        reasoning = technical_reasoning(entry, keywords, params.role_type)
        drafts.append(_draft(profile_id, entry, reasoning))

    for entry in select_behavioral(behavioral, rng):
        reasoning = f"Essential behavioral assessment for {params.job_title} position"
        drafts.append(_draft(profile_id, entry, reasoning))

    if not drafts:
        return []

    inserted = store.insert("generated_questions", drafts)
    if inserted.error:
        current_app.logger.error("Error inserting generated questions: %s", inserted.error)
        return []
    return inserted.data or []


def categorize_questions(questions: List[dict]) -> dict:
    return {
        "technical": [q for q in questions if q["category"] == "Technical"],
        "behavioral": [q for q in questions if q["category"] == "Behavioral"],
    }
