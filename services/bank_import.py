import pandas as pd
from flask import current_app

from models import CATEGORIES, DIFFICULTIES, ROLE_TYPES


REQUIRED_COLUMNS = {"category", "question", "difficulty", "role_type"}
TEXT_COLUMNS = ("category", "subcategory", "question", "difficulty", "role_type")


def _clean(value) -> str:
    return "" if pd.isna(value) else " ".join(str(value).split())


def load_question_rows(path: str):
    # Returns (rows, skipped_count).
    df = pd.read_csv(path, dtype=str)
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {sorted(missing)}")
    if "subcategory" not in df.columns:
        df["subcategory"] = ""

    df = df[list(TEXT_COLUMNS)].copy()
    for column in TEXT_COLUMNS:
        df[column] = df[column].map(_clean)

    valid = (
        df["question"].ne("")
        & df["category"].isin(CATEGORIES)
        & df["difficulty"].isin(DIFFICULTIES)
        & df["role_type"].isin(ROLE_TYPES)
    )
    invalid_count = int((~valid).sum())
    if invalid_count:
        current_app.logger.warning("Skipping %d invalid question rows in %s", invalid_count, path)

    df = df[valid].drop_duplicates(subset=["question", "role_type"])
    skipped = len(valid) - len(df)

    rows = []
    for record in df.to_dict(orient="records"):
        record["subcategory"] = record["subcategory"] or None
        rows.append(record)
    return rows, skipped


def import_questions(store, path: str) -> dict:
    rows, skipped = load_question_rows(path)

    existing = store.select("question_banks")
    if existing.error:
        raise existing.error
    known = {(row["question"], row["role_type"]) for row in existing.data}

    fresh = [row for row in rows if (row["question"], row["role_type"]) not in known]
    skipped += len(rows) - len(fresh)

    if fresh:
        inserted = store.insert("question_banks", fresh)
        if inserted.error:
            raise inserted.error
    return {"created": len(fresh), "skipped": skipped}
