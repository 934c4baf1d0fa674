from conftest import bank_entry
from services.store import StoreError


def test_insert_assigns_ids_and_returns_rows(store):
    result = store.insert("question_banks", [bank_entry("What is a closure?"), bank_entry("What is a thunk?")])

    assert result.error is None
    assert [row["question"] for row in result.data] == ["What is a closure?", "What is a thunk?"]
    assert all(isinstance(row["id"], int) for row in result.data)
    assert result.data[0]["created_at"]


def test_select_any_of_is_an_or_over_equality_terms(seeded_store):
    result = seeded_store.select(
        "question_banks",
        any_of=[("role_type", "Data Science"), ("role_type", "All")],
    )

    assert result.error is None
    assert {row["role_type"] for row in result.data} == {"Data Science", "All"}
    assert len(result.data) == 4


def test_select_without_order_returns_insertion_order(seeded_store):
    result = seeded_store.select("question_banks")

    ids = [row["id"] for row in result.data]
    assert ids == sorted(ids)


def test_select_eq_and_descending_order(store):
    for text in ("first", "second", "third"):
        store.insert("question_banks", [bank_entry(text)])
    store.insert("question_banks", [bank_entry("other", category="Behavioral")])

    result = store.select("question_banks", eq={"category": "Technical"}, order_desc="created_at")

    assert [row["question"] for row in result.data] == ["third", "second", "first"]


def test_unknown_table_is_reported_not_raised(store):
    result = store.select("job_offers")

    assert result.data is None
    assert isinstance(result.error, StoreError)


def test_unknown_filter_column_is_reported(store):
    result = store.select("question_banks", eq={"salary": 10})

    assert result.data is None
    assert isinstance(result.error, StoreError)


def test_bad_insert_rolls_back_and_store_stays_usable(seeded_store):
    bad_key = seeded_store.insert("question_banks", [dict(bank_entry("Q"), tags="x")])
    missing_text = seeded_store.insert("question_banks", [dict(bank_entry(None))])

    assert isinstance(bad_key.error, StoreError)
    assert isinstance(missing_text.error, StoreError)
    assert len(seeded_store.select("question_banks").data) == 5


def test_delete_returns_deleted_row(seeded_store):
    target = seeded_store.select("question_banks").data[0]

    result = seeded_store.delete("question_banks", target["id"])

    assert result.error is None
    assert result.data[0]["question"] == target["question"]
    assert len(seeded_store.select("question_banks").data) == 4


def test_delete_missing_row_is_not_an_error(store):
    result = store.delete("question_banks", 12345)

    assert result.error is None
    assert result.data == []


def test_profiles_keep_skill_order(store):
    result = store.insert(
        "interview_profiles",
        [{"job_title": "Intern", "job_description": "Build APIs", "required_skills": ["Go", "SQL", "AWS"]}],
    )

    stored = store.select("interview_profiles", eq={"id": result.data[0]["id"]}).data[0]
    assert stored["required_skills"] == ["Go", "SQL", "AWS"]
    assert stored["github_url"] is None
