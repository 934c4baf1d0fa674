import pytest

from app import create_app
from models import db
from services.store import StoreError, StoreResult


TEST_CONFIG = {
    "TESTING": True,
    "SECRET_KEY": "test-secret",
    "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
}


def bank_entry(question, category="Technical", difficulty="Medium",
               role_type="Software Engineering", subcategory=None, id=None):
    return {
        "id": id,
        "category": category,
        "subcategory": subcategory,
        "question": question,
        "difficulty": difficulty,
        "role_type": role_type,
    }


class FakeStore:
    """In-memory stand-in for QuestionStore with switchable failures."""

    def __init__(self, bank=None, fail_select=False, fail_insert=False):
        self.bank = list(bank or [])
        self.fail_select = fail_select
        self.fail_insert = fail_insert
        self.selects = []
        self.inserts = []

    def select(self, table, eq=None, any_of=None, order_desc=None):
        self.selects.append({"table": table, "eq": eq, "any_of": any_of})
        if self.fail_select:
            return StoreResult(None, StoreError("connection refused"))
        rows = self.bank if table == "question_banks" else []
        if eq:
            rows = [r for r in rows if all(r.get(k) == v for k, v in eq.items())]
        if any_of:
            rows = [r for r in rows if any(r.get(k) == v for k, v in any_of)]
        return StoreResult([dict(r) for r in rows], None)

    def insert(self, table, records):
        self.inserts.append({"table": table, "records": list(records)})
        if self.fail_insert:
            return StoreResult(None, StoreError("insert rejected"))
        stored = [dict(record, id=i) for i, record in enumerate(records, start=1)]
        return StoreResult(stored, None)

    def delete(self, table, record_id):
        return StoreResult([], None)


@pytest.fixture
def app():
    app = create_app(TEST_CONFIG)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["question_store"]


@pytest.fixture
def seeded_store(store):
    result = store.insert(
        "question_banks",
        [
            bank_entry("Explain Python decorators", subcategory="Programming"),
            bank_entry("What is a hash map", role_type="All"),
            bank_entry("Explain the bias-variance tradeoff", role_type="Data Science"),
            bank_entry("Tell me about a conflict with a teammate", category="Behavioral", role_type="All"),
            bank_entry("Describe a time you learned something quickly", category="Behavioral", role_type="All"),
        ],
    )
    assert result.error is None
    return store
