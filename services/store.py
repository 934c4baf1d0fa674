from collections import namedtuple

from flask import current_app
from sqlalchemy import desc, or_, select
from sqlalchemy.exc import SQLAlchemyError

from models import GeneratedQuestion, InterviewProfile, QuestionBank


TABLES = {
    "question_banks": QuestionBank,
    "interview_profiles": InterviewProfile,
    "generated_questions": GeneratedQuestion,
}

StoreResult = namedtuple("StoreResult", ["data", "error"])


class StoreError(Exception):
    """A select/insert/delete call against the store failed."""


def get_store():
    return current_app.extensions["question_store"]


# Every call returns StoreResult(data, error); failures are returned, never raised.
class QuestionStore:
    def __init__(self, session):
        self.session = session

    def _model(self, table):
        model = TABLES.get(table)
        if model is None:
            raise StoreError(f"Unknown table: {table}")
        return model

    @staticmethod
    def _column(model, name):
        if name not in model.__table__.columns:
            raise StoreError(f"Unknown column {name!r} on {model.__tablename__}")
        return getattr(model, name)

    def select(self, table, eq=None, any_of=None, order_desc=None):
        try:
            model = self._model(table)
            stmt = select(model)
            for name, value in (eq or {}).items():
                stmt = stmt.where(self._column(model, name) == value)
            if any_of:
                stmt = stmt.where(or_(*[self._column(model, name) == value for name, value in any_of]))
            if order_desc:
                stmt = stmt.order_by(desc(self._column(model, order_desc)), desc(model.id))
            else:
                stmt = stmt.order_by(model.id)
            rows = self.session.execute(stmt).scalars().all()
            return StoreResult([row.to_dict() for row in rows], None)
        except StoreError as exc:
            return StoreResult(None, exc)
        except SQLAlchemyError as exc:
            self.session.rollback()
            return StoreResult(None, StoreError(str(exc)))

    def insert(self, table, records):
        try:
            model = self._model(table)
            objects = [model(**record) for record in records]
            self.session.add_all(objects)
            self.session.commit()
            return StoreResult([obj.to_dict() for obj in objects], None)
        except StoreError as exc:
            return StoreResult(None, exc)
        except TypeError as exc:
            # Unknown keyword in a record.
            self.session.rollback()
            return StoreResult(None, StoreError(str(exc)))
        except SQLAlchemyError as exc:
            self.session.rollback()
            return StoreResult(None, StoreError(str(exc)))

    def delete(self, table, record_id):
        try:
            model = self._model(table)
            row = self.session.get(model, record_id)
            if row is None:
                return StoreResult([], None)
            deleted = row.to_dict()
            self.session.delete(row)
            self.session.commit()
            return StoreResult([deleted], None)
        except StoreError as exc:
            return StoreResult(None, exc)
        except SQLAlchemyError as exc:
            self.session.rollback()
            return StoreResult(None, StoreError(str(exc)))
