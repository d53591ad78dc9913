from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from formbuilder.config import DEFAULT_FORM_STATUS, DEFAULT_SUBMISSION_STATUS
from formbuilder.models import Base, FormFieldModel, FormModel, SubmissionModel
from formbuilder.utils import dumps_json, loads_json, new_ulid, now_iso

logger = logging.getLogger(__name__)

PATCHABLE_FORM_KEYS = ("name", "description", "status")


class SQLiteFormRepo:
    def __init__(self, session_factory: sessionmaker) -> None:
        self._Session = session_factory

    def list_forms(self) -> list[dict[str, Any]]:
        with self._Session() as session:
            rows = (
                session.query(FormModel)
                .order_by(FormModel.created_at.desc(), FormModel.id.desc())
                .all()
            )
            return [self._to_dict(row) for row in rows]

    def create_form(self, name: str, description: str | None = None) -> dict[str, Any]:
        now = now_iso()
        row = FormModel(
            id=new_ulid(),
            name=name,
            description=description or None,
            status=DEFAULT_FORM_STATUS,
            created_at=now,
            updated_at=now,
        )
        with self._Session() as session:
            session.add(row)
            session.commit()
            logger.info("Created form %s", row.id)
            return self._to_dict(row)

    def get_form(self, form_id: str) -> dict[str, Any] | None:
        with self._Session() as session:
            row = session.get(FormModel, form_id)
            if not row:
                return None
            fields = (
                session.query(FormFieldModel)
                .filter(FormFieldModel.form_id == form_id)
                .order_by(FormFieldModel.ord.asc(), FormFieldModel.seq.asc())
                .all()
            )
            form = self._to_dict(row)
            form["fields"] = [self._field_to_dict(field) for field in fields]
            return form

    def update_form(self, form_id: str, patch: dict[str, Any]) -> dict[str, Any] | None:
        with self._Session() as session:
            row = session.get(FormModel, form_id)
            if not row:
                return None
            updates = {key: patch[key] for key in PATCHABLE_FORM_KEYS if key in patch}
            if not updates:
                return self._to_dict(row)
            for key, value in updates.items():
                setattr(row, key, value)
            row.updated_at = now_iso()
            session.commit()
            return self._to_dict(row)

    def replace_schema(self, form_id: str, schema: dict[str, Any]) -> dict[str, Any] | None:
        """Overwrite the form's attributes and its whole field list in one transaction.

        Every call deletes the existing field rows and inserts new ones, so field
        ids change on each replace. If any statement fails the transaction is
        rolled back, the form keeps its previous attributes and fields, and the
        error propagates to the caller.
        """
        fields = schema.get("fields") or []
        now = now_iso()
        with self._Session.begin() as session:
            current = session.get(FormModel, form_id)
            if not current:
                return None
            updated = session.query(FormModel).filter(FormModel.id == form_id).update(
                {
                    "name": schema.get("name"),
                    "description": schema.get("description") or None,
                    "status": schema.get("status") or current.status,
                    "updated_at": now,
                },
                synchronize_session=False,
            )
            # deleted since it was loaded
            if not updated:
                return None
            session.query(FormFieldModel).filter(FormFieldModel.form_id == form_id).delete(
                synchronize_session=False
            )
            session.add_all(
                [
                    self._new_field_row(form_id, index, field, now)
                    for index, field in enumerate(fields)
                ]
            )
            session.flush()

        logger.info("Replaced schema of form %s with %d fields", form_id, len(fields))
        return self.get_form(form_id)

    def delete_form(self, form_id: str) -> bool:
        with self._Session() as session:
            if not session.get(FormModel, form_id):
                return False
            removed = (
                session.query(FormModel)
                .filter(FormModel.id == form_id)
                .delete(synchronize_session=False)
            )
            session.commit()
        if removed:
            logger.info("Deleted form %s", form_id)
        return removed > 0

    @staticmethod
    def _new_field_row(
        form_id: str, index: int, field: dict[str, Any], now: str
    ) -> FormFieldModel:
        ord_value = field.get("ord")
        config = field.get("config")
        return FormFieldModel(
            id=new_ulid(),
            form_id=form_id,
            type=field.get("type"),
            name=field.get("name"),
            label=field.get("label") or None,
            required=bool(field.get("required")),
            ord=int(ord_value) if ord_value is not None else 0,
            seq=index,
            config=dumps_json(config) if config is not None else None,
            created_at=now,
            updated_at=now,
        )

    @staticmethod
    def _to_dict(row: FormModel) -> dict[str, Any]:
        return {
            "id": row.id,
            "name": row.name,
            "description": row.description,
            "status": row.status,
            "created_at": row.created_at,
            "updated_at": row.updated_at,
        }

    @staticmethod
    def _field_to_dict(row: FormFieldModel) -> dict[str, Any]:
        return {
            "id": row.id,
            "form_id": row.form_id,
            "type": row.type,
            "name": row.name,
            "label": row.label,
            "required": bool(row.required),
            "ord": row.ord,
            "config": loads_json(row.config),
            "created_at": row.created_at,
            "updated_at": row.updated_at,
        }


class SQLiteSubmissionRepo:
    def __init__(self, session_factory: sessionmaker) -> None:
        self._Session = session_factory

    def list_by_form(self, form_id: str) -> list[dict[str, Any]]:
        with self._Session() as session:
            rows = (
                session.query(SubmissionModel)
                .filter(SubmissionModel.form_id == form_id)
                .order_by(SubmissionModel.created_at.desc(), SubmissionModel.id.desc())
                .all()
            )
            return [self._to_dict(row) for row in rows]

    def create_submission(self, form_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        now = now_iso()
        row = SubmissionModel(
            id=new_ulid(),
            form_id=form_id,
            payload=dumps_json(payload),
            status=DEFAULT_SUBMISSION_STATUS,
            created_at=now,
            updated_at=now,
        )
        with self._Session() as session:
            session.add(row)
            session.commit()
            logger.info("Created submission %s for form %s", row.id, form_id)
            return self._to_dict(row)

    def get_submission(self, submission_id: str) -> dict[str, Any] | None:
        with self._Session() as session:
            row = session.get(SubmissionModel, submission_id)
            return self._to_dict(row) if row else None

    @staticmethod
    def _to_dict(row: SubmissionModel) -> dict[str, Any]:
        return {
            "id": row.id,
            "form_id": row.form_id,
            "payload": loads_json(row.payload),
            "status": row.status,
            "created_at": row.created_at,
            "updated_at": row.updated_at,
        }


def _enable_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class SQLiteStorage:
    def __init__(self, db_path: Path) -> None:
        self._engine = create_engine(
            f"sqlite:///{db_path}", connect_args={"check_same_thread": False}
        )
        event.listen(self._engine, "connect", _enable_foreign_keys)
        self._Session = sessionmaker(self._engine, expire_on_commit=False)
        Base.metadata.create_all(self._engine)
        self.forms = SQLiteFormRepo(self._Session)
        self.submissions = SQLiteSubmissionRepo(self._Session)

    def close(self) -> None:
        self._engine.dispose()
