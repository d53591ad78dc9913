from __future__ import annotations

from typing import Any, Protocol


class FormRepository(Protocol):
    def list_forms(self) -> list[dict[str, Any]]: ...

    def create_form(self, name: str, description: str | None = None) -> dict[str, Any]: ...

    def get_form(self, form_id: str) -> dict[str, Any] | None: ...

    def update_form(self, form_id: str, patch: dict[str, Any]) -> dict[str, Any] | None: ...

    def replace_schema(self, form_id: str, schema: dict[str, Any]) -> dict[str, Any] | None: ...

    def delete_form(self, form_id: str) -> bool: ...


class SubmissionRepository(Protocol):
    def list_by_form(self, form_id: str) -> list[dict[str, Any]]: ...

    def create_submission(self, form_id: str, payload: dict[str, Any]) -> dict[str, Any]: ...

    def get_submission(self, submission_id: str) -> dict[str, Any] | None: ...


class Storage(Protocol):
    forms: FormRepository
    submissions: SubmissionRepository

    def close(self) -> None: ...
