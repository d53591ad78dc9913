from __future__ import annotations

from typing import Any


def form_summary_output(form: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": form["id"],
        "name": form["name"],
        "description": form.get("description"),
        "status": form["status"],
        "createdAt": form["created_at"],
        "updatedAt": form["updated_at"],
    }


def form_output(form: dict[str, Any]) -> dict[str, Any]:
    output = form_summary_output(form)
    output["fields"] = [field_output(field) for field in form.get("fields", [])]
    return output


def field_output(field: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": field["id"],
        "formId": field["form_id"],
        "type": field["type"],
        "name": field["name"],
        "label": field.get("label"),
        "required": bool(field.get("required")),
        "ord": field.get("ord", 0),
        "config": field.get("config"),
        "createdAt": field["created_at"],
        "updatedAt": field["updated_at"],
    }


def submission_output(submission: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": submission["id"],
        "formId": submission["form_id"],
        "payload": submission.get("payload") or {},
        "status": submission["status"],
        "createdAt": submission["created_at"],
        "updatedAt": submission["updated_at"],
    }
