from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from formbuilder.errors import NotFoundError
from formbuilder.responses import read_json, success
from formbuilder.serializers import form_output, form_summary_output
from formbuilder.validation import CREATE_FORM, UPDATE_FORM, UPSERT_FORM, validate

router = APIRouter()


@router.get("/forms", tags=["forms"])
async def list_forms(request: Request) -> JSONResponse:
    storage = request.app.state.storage
    forms = storage.forms.list_forms()
    return success([form_summary_output(form) for form in forms])


@router.post("/forms", tags=["forms"])
async def create_form(request: Request) -> JSONResponse:
    storage = request.app.state.storage
    data = validate(CREATE_FORM, await read_json(request))
    form = storage.forms.create_form(data["name"], data.get("description"))
    return success(form_summary_output(form), status_code=201)


@router.get("/forms/{form_id}", tags=["forms"])
async def get_form(form_id: str, request: Request) -> JSONResponse:
    storage = request.app.state.storage
    form = storage.forms.get_form(form_id)
    if not form:
        raise NotFoundError("Form not found")
    return success(form_output(form))


@router.put("/forms/{form_id}", tags=["forms"])
async def update_form(form_id: str, request: Request) -> JSONResponse:
    storage = request.app.state.storage
    patch = validate(UPDATE_FORM, await read_json(request))
    form = storage.forms.update_form(form_id, patch)
    if not form:
        raise NotFoundError("Form not found")
    return success(form_summary_output(form))


@router.put("/forms/{form_id}/schema", tags=["forms"])
async def replace_form_schema(form_id: str, request: Request) -> JSONResponse:
    storage = request.app.state.storage
    schema = validate(UPSERT_FORM, await read_json(request))
    form = storage.forms.replace_schema(form_id, schema)
    if not form:
        raise NotFoundError("Form not found")
    return success(form_output(form))


@router.delete("/forms/{form_id}", tags=["forms"])
async def delete_form(form_id: str, request: Request) -> JSONResponse:
    storage = request.app.state.storage
    if not storage.forms.delete_form(form_id):
        raise NotFoundError("Form not found")
    return success({"id": form_id, "deleted": True})
