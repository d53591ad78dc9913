from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from formbuilder.errors import NotFoundError
from formbuilder.responses import read_json, success
from formbuilder.serializers import submission_output
from formbuilder.validation import CREATE_SUBMISSION, validate

router = APIRouter()


@router.get("/forms/{form_id}/submissions", tags=["submissions"])
async def list_submissions(form_id: str, request: Request) -> JSONResponse:
    storage = request.app.state.storage
    if not storage.forms.get_form(form_id):
        raise NotFoundError("Form not found")
    submissions = storage.submissions.list_by_form(form_id)
    return success([submission_output(item) for item in submissions])


@router.post("/forms/{form_id}/submissions", tags=["submissions"])
async def create_submission(form_id: str, request: Request) -> JSONResponse:
    storage = request.app.state.storage
    data = validate(CREATE_SUBMISSION, await read_json(request))
    if not storage.forms.get_form(form_id):
        raise NotFoundError("Form not found")
    submission = storage.submissions.create_submission(form_id, data["payload"])
    return success(submission_output(submission), status_code=201)


@router.get("/submissions/{submission_id}", tags=["submissions"])
async def get_submission(submission_id: str, request: Request) -> JSONResponse:
    storage = request.app.state.storage
    submission = storage.submissions.get_submission(submission_id)
    if not submission:
        raise NotFoundError("Submission not found")
    return success(submission_output(submission))
