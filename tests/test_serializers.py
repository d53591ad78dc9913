from formbuilder.serializers import form_output, form_summary_output, submission_output

FORM = {
    "id": "F1",
    "name": "Form",
    "description": None,
    "status": "active",
    "created_at": "2026-01-01T00:00:00.000000Z",
    "updated_at": "2026-01-02T00:00:00.000000Z",
    "fields": [
        {
            "id": "A1",
            "form_id": "F1",
            "type": "select",
            "name": "pick",
            "label": "Pick",
            "required": 1,
            "ord": 2,
            "config": {"options": ["x"]},
            "created_at": "2026-01-02T00:00:00.000000Z",
            "updated_at": "2026-01-02T00:00:00.000000Z",
        }
    ],
}


def test_form_summary_uses_wire_names():
    assert form_summary_output(FORM) == {
        "id": "F1",
        "name": "Form",
        "description": None,
        "status": "active",
        "createdAt": "2026-01-01T00:00:00.000000Z",
        "updatedAt": "2026-01-02T00:00:00.000000Z",
    }


def test_form_output_includes_fields():
    field = form_output(FORM)["fields"][0]

    assert field["formId"] == "F1"
    assert field["required"] is True
    assert field["config"] == {"options": ["x"]}
    assert field["createdAt"] == "2026-01-02T00:00:00.000000Z"


def test_submission_output():
    output = submission_output(
        {
            "id": "S1",
            "form_id": "F1",
            "payload": {"a": 1},
            "status": "pending",
            "created_at": "t1",
            "updated_at": "t1",
        }
    )

    assert output == {
        "id": "S1",
        "formId": "F1",
        "payload": {"a": 1},
        "status": "pending",
        "createdAt": "t1",
        "updatedAt": "t1",
    }
