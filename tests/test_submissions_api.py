def test_create_submission(client, make_form):
    form_id = make_form()

    response = client.post(f"/forms/{form_id}/submissions", json={"payload": {"a": 1}})

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["id"]
    assert data["formId"] == form_id
    assert data["payload"] == {"a": 1}
    assert data["status"] == "pending"
    assert data["createdAt"] == data["updatedAt"]


def test_create_submission_requires_payload_object(client, make_form):
    form_id = make_form()

    response = client.post(f"/forms/{form_id}/submissions", json={"payload": "text"})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["path"] == "payload"


def test_create_submission_for_missing_form_writes_nothing(client, app):
    response = client.post("/forms/non-existent-id/submissions", json={"payload": {"a": 1}})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
    assert app.state.storage.submissions.list_by_form("non-existent-id") == []


def test_list_submissions_newest_first(client, make_form, clock):
    form_id = make_form()
    client.post(f"/forms/{form_id}/submissions", json={"payload": {"n": 1}})
    client.post(f"/forms/{form_id}/submissions", json={"payload": {"n": 2}})

    response = client.get(f"/forms/{form_id}/submissions")

    assert response.status_code == 200
    assert [item["payload"] for item in response.json()["data"]] == [{"n": 2}, {"n": 1}]


def test_list_submissions_for_form_without_any(client, make_form):
    form_id = make_form()

    response = client.get(f"/forms/{form_id}/submissions")

    assert response.json() == {"ok": True, "data": []}


def test_list_submissions_for_missing_form(client):
    response = client.get("/forms/non-existent-id/submissions")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


def test_get_missing_submission(client):
    response = client.get("/submissions/non-existent-id")

    assert response.status_code == 404
    assert response.json()["error"] == {"code": "NOT_FOUND", "message": "Submission not found"}


def test_form_builder_end_to_end(client):
    created = client.post("/forms", json={"name": "T"})
    assert created.status_code == 201
    form_id = created.json()["data"]["id"]

    saved = client.put(
        f"/forms/{form_id}/schema",
        json={
            "name": "T",
            "fields": [
                {"type": "text", "name": "second", "ord": 2},
                {"type": "rating", "name": "first", "ord": 1},
            ],
        },
    )
    assert saved.status_code == 200

    fields = client.get(f"/forms/{form_id}").json()["data"]["fields"]
    assert [field["ord"] for field in fields] == [1, 2]
    assert [field["name"] for field in fields] == ["first", "second"]

    submitted = client.post(f"/forms/{form_id}/submissions", json={"payload": {"a": 1}})
    assert submitted.status_code == 201
    submission_id = submitted.json()["data"]["id"]

    fetched = client.get(f"/submissions/{submission_id}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["payload"] == {"a": 1}
