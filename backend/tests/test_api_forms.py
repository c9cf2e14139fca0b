"""HTTP behaviour of the CMS form routes, the public form routes and /health"""

FORMS = "/api/v1/cms/forms"


def create(client, headers, payload):
    response = client.post(FORMS, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_and_get_form(client, auth_headers, form_payload):
    created = create(client, auth_headers, form_payload())

    response = client.get(f"{FORMS}/{created['id']}", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["slug"] == "contact-us"
    assert [s["order_index"] for s in body["sections"]] == [1, 2]
    assert body["sections"][1]["fields"][0]["properties"] == {"options": ["Sales", "Support"]}


def test_put_replaces_whole_structure(client, auth_headers, form_payload):
    created = create(client, auth_headers, form_payload())
    old_section_ids = {s["id"] for s in created["sections"]}

    new_sections = [
        {"title": "Details", "fields": [
            {"label": "Company", "field_key": "company", "field_type": "text"},
        ]},
    ]
    response = client.put(f"{FORMS}/{created['id']}", headers=auth_headers,
                          json=form_payload(name="Partner Signup", sections=new_sections))

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == created["id"]
    assert body["slug"] == "partner-signup"
    assert len(body["sections"]) == 1
    assert body["sections"][0]["id"] not in old_section_ids
    assert [f["field_key"] for f in body["sections"][0]["fields"]] == ["company"]

    fetched = client.get(f"{FORMS}/{created['id']}", headers=auth_headers).json()
    assert fetched == body


def test_put_with_duplicate_keys_is_rejected_and_form_kept(client, auth_headers, form_payload):
    created = create(client, auth_headers, form_payload())
    sections = [{"title": "X", "fields": [
        {"label": "A", "field_key": "same", "field_type": "text"},
        {"label": "B", "field_key": "same", "field_type": "text"},
    ]}]

    response = client.put(f"{FORMS}/{created['id']}", headers=auth_headers,
                          json=form_payload(name="Changed", sections=sections))

    assert response.status_code == 400
    assert "Duplicate field_key 'same'" in response.json()["detail"]
    fetched = client.get(f"{FORMS}/{created['id']}", headers=auth_headers).json()
    assert fetched["name"] == "Contact Us"
    assert len(fetched["sections"]) == 2


def test_put_unknown_category_is_bad_request(client, auth_headers, form_payload):
    created = create(client, auth_headers, form_payload())

    response = client.put(f"{FORMS}/{created['id']}", headers=auth_headers,
                          json=form_payload(email_category_id="7f1d9f56-8a53-4f58-9d43-1f4f0f7d2a10"))

    assert response.status_code == 400


def test_put_missing_form(client, auth_headers, form_payload):
    response = client.put(f"{FORMS}/7f1d9f56-8a53-4f58-9d43-1f4f0f7d2a10", headers=auth_headers,
                          json=form_payload())

    assert response.status_code == 404


def test_create_with_slug_conflict(client, auth_headers, form_payload):
    create(client, auth_headers, form_payload())

    response = client.post(FORMS, json=form_payload(name="Contact us"), headers=auth_headers)

    assert response.status_code == 409


def test_schema_errors(client, auth_headers, form_payload):
    bad_type = form_payload(sections=[{"fields": [{"label": "X", "field_key": "x", "field_type": "slider"}]}])
    bad_key = form_payload(sections=[{"fields": [{"label": "X", "field_key": "has space", "field_type": "text"}]}])
    bad_category = form_payload(email_category_id="not-a-uuid")

    for payload in (bad_type, bad_key, bad_category, {"sections": []}):
        response = client.post(FORMS, json=payload, headers=auth_headers)
        assert response.status_code == 422, payload


def test_list_forms(client, auth_headers, form_payload):
    for name in ("Alpha", "Bravo", "Charlie"):
        create(client, auth_headers, form_payload(name=name, sections=[]))

    response = client.get(FORMS, params={"sort": "name_asc", "items_per_page": 2}, headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert [f["name"] for f in body["data"]] == ["Alpha", "Bravo"]
    assert body["meta"] == {"total_items": 3, "items_per_page": 2, "current_page": 1, "total_pages": 2}

    response = client.get(FORMS, params={"name": "rav"}, headers=auth_headers)
    assert [f["name"] for f in response.json()["data"]] == ["Bravo"]


def test_list_forms_query_validation(client, auth_headers):
    assert client.get(FORMS, params={"items_per_page": 101}, headers=auth_headers).status_code == 422
    assert client.get(FORMS, params={"page": 0}, headers=auth_headers).status_code == 422
    assert client.get(FORMS, params={"sort": "random"}, headers=auth_headers).status_code == 422
    assert client.get(FORMS, params={"created_at": "yesterday"}, headers=auth_headers).status_code == 422


def test_delete_form(client, auth_headers, form_payload):
    created = create(client, auth_headers, form_payload())

    response = client.delete(f"{FORMS}/{created['id']}", headers=auth_headers)

    assert response.status_code == 204
    assert client.get(f"{FORMS}/{created['id']}", headers=auth_headers).status_code == 404


def test_delete_form_with_submission_conflicts(client, auth_headers, form_payload):
    created = create(client, auth_headers, form_payload())
    client.post(f"/api/v1/app/forms/{created['id']}/submissions", json={"submitted_data": {"full_name": "Jane"}})

    response = client.delete(f"{FORMS}/{created['id']}", headers=auth_headers)

    assert response.status_code == 409
    assert response.json()["detail"] == "Cannot delete form: it has existing submissions."


def test_malformed_form_id(client, auth_headers):
    response = client.get(f"{FORMS}/123", headers=auth_headers)

    assert response.status_code == 400


class TestPublicRoutes:
    def test_structure_needs_no_token(self, client, auth_headers, form_payload):
        created = create(client, auth_headers, form_payload())

        response = client.get(f"/api/v1/app/forms/{created['id']}/structure")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Contact Us"
        assert "slug" not in body
        assert "email_category_id" not in body
        assert [f["field_key"] for f in body["sections"][0]["fields"]] == ["full_name", "email"]

    def test_structure_of_missing_form(self, client):
        response = client.get("/api/v1/app/forms/7f1d9f56-8a53-4f58-9d43-1f4f0f7d2a10/structure")

        assert response.status_code == 404

    def test_submit_and_list_in_cms(self, client, auth_headers, form_payload):
        created = create(client, auth_headers, form_payload())

        response = client.post(f"/api/v1/app/forms/{created['id']}/submissions", json={
            "submitted_data": {"full_name": "Jane", "email": "jane@example.com"},
            "submitted_email": "jane@example.com",
        })
        assert response.status_code == 201
        submission = response.json()["item"]

        response = client.get(f"{FORMS}/{created['id']}/submissions",
                              params={"sort": "submitted_at:desc"}, headers=auth_headers)
        assert response.status_code == 200
        body = response.json()
        assert body["totalCount"] == 1
        assert body["page"] == 1
        assert body["limit"] == 10
        assert body["items"][0]["id"] == submission["id"]

        response = client.get(f"{FORMS}/submissions/{submission['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["item"]["submitted_email"] == "jane@example.com"

    def test_cms_submission_routes_need_token(self, client, auth_headers, form_payload):
        created = create(client, auth_headers, form_payload())

        response = client.get(f"{FORMS}/{created['id']}/submissions")

        assert response.status_code == 401

    def test_submit_to_missing_form(self, client):
        response = client.post("/api/v1/app/forms/7f1d9f56-8a53-4f58-9d43-1f4f0f7d2a10/submissions",
                               json={"submitted_data": {}})

        assert response.status_code == 404

    def test_submit_with_invalid_email(self, client, auth_headers, form_payload):
        created = create(client, auth_headers, form_payload())

        response = client.post(f"/api/v1/app/forms/{created['id']}/submissions",
                               json={"submitted_data": {}, "submitted_email": "not-an-email"})

        assert response.status_code == 422


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}
    assert response.headers["X-Request-ID"]
