"""Email categories and the email contents that belong to them"""
import pytest

from constants import PageLanguage
from dtos.request import (
    EmailCategoryCreateRequest,
    EmailCategoryUpdateRequest,
    EmailContentCreateRequest,
    EmailContentUpdateRequest,
)
from exceptions import ConflictError, NotFoundError, ValidationError
from models import EmailCategory, EmailContent, Form
from services.email_category_service import EmailCategoryService
from services.email_content_service import EmailContentService

MISSING_ID = "7f1d9f56-8a53-4f58-9d43-1f4f0f7d2a10"


@pytest.fixture
def categories(db_session):
    return EmailCategoryService(db_session)


@pytest.fixture
def contents(db_session):
    return EmailContentService(db_session)


@pytest.fixture
def category(categories):
    return categories.create_category(EmailCategoryCreateRequest(title="Contact"))


def content_request(category_id, **overrides):
    values = {
        "email_category_id": category_id,
        "language": "en",
        "label": "admin",
        "send_to": "sales@example.com",
        "send_from_email": "noreply@example.com",
        "send_from_name": "Website",
        "subject": "New enquiry",
    }
    values.update(overrides)
    return EmailContentCreateRequest(**values)


class TestEmailCategoryService:
    def test_create_strips_html_from_title(self, categories):
        category = categories.create_category(EmailCategoryCreateRequest(title="<b>Newsletter</b>"))

        assert category.title == "Newsletter"
        assert category.id

    def test_title_too_short_once_html_is_gone(self, categories):
        with pytest.raises(ValidationError):
            categories.create_category(EmailCategoryCreateRequest(title="<i>ab</i>"))

    def test_duplicate_title(self, categories, category):
        with pytest.raises(ConflictError, match="already exists"):
            categories.create_category(EmailCategoryCreateRequest(title="Contact"))

    def test_update_to_own_title_is_allowed(self, categories, category):
        updated = categories.update_category(category.id, EmailCategoryUpdateRequest(title="Contact"))

        assert updated.title == "Contact"

    def test_update_to_other_title_conflicts(self, categories, category):
        other = categories.create_category(EmailCategoryCreateRequest(title="Careers"))

        with pytest.raises(ConflictError):
            categories.update_category(other.id, EmailCategoryUpdateRequest(title="Contact"))

    def test_update_without_title_changes_nothing(self, categories, category):
        updated = categories.update_category(category.id, EmailCategoryUpdateRequest())

        assert updated.title == "Contact"

    def test_get_malformed_id(self, categories):
        with pytest.raises(ValidationError):
            categories.get_category("123")

    def test_get_missing(self, categories):
        with pytest.raises(NotFoundError):
            categories.get_category(MISSING_ID)

    def test_delete_removes_contents(self, categories, contents, category, db_session):
        contents.create_content(content_request(category.id))
        contents.create_content(content_request(category.id, label="user", language="th"))

        categories.delete_category(category.id)

        assert db_session.query(EmailCategory).count() == 0
        assert db_session.query(EmailContent).count() == 0

    def test_delete_used_by_form_conflicts(self, categories, category, db_session):
        db_session.add(Form(name="Contact", slug="contact", email_category_id=category.id))
        db_session.commit()

        with pytest.raises(ConflictError, match="used by 1 form"):
            categories.delete_category(category.id)

        assert db_session.query(EmailCategory).count() == 1

    def test_list_newest_first(self, categories, category):
        newer = categories.create_category(EmailCategoryCreateRequest(title="Careers"))

        titles = [c.title for c in categories.list_categories()]

        assert set(titles) == {"Contact", "Careers"}
        assert len(titles) == 2
        assert newer.created_at >= category.created_at


class TestEmailContentService:
    def test_create_sanitizes_text(self, contents, category):
        content = contents.create_content(content_request(
            category.id, header="<h1>Thanks</h1>", paragraph="We got <script>x()</script>it",
        ))

        assert content.header == "Thanks"
        assert content.paragraph == "We got it"
        assert content.email_category.title == "Contact"

    def test_create_for_missing_category(self, contents):
        with pytest.raises(ValidationError, match="not found"):
            contents.create_content(content_request(MISSING_ID))

    def test_duplicate_label_per_category_and_language(self, contents, category):
        contents.create_content(content_request(category.id))

        with pytest.raises(ConflictError):
            contents.create_content(content_request(category.id))

        # same label in another language is fine
        other = contents.create_content(content_request(category.id, language="th"))
        assert other.language == "th"

    def test_partial_update_keeps_other_fields(self, contents, category):
        content = contents.create_content(content_request(category.id))

        updated = contents.update_content(content.id, EmailContentUpdateRequest(subject="<b>Updated</b>"))

        assert updated.subject == "Updated"
        assert updated.label == "admin"
        assert updated.send_to == "sales@example.com"

    def test_update_into_existing_label_conflicts(self, contents, category):
        contents.create_content(content_request(category.id, label="user"))
        content = contents.create_content(content_request(category.id))

        with pytest.raises(ConflictError):
            contents.update_content(content.id, EmailContentUpdateRequest(label="user"))

    def test_update_label_to_blank_html_is_rejected(self, contents, category):
        content = contents.create_content(content_request(category.id))

        with pytest.raises(ValidationError):
            contents.update_content(content.id, EmailContentUpdateRequest(label="<br><br>"))

    def test_label_too_short_once_html_is_gone(self, contents, category, db_session):
        with pytest.raises(ValidationError, match="Label must be 3 to 100"):
            contents.create_content(content_request(category.id, label="<b>ab</b>"))

        assert db_session.query(EmailContent).count() == 0

    def test_update_label_too_short_once_html_is_gone(self, contents, category):
        content = contents.create_content(content_request(category.id))

        with pytest.raises(ValidationError, match="Label must be 3 to 100"):
            contents.update_content(content.id, EmailContentUpdateRequest(label="<i>ab</i>"))

        assert contents.get_content(content.id).label == "admin"

    def test_recipients_must_be_addresses(self, category):
        with pytest.raises(ValueError):
            content_request(category.id, send_to="sales team")
        with pytest.raises(ValueError):
            EmailContentUpdateRequest(bcc_email="not-an-address")

    def test_empty_recipients_are_allowed(self, contents, category):
        content = contents.create_content(content_request(category.id, send_to="", cc_email=""))

        assert content.send_to == ""
        assert content.cc_email == ""

    def test_by_category_and_language(self, contents, category):
        contents.create_content(content_request(category.id))
        contents.create_content(content_request(category.id, label="user"))
        contents.create_content(content_request(category.id, language="th"))

        english = contents.get_contents_by_category_and_language(category.id, PageLanguage.EN)

        assert sorted(c.label for c in english) == ["admin", "user"]

    def test_by_missing_category(self, contents):
        with pytest.raises(NotFoundError):
            contents.get_contents_by_category_and_language(MISSING_ID, PageLanguage.EN)

    def test_delete(self, contents, category, db_session):
        content = contents.create_content(content_request(category.id))

        contents.delete_content(content.id)

        assert db_session.query(EmailContent).count() == 0

    def test_invalid_link_is_rejected_by_schema(self, category):
        with pytest.raises(ValueError):
            content_request(category.id, top_img_link="javascript:alert(1)")


class TestEmailApi:
    def test_category_crud(self, client, auth_headers):
        response = client.post("/api/v1/cms/email-categories", json={"title": "Contact"}, headers=auth_headers)
        assert response.status_code == 201
        category_id = response.json()["id"]

        response = client.patch(f"/api/v1/cms/email-categories/{category_id}",
                                json={"title": "Contact us"}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["title"] == "Contact us"

        response = client.get("/api/v1/cms/email-categories", headers=auth_headers)
        assert [c["title"] for c in response.json()] == ["Contact us"]

        response = client.delete(f"/api/v1/cms/email-categories/{category_id}", headers=auth_headers)
        assert response.status_code == 204

        response = client.get(f"/api/v1/cms/email-categories/{category_id}", headers=auth_headers)
        assert response.status_code == 404

    def test_category_errors(self, client, auth_headers):
        client.post("/api/v1/cms/email-categories", json={"title": "Contact"}, headers=auth_headers)

        duplicate = client.post("/api/v1/cms/email-categories", json={"title": "Contact"}, headers=auth_headers)
        malformed = client.get("/api/v1/cms/email-categories/not-a-uuid", headers=auth_headers)

        assert duplicate.status_code == 409
        assert malformed.status_code == 400

    def test_category_requires_token(self, client):
        response = client.post("/api/v1/cms/email-categories", json={"title": "Contact"})

        assert response.status_code == 401

    def test_content_lookup_by_category_and_language(self, client, auth_headers):
        category_id = client.post("/api/v1/cms/email-categories", json={"title": "Contact"},
                                  headers=auth_headers).json()["id"]
        body = {
            "email_category_id": category_id,
            "language": "th",
            "label": "user",
            "send_from_email": "noreply@example.com",
            "subject": "Thank you",
        }
        response = client.post("/api/v1/cms/email-contents", json=body, headers=auth_headers)
        assert response.status_code == 201
        assert response.json()["email_category"]["title"] == "Contact"

        response = client.get(f"/api/v1/cms/email-contents/category/{category_id}/language/th",
                              headers=auth_headers)
        assert response.status_code == 200
        assert [c["label"] for c in response.json()] == ["user"]

        response = client.get(f"/api/v1/cms/email-contents/category/{category_id}/language/de",
                              headers=auth_headers)
        assert response.status_code == 422

    def test_content_for_missing_category_is_bad_request(self, client, auth_headers):
        body = {
            "email_category_id": MISSING_ID,
            "language": "en",
            "label": "admin",
            "send_from_email": "noreply@example.com",
            "subject": "Hello",
        }

        response = client.post("/api/v1/cms/email-contents", json=body, headers=auth_headers)

        assert response.status_code == 400
