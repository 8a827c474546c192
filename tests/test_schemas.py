import pytest
from pydantic import ValidationError

from qds import schemas
from qds.schemas import (
    BlogPostCreate, ContactSubmissionCreate, JobApplicationCreate, JobApplicationStatusUpdate,
    ServiceCreate,
)
from qds.services.seed_data import loc


def field_names(error: ValidationError):
    return {err["loc"][0] for err in error.errors()}


class TestContactSubmission:
    def test_accepts_camel_case_and_strips_whitespace(self, contact_payload):
        contact_payload["name"] = "  Mariam  "
        submission = ContactSubmissionCreate.model_validate(contact_payload)
        assert submission.name == "Mariam"
        assert submission.service_needed == "Mobile App"

    @pytest.mark.parametrize("field, value", [
        ("name", "M"),
        ("company", "D"),
        ("phone", "1234"),
        ("projectDescription", "Too short"),
        ("email", "not-an-email"),
    ])
    def test_rejects_invalid_fields(self, contact_payload, field, value):
        contact_payload[field] = value
        with pytest.raises(ValidationError):
            ContactSubmissionCreate.model_validate(contact_payload)

    def test_server_owned_keys_are_dropped(self, contact_payload):
        contact_payload["id"] = "forged"
        contact_payload["createdAt"] = "2020-01-01T00:00:00"
        values = ContactSubmissionCreate.model_validate(contact_payload).values()
        assert "id" not in values
        assert "created_at" not in values


class TestJobApplication:
    def test_blank_urls_become_none(self, application_payload):
        payload = application_payload("career-1", resumeUrl="", portfolioUrl="   ")
        application = JobApplicationCreate.model_validate(payload)
        assert application.resume_url is None
        assert application.portfolio_url is None
        assert "resume_url" not in application.values()

    def test_relative_url_is_rejected(self, application_payload):
        payload = application_payload("career-1", resumeUrl="/files/cv.pdf")
        with pytest.raises(ValidationError) as exc:
            JobApplicationCreate.model_validate(payload)
        assert "resumeUrl" in field_names(exc.value)

    def test_short_cover_letter_is_rejected(self, application_payload):
        payload = application_payload("career-1", coverLetter="Hire me")
        with pytest.raises(ValidationError):
            JobApplicationCreate.model_validate(payload)

    def test_status_from_client_is_ignored(self, application_payload):
        payload = application_payload("career-1", status="hired")
        assert "status" not in JobApplicationCreate.model_validate(payload).values()

    def test_years_of_experience_accepts_number(self, application_payload):
        payload = application_payload("career-1", yearsOfExperience=7)
        assert JobApplicationCreate.model_validate(payload).years_of_experience == "7"

    def test_status_update_only_accepts_known_statuses(self):
        assert JobApplicationStatusUpdate(status="interview").status == "interview"
        with pytest.raises(ValidationError):
            JobApplicationStatusUpdate(status="accepted")


class TestLocalizedFields:
    def test_both_languages_required(self, service_payload):
        payload = service_payload(name={"en": "Starter"})
        with pytest.raises(ValidationError):
            ServiceCreate.model_validate(payload)

    def test_service_category_is_canonical(self, service_payload):
        with pytest.raises(ValidationError):
            ServiceCreate.model_validate(service_payload(category="web"))

    def test_service_defaults(self, service_payload):
        payload = service_payload()
        del payload["isActive"]
        del payload["displayOrder"]
        service = ServiceCreate.model_validate(payload)
        assert service.is_active is True
        assert service.display_order == 0


class TestTestimonial:
    def test_integer_rating_is_coerced(self, testimonial_payload):
        testimonial_payload["rating"] = 4
        assert schemas.TestimonialCreate.model_validate(testimonial_payload).rating == "4"

    @pytest.mark.parametrize("rating", ["0", "6", "five"])
    def test_rating_out_of_range(self, testimonial_payload, rating):
        testimonial_payload["rating"] = rating
        with pytest.raises(ValidationError):
            schemas.TestimonialCreate.model_validate(testimonial_payload)

    def test_update_keeps_only_sent_fields(self):
        changes = schemas.TestimonialUpdate.model_validate({"rating": "3"}).changes()
        assert changes == {"rating": "3"}

    def test_update_can_clear_avatar(self):
        changes = schemas.TestimonialUpdate.model_validate({"avatarUrl": None}).changes()
        assert changes == {"avatar_url": None}


class TestBlogSlug:
    def test_slug_is_lowercased(self, blog_payload):
        post = BlogPostCreate.model_validate(blog_payload(slug="My-Post-2024"))
        assert post.slug == "my-post-2024"

    @pytest.mark.parametrize("slug", ["has space", "double--hyphen", "-leading", "under_score"])
    def test_invalid_slugs(self, blog_payload, slug):
        with pytest.raises(ValidationError):
            BlogPostCreate.model_validate(blog_payload(slug=slug))

    def test_localized_values_round_trip(self, blog_payload):
        post = BlogPostCreate.model_validate(blog_payload())
        assert post.values()["title"] == loc("First Post", "المقال الأول")
