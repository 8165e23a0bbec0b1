"""
Tests for contact form and career application endpoints.
"""

from sitecms.services.email_service import EmailDeliveryError

from conftest import RecordingEmailProvider

CONTACT = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "businessName": "Doe Books",
    "phoneNumber": "555-0100",
    "howCanWeHelp": "Publishing",
    "bestTimeToContact": "Morning",
    "message": "We need <b>help</b> with our catalogue.",
}

APPLICATION = {"name": "Sam Lee", "email": "sam@example.com", "phone": "555-0199", "jobTitle": "Editor"}


def _resume(content=b"%PDF-1.4 resume", filename="resume.pdf", content_type="application/pdf"):
    return {"resume": (filename, content, content_type)}


class TestContactForm:

    def test_contact_sent(self, client, email_provider):
        response = client.post("/api/contact", json=CONTACT)

        assert response.status_code == 200
        assert response.json() == {"message": "Email sent successfully", "messageId": "msg-1"}
        sent = email_provider.sent[0]
        assert sent.to == ["owner@example.com"]
        assert sent.reply_to == "jane@example.com"
        assert sent.subject == "New Contact Form Submission from Jane Doe"
        assert "Doe Books" in sent.html
        assert "&lt;b&gt;help&lt;/b&gt;" in sent.html

    def test_contact_as_form_fields(self, client, email_provider):
        response = client.post("/api/contact", data=CONTACT)

        assert response.status_code == 200
        assert email_provider.sent[0].reply_to == "jane@example.com"

    def test_contact_validation(self, client, email_provider):
        response = client.post("/api/contact", json={"name": "Jane"})

        assert response.status_code == 400
        assert "email" in response.json()["error"]
        assert email_provider.sent == []

    def test_contact_rejects_malformed_email(self, client, email_provider):
        response = client.post("/api/contact", json={**CONTACT, "email": "jane@doe@example.com"})

        assert response.status_code == 400
        assert "email" in response.json()["error"]
        assert email_provider.sent == []

    def test_multiline_name_becomes_one_header_line(self, client, email_provider):
        response = client.post("/api/contact", data={**CONTACT, "name": "Doe,\r\nJane"})

        assert response.status_code == 200
        sent = email_provider.sent[0]
        assert sent.sender_name == "Doe, Jane"
        assert sent.subject == "New Contact Form Submission from Doe, Jane"

    def test_contact_without_provider_is_503(self, make_client):
        client = make_client(email_provider=None)

        response = client.post("/api/contact", json=CONTACT)

        assert response.status_code == 503
        assert response.json() == {"error": "Email service is not configured", "received": True}

    def test_contact_validation_runs_before_provider_check(self, make_client):
        client = make_client(email_provider=None)

        response = client.post("/api/contact", json={"email": "bad"})

        assert response.status_code == 400

    def test_provider_failure_is_500_with_detail(self, make_client):
        provider = RecordingEmailProvider(fail_with=EmailDeliveryError("Mailbox unavailable", code="550"))
        client = make_client(email_provider=provider)

        response = client.post("/api/contact", json=CONTACT)

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to send email",
            "details": "Mailbox unavailable",
            "code": "550",
        }


class TestCareerApplication:

    def test_application_sent_with_attachment(self, client, email_provider):
        response = client.post("/api/career/apply", data=APPLICATION, files=_resume())

        assert response.status_code == 200
        assert response.json()["message"] == "Application submitted successfully"
        sent = email_provider.sent[0]
        assert sent.subject == "New Job Application: Editor - Sam Lee"
        assert sent.reply_to == "sam@example.com"
        assert len(sent.attachments) == 1
        assert sent.attachments[0].filename == "resume.pdf"
        assert sent.attachments[0].content == b"%PDF-1.4 resume"

    def test_resume_required(self, client):
        response = client.post("/api/career/apply", data=APPLICATION)

        assert response.status_code == 400
        assert response.json()["error"] == "Resume file is required"

    def test_resume_type_checked(self, client):
        response = client.post(
            "/api/career/apply", data=APPLICATION, files=_resume(filename="cv.exe", content_type="application/x-msdownload")
        )
        assert response.status_code == 400

    def test_missing_name(self, client):
        data = dict(APPLICATION)
        del data["name"]

        response = client.post("/api/career/apply", data=data, files=_resume())

        assert response.status_code == 400
        assert "name" in response.json()["error"]

    def test_without_provider_is_503(self, make_client):
        client = make_client(email_provider=None)

        response = client.post("/api/career/apply", data=APPLICATION, files=_resume())

        assert response.status_code == 503
        assert response.json()["received"] is True

    def test_provider_failure(self, make_client):
        provider = RecordingEmailProvider(fail_with=EmailDeliveryError("Attachment too large", code="validation_error"))
        client = make_client(email_provider=provider)

        response = client.post("/api/career/apply", data=APPLICATION, files=_resume())

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to submit application"
        assert response.json()["details"] == "Attachment too large"

    def test_resume_discarded_by_default(self, client, test_settings):
        import os

        client.post("/api/career/apply", data=APPLICATION, files=_resume())

        assert not os.path.exists(os.path.join(test_settings.UPLOAD_DIR, "resumes"))

    def test_resume_kept_when_configured(self, make_client, test_settings, email_provider):
        import os

        test_settings.RESUME_RETENTION = "keep"
        client = make_client(email_provider=email_provider)

        response = client.post("/api/career/apply", data=APPLICATION, files=_resume())

        assert response.status_code == 200
        kept = os.listdir(os.path.join(test_settings.UPLOAD_DIR, "resumes"))
        assert len(kept) == 1
        assert kept[0].endswith(".pdf")
        assert "/uploads/resumes/" in email_provider.sent[0].html
