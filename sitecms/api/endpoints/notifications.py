"""
Contact form and career application endpoints.

Both validate the submission first, then hand the email to the configured
provider. Without a provider they answer 503 with "received": true so the
frontend can tell the visitor the form itself was fine.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from sitecms.api.endpoints.uploads import read_upload
from sitecms.core.config import Settings
from sitecms.core.deps import get_email_provider, get_settings, get_storage
from sitecms.core.errors import ServiceUnavailable, UpstreamFailure, ValidationFailed
from sitecms.core.storage import StorageBackend, StorageError
from sitecms.schemas.notification import ContactSubmission, JobApplication, NotificationResponse
from sitecms.services.email_service import EmailAttachment, EmailDeliveryError, EmailProvider
from sitecms.services.notifications import send_application_notification, send_contact_notification

router = APIRouter(tags=["Notifications"])
logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "Email service is not configured"

ALLOWED_RESUME_TYPES = {
    "application/pdf",
    "application/msword",  # .doc
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"  # .docx
}
ALLOWED_RESUME_EXTENSIONS = {".pdf", ".doc", ".docx"}


async def read_submission(request: Request) -> Dict[str, Any]:
    """Accept the form either as JSON or as form fields."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise ValidationFailed("Request body is not valid JSON")
        if not isinstance(payload, dict):
            raise ValidationFailed("Request body must be a JSON object")
        return payload

    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


@router.post("/contact", response_model=NotificationResponse)
async def submit_contact_form(
    request: Request,
    provider: Optional[EmailProvider] = Depends(get_email_provider),
    settings: Settings = Depends(get_settings)
):
    """
    Forward a contact form submission to the site owner by email.

    Raises:
        400: name or email missing/invalid
        503: No email provider configured
        500: Provider rejected the message (details passed through)
    """
    payload = await read_submission(request)
    try:
        submission = ContactSubmission.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    if provider is None:
        logger.warning(f"Contact form from {submission.email} received but email is not configured")
        raise ServiceUnavailable(NOT_CONFIGURED_MESSAGE, received=True)

    try:
        message_id = await run_in_threadpool(
            send_contact_notification, provider, submission, settings.notification_recipient
        )
    except EmailDeliveryError as e:
        logger.error(f"Error sending contact email from {submission.email}: {e.message}")
        raise UpstreamFailure("Failed to send email", details=e.message, code=e.code)

    return NotificationResponse(message="Email sent successfully", messageId=message_id)


@router.post("/career/apply", response_model=NotificationResponse)
async def apply_for_job(
    resume: Optional[UploadFile] = File(None),
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    job_title: Optional[str] = Form(None, alias="jobTitle"),
    provider: Optional[EmailProvider] = Depends(get_email_provider),
    storage: Optional[StorageBackend] = Depends(get_storage),
    settings: Settings = Depends(get_settings)
):
    """
    Email a job application with the resume attached.

    The resume is sent as a binary attachment. With RESUME_RETENTION=keep
    it is also stored under resumes/ in the upload backend before sending.

    Raises:
        400: Missing/invalid fields, missing resume, wrong type, too large
        503: No email provider configured
        500: Provider rejected the message
    """
    try:
        fields = {"name": name, "email": email, "phone": phone, "jobTitle": job_title}
        application = JobApplication.model_validate(
            {key: value for key, value in fields.items() if value is not None}
        )
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    if resume is None or not resume.filename:
        raise ValidationFailed("Resume file is required")

    file_ext = os.path.splitext(resume.filename)[1].lower()
    if resume.content_type not in ALLOWED_RESUME_TYPES and file_ext not in ALLOWED_RESUME_EXTENSIONS:
        raise ValidationFailed(
            f"Only PDF, DOC, and DOCX files are supported. Received: {resume.content_type}"
        )

    content = await read_upload(resume, settings.max_resume_bytes)

    resume_url = None
    if settings.RESUME_RETENTION == "keep":
        if storage is None:
            logger.error("RESUME_RETENTION=keep but upload storage is not configured; resume not retained")
        else:
            try:
                stored = await run_in_threadpool(
                    storage.save, content, resume.filename, resume.content_type or "", "resumes"
                )
                resume_url = stored.url
                logger.info(f"Retained resume from {application.email} at {resume_url}")
            except StorageError as e:
                logger.error(f"Could not retain resume from {application.email}: {e}")

    if provider is None:
        logger.warning(f"Application from {application.email} received but email is not configured")
        raise ServiceUnavailable(NOT_CONFIGURED_MESSAGE, received=True, resume_url=resume_url)

    attachment = EmailAttachment(
        filename=resume.filename,
        content=content,
        content_type=resume.content_type or "application/octet-stream",
    )

    try:
        message_id = await run_in_threadpool(
            send_application_notification,
            provider,
            application,
            attachment,
            settings.notification_recipient,
            resume_url,
        )
    except EmailDeliveryError as e:
        logger.error(f"Error sending job application email from {application.email}: {e.message}")
        raise UpstreamFailure("Failed to submit application", details=e.message, code=e.code)

    return NotificationResponse(message="Application submitted successfully", messageId=message_id)
