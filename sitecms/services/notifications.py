"""
Notification emails sent to the site owner.

Two triggers:
- contact form submission
- job application (resume attached)

Both set the submitter's address as reply-to so the owner can answer directly.
"""

import logging
from html import escape
from typing import Optional

from sitecms.schemas.notification import ContactSubmission, JobApplication
from sitecms.services.email_service import EmailAttachment, EmailProvider, OutgoingEmail

logger = logging.getLogger(__name__)


def _row(label: str, value: Optional[str]) -> str:
    return f'<p style="margin: 5px 0; color: #374151;"><strong>{label}:</strong> {escape(value or "")}</p>'


def _wrap(title: str, rows: str, footer: str = "") -> str:
    return f"""
<html>
<body style="font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px;">
    <div style="background-color: #f3f4f6; padding: 15px; border-radius: 8px; margin-bottom: 20px;">
        <h3 style="margin: 0 0 10px 0; color: #374151;">{title}</h3>
        {rows}
    </div>
    {footer}
</body>
</html>
"""


def build_contact_html(submission: ContactSubmission) -> str:
    rows = "\n        ".join([
        _row("Name", submission.name),
        _row("Email", submission.email),
        _row("Business Name", submission.business_name),
        _row("Phone", submission.phone_number),
        _row("Topic", submission.how_can_we_help),
        _row("Best Time to Contact", submission.best_time_to_contact),
    ])
    message = escape(submission.message or "")
    footer = f"""
    <div style="border-left: 4px solid #8b5cf6; padding-left: 15px;">
        <h4 style="color: #374151; margin-top: 0;">Message:</h4>
        <p style="white-space: pre-wrap;">{message}</p>
    </div>"""
    return _wrap("New Contact Request", rows, footer)


def build_application_html(application: JobApplication) -> str:
    rows = "\n        ".join([
        _row("Job Title", application.job_title),
        _row("Name", application.name),
        _row("Email", application.email),
        _row("Phone", application.phone),
    ])
    return _wrap("New Job Application", rows)


def send_contact_notification(provider: EmailProvider, submission: ContactSubmission, recipient: str) -> str:
    """
    Email a contact form submission to the site owner.

    Returns:
        Provider message id

    Raises:
        EmailDeliveryError: If the provider fails
    """
    logger.info(f"Sending contact form email from {submission.email}")
    return provider.send(OutgoingEmail(
        to=[recipient],
        subject=f"New Contact Form Submission from {submission.name}",
        html=build_contact_html(submission),
        reply_to=submission.email,
        sender_name=submission.name,
    ))


def send_application_notification(
    provider: EmailProvider,
    application: JobApplication,
    resume: EmailAttachment,
    recipient: str,
    resume_url: Optional[str] = None
) -> str:
    """
    Email a job application to the site owner with the resume attached.

    Args:
        provider: Configured email provider
        application: Validated applicant fields
        resume: Resume file, attached as binary content
        recipient: Owner address
        resume_url: Where the retained copy lives, when resumes are kept

    Returns:
        Provider message id
    """
    logger.info(f"Sending job application email from {application.email}")
    html = build_application_html(application)
    if resume_url:
        html = html.replace("</body>", f"    <p>Stored copy: {escape(resume_url)}</p>\n</body>")

    return provider.send(OutgoingEmail(
        to=[recipient],
        subject=f"New Job Application: {application.job_title or 'General'} - {application.name}",
        html=html,
        reply_to=application.email,
        sender_name=application.name,
        attachments=[resume],
    ))
