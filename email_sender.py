import smtplib, ssl
from email.message import EmailMessage

from flask import current_app


def build_ebook_email(name):
    """Subject and body of the delivery email for one requester."""
    cfg   = current_app.config
    title = cfg["EBOOK_TITLE"]
    link  = cfg["EBOOK_DOWNLOAD_URL"]
    subject = f"Your free ebook: {title}"
    body = (
        f"Hello {name},\n\n"
        f"Thanks for requesting “{title}”. You can download it here:\n"
        f"{link}\n\n"
        "Enjoy!"
    )
    return subject, body


def send_email(to, subject, body):
    cfg = current_app.config

    msg = EmailMessage()
    msg["From"] = cfg["EMAIL_ADDRESS"]
    msg["To"] = to
    msg["Subject"] = subject
    msg.set_content(body)

    ctx = ssl.create_default_context()
    with smtplib.SMTP_SSL(cfg["SMTP_HOST"], cfg["SMTP_PORT"], context=ctx) as smtp:
        smtp.login(cfg["EMAIL_ADDRESS"], cfg["EMAIL_PASSWORD"])
        smtp.send_message(msg)
