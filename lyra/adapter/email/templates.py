"""Reader invitation email bodies."""

from html import escape

from lyra.domain.service.notification_service import ReaderInvitationEmail


def subject_line(email: ReaderInvitationEmail) -> str:
    return f"Beta Reader Invitation: {email.project_title}"


def _expiry_date(email: ReaderInvitationEmail) -> str:
    expires = email.expires_at
    return f"{expires:%B} {expires.day}, {expires.year}"


def render_text(email: ReaderInvitationEmail, reader_url: str) -> str:
    """Plain-text body."""
    chapters = "\n".join(
        f"Chapter {i}: {name}" for i, name in enumerate(email.chapter_names, start=1)
    )
    message = f"\n{email.message}\n" if email.message else ""

    return f"""Hi {email.reader_name},

{email.author_name} has invited you to be a beta reader for their manuscript "{email.project_title}".
{message}
CHAPTERS AVAILABLE:
{chapters}

ACCESS LINK:
{reader_url}

This invitation expires on {_expiry_date(email)}.

To access the manuscript, click the link above or paste it into your browser. You'll be able to read the chapters and leave feedback using our annotation tools.

Thank you for being a beta reader!

---
Sent via Lyra"""


def render_html(email: ReaderInvitationEmail, reader_url: str) -> str:
    """HTML body. Author-supplied text is escaped."""
    chapter_items = "".join(
        f'<li style="margin: 5px 0;">Chapter {i}: {escape(name)}</li>'
        for i, name in enumerate(email.chapter_names, start=1)
    )
    message_block = ""
    if email.message:
        message_html = escape(email.message).replace("\n", "<br>")
        message_block = (
            '<div style="background-color: #f9fafb; border-left: 4px solid #3b82f6; '
            'padding: 15px; margin: 20px 0; border-radius: 4px;">'
            f'<p style="margin: 0; font-style: italic; color: #4b5563;">{message_html}</p>'
            "</div>"
        )
    url = escape(reader_url, quote=True)

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{escape(subject_line(email))}</title>
</head>
<body style="font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
  <h1 style="color: #3b82f6; font-size: 24px;">Beta Reader Invitation</h1>
  <p>Hi <strong>{escape(email.reader_name)}</strong>,</p>
  <p>
    <strong>{escape(email.author_name)}</strong> has invited you to be a beta reader for their manuscript
    <strong style="color: #3b82f6;">"{escape(email.project_title)}"</strong>.
  </p>
  {message_block}
  <h2 style="font-size: 18px;">Chapters Available:</h2>
  <ul style="list-style-type: none; padding: 0;">{chapter_items}</ul>
  <p style="text-align: center; margin: 30px 0;">
    <a href="{url}" style="background-color: #3b82f6; color: #ffffff; text-decoration: none; padding: 14px 32px; border-radius: 6px; font-weight: bold;">Access Manuscript</a>
  </p>
  <p style="font-size: 14px; color: #92400e;">
    <strong>Note:</strong> This invitation expires on <strong>{_expiry_date(email)}</strong>
  </p>
  <p style="color: #9ca3af; font-size: 11px; text-align: center;">
    Thank you for being a beta reader!<br>Sent via <strong>Lyra</strong> - Creative Writing Platform
  </p>
</body>
</html>"""
