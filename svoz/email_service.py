"""
Email Service Module
Sends collection-day alerts using Resend API.
"""

import logging
import resend
from typing import List
from config import Config

logger = logging.getLogger(__name__)

# Initialize Resend
resend.api_key = Config.RESEND_API_KEY

ALERT_SUBJECT = "Dnes je svoz odpadu"

EMAIL_WRAPPER_START = """
<!DOCTYPE html>
<html lang="cs">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="font-family: Arial, sans-serif; background-color: #f5f5f5; margin: 0; padding: 20px;">
    <div style="max-width: 480px; margin: 0 auto; background: #ffffff; border-radius: 25px; padding: 24px; box-shadow: 0 8px 16px rgba(0, 0, 0, 0.2);">
"""

EMAIL_WRAPPER_END = """
    </div>
</body>
</html>
"""


def _build_alert_email_html(alerts: List[str]) -> str:
    """Build HTML content listing today's collections."""
    items_html = "".join([f"<li>{alert}</li>" for alert in alerts])

    return EMAIL_WRAPPER_START + f"""
        <h2 style="color: #8b0000; margin: 0 0 16px 0;">🗑️ {ALERT_SUBJECT}</h2>
        <p>Dnes se sváží následující druhy odpadu:</p>
        <ul>
            {items_html}
        </ul>
""" + EMAIL_WRAPPER_END


def send_collection_alert(alerts: List[str]) -> bool:
    """
    Send the collection-day alert email.

    Args:
        alerts: Lines like 'Papír: 15.10.2025 (St)'

    Returns:
        True if email sent successfully, False otherwise
    """
    if not Config.EMAIL_ENABLED:
        logger.info(f"[EMAIL DISABLED] Would send collection alert: {', '.join(alerts)}")
        return True

    if not Config.EMAIL_TO:
        logger.error("[EMAIL ERROR] No recipients configured (EMAIL_TO)")
        return False

    try:
        params = {
            "from": Config.EMAIL_FROM,
            "to": Config.EMAIL_TO,
            "subject": ALERT_SUBJECT,
            "html": _build_alert_email_html(alerts)
        }

        response = resend.Emails.send(params)
        logger.info(f"[EMAIL SENT] Collection alert to {len(Config.EMAIL_TO)} recipients - ID: {response.get('id', 'unknown')}")
        return True

    except Exception as e:
        logger.error(f"[EMAIL ERROR] Failed to send collection alert: {e}")
        return False
