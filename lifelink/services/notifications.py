import logging

from flask import current_app
from flask_mail import Message

from lifelink.extensions import mail

logger = logging.getLogger(__name__)


def send_notification(subject, body, recipients=None):
    """Log the notification and mail it to the coordinators.

    Returns True when a message was handed to the mail server. Delivery
    failures are logged and reported as False; they never fail the request.
    """
    recipients = recipients or current_app.config.get('NOTIFICATION_RECIPIENTS') or []
    logger.info('Notification: %s', body)
    if not recipients:
        return False

    msg = Message(subject=subject, recipients=list(recipients), body=body)
    try:
        mail.send(msg)
        return True
    except OSError as e:
        logger.error('Error sending notification: %s', e)
        return False
