# backend/notifiers/slack.py
import logging
import requests

from backend.notifiers.outcome import DispatchOutcome
from backend.utils.env import SLACK_TIMEOUT, SLACK_WEBHOOK_HOST
from backend.utils.errors import ConfigurationMissingError, SlackDeliveryError

logger = logging.getLogger(__name__)

SINK = "slack"


def webhook_url(webhook_path):
    return f"https://{SLACK_WEBHOOK_HOST}/services/{webhook_path.lstrip('/')}"


def send_to_slack(message, webhook_path, timeout=SLACK_TIMEOUT):
    """
    POST {"text": message} to the incoming webhook. Slack answers a good
    request with the literal body "ok"; anything else is its error code
    (e.g. "invalid_payload", "no_service").
    """
    if not webhook_path:
        return DispatchOutcome.failure(SINK, ConfigurationMissingError("No SLACK_HOOK provided."))

    try:
        resp = requests.post(webhook_url(webhook_path), json={"text": message}, timeout=timeout)
    except requests.RequestException as e:
        logger.warning("slack request failed: %s", e)
        return DispatchOutcome.failure(SINK, SlackDeliveryError(f"Error with Slack request: {e}"))

    body = resp.text
    if body == "ok":
        return DispatchOutcome.success(SINK, body)

    logger.warning("slack rejected message status=%s body=%r", resp.status_code, body)
    status = resp.status_code if resp.status_code >= 400 else None
    return DispatchOutcome.failure(SINK, SlackDeliveryError(body or None, status_code=status))
