# backend/notifiers/sns_topic.py
import json
import logging
import boto3
from botocore.exceptions import BotoCoreError, ClientError

from backend.notifiers.outcome import DispatchOutcome
from backend.utils.env import AWS_REGION
from backend.utils.errors import ConfigurationMissingError, TopicPublishError

logger = logging.getLogger(__name__)

SINK = "sns"

sns = boto3.client("sns", region_name=AWS_REGION)


def send_topic_message(message, topic_arn, client=None):
    """
    Publish the JSON-encoded message to the stage's topic.
    Success payload is the MessageId SNS hands back.
    """
    if not topic_arn:
        return DispatchOutcome.failure(SINK, ConfigurationMissingError("No SNS_TOPIC provided."))

    client = client or sns
    try:
        resp = client.publish(TopicArn=topic_arn, Message=json.dumps(message))
    except ClientError as e:
        status = e.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
        logger.warning("sns publish failed: %s", e)
        return DispatchOutcome.failure(SINK, TopicPublishError(str(e), status_code=status))
    except BotoCoreError as e:
        logger.warning("sns publish failed: %s", e)
        return DispatchOutcome.failure(SINK, TopicPublishError(str(e)))

    return DispatchOutcome.success(SINK, resp.get("MessageId"))
