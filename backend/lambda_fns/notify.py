# backend/lambda_fns/notify.py
import json
import logging
import traceback
from concurrent.futures import ThreadPoolExecutor

from backend.notifiers.outcome import DispatchOutcome
from backend.notifiers.slack import SINK as SLACK_SINK, send_to_slack
from backend.notifiers.sns_topic import SINK as SNS_SINK, send_topic_message
from backend.utils.env import PROD, load_stage_config, stage_from_arn
from backend.utils.errors import NotifierError
from backend.utils.messages import resolve_message

logger = logging.getLogger()
logger.setLevel(logging.INFO)

SUCCESS_BODY = "Message sent, thanks guys!"


def dispatch(message, config):
    """
    Send to Slack and SNS at the same time and wait for both.
    Outcomes come back in sink order (slack, sns); a failure in one
    branch never stops the other.
    """
    with ThreadPoolExecutor(max_workers=2) as ex:
        futures = [
            (SLACK_SINK, ex.submit(send_to_slack, message, config.slack_hook)),
            (SNS_SINK, ex.submit(send_topic_message, message, config.sns_topic)),
        ]
        return [settle(sink, fut) for sink, fut in futures]


def settle(sink, future):
    try:
        return future.result()
    except Exception as e:
        logger.error("%s dispatch raised: %s", sink, traceback.format_exc())
        return DispatchOutcome.failure(sink, e)


def first_failure(outcomes):
    for outcome in outcomes:
        if not outcome.ok:
            return outcome.error
    return None


def build_response(error=None, outcomes=None, stage=PROD):
    """
    The one exit point: always returns an API Gateway proxy response.
    Dev builds carry every sink outcome in the body so failures are visible
    from the button without digging through CloudWatch.
    """
    outcomes = outcomes or []
    if error is None:
        logger.info("notification sent: %s", [o.to_dict() for o in outcomes])
        return {
            "isBase64Encoded": False,
            "headers": {},
            "statusCode": 200,
            "body": SUCCESS_BODY,
        }

    logger.error("notification failed: %s", error)
    status = getattr(error, "status_code", None)
    if not isinstance(status, int) or status < 400:
        status = 500
    body = str(error) or error.__class__.__name__
    if stage != PROD:
        body = json.dumps({"error": body, "outcomes": [o.to_dict() for o in outcomes]})
    return {
        "isBase64Encoded": False,
        "headers": {},
        "statusCode": status,
        "body": body,
    }


def lambda_handler(event, context):
    """
    Input: API Gateway proxy event, path "closing/soon" | "closing/now" | "closing/early"
    Output: API Gateway proxy response
    """
    stage = stage_from_arn(getattr(context, "invoked_function_arn", None))
    logger.info("Running in %s mode.", stage)

    error = None
    outcomes = []
    try:
        config = load_stage_config(stage)
        path = ((event or {}).get("pathParameters") or {}).get("proxy")
        logger.info("closing event path=%s", path)
        message = resolve_message(path)
        outcomes = dispatch(message, config)
        error = first_failure(outcomes)
    except NotifierError as e:
        error = e
    except Exception as e:
        logger.error("notify exception: %s", traceback.format_exc())
        error = e

    return build_response(error, outcomes, stage)
