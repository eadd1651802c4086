# backend/utils/env.py
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

AWS_REGION = os.getenv("AWS_REGION", "us-west-2")
SLACK_WEBHOOK_HOST = "hooks.slack.com"
SLACK_TIMEOUT = 15  # seconds

PROD = "prod"
DEV = "dev"


@dataclass(frozen=True)
class StageConfig:
    stage: str
    slack_hook: str | None = None
    sns_topic: str | None = None


def stage_from_arn(function_arn):
    """
    Lambda ARNs invoked through an alias end in the alias name, e.g.
    arn:aws:lambda:us-west-2:123456789012:function:closing-notifier:prod.
    Anything other than a trailing "prod" runs as dev.
    """
    if not function_arn:
        return DEV
    return PROD if function_arn.split(":")[-1] == PROD else DEV


def load_stage_config(stage, environ=None):
    environ = os.environ if environ is None else environ
    suffix = "_" + stage.upper()
    return StageConfig(
        stage=stage,
        slack_hook=environ.get("SLACK_HOOK" + suffix) or None,
        sns_topic=environ.get("SNS_TOPIC" + suffix) or None,
    )
