from types import SimpleNamespace

import pytest

FUNCTION_ARN = "arn:aws:lambda:us-west-2:123456789012:function:closing-notifier"
STAGE_KEYS = ("SLACK_HOOK_PROD", "SLACK_HOOK_DEV", "SNS_TOPIC_PROD", "SNS_TOPIC_DEV")


@pytest.fixture(autouse=True)
def clean_stage_env(monkeypatch):
    """Each test starts with no sink secrets configured."""
    for key in STAGE_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def prod_env(monkeypatch):
    monkeypatch.setenv("SLACK_HOOK_PROD", "T000/B000/prodsecret")
    monkeypatch.setenv("SNS_TOPIC_PROD", "arn:aws:sns:us-west-2:123456789012:closing-prod")


@pytest.fixture
def prod_context():
    return SimpleNamespace(invoked_function_arn=FUNCTION_ARN + ":prod")


@pytest.fixture
def dev_context():
    return SimpleNamespace(invoked_function_arn=FUNCTION_ARN + ":dev")
