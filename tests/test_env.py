import pytest

from backend.utils.env import DEV, PROD, StageConfig, load_stage_config, stage_from_arn

ARN = "arn:aws:lambda:us-west-2:123456789012:function:closing-notifier"


@pytest.mark.parametrize("arn, stage", [
    (ARN + ":prod", PROD),
    (ARN + ":dev", DEV),
    (ARN + ":staging", DEV),
    (ARN, DEV),
    (ARN + ":PROD", DEV),
    (None, DEV),
    ("", DEV),
])
def test_stage_from_arn(arn, stage):
    assert stage_from_arn(arn) == stage


def test_load_stage_config_picks_suffixed_keys():
    environ = {
        "SLACK_HOOK_PROD": "prod-hook",
        "SLACK_HOOK_DEV": "dev-hook",
        "SNS_TOPIC_PROD": "prod-topic",
    }
    assert load_stage_config(PROD, environ) == StageConfig(PROD, "prod-hook", "prod-topic")
    assert load_stage_config(DEV, environ) == StageConfig(DEV, "dev-hook", None)


def test_empty_values_count_as_missing():
    config = load_stage_config(DEV, {"SLACK_HOOK_DEV": "", "SNS_TOPIC_DEV": ""})
    assert config.slack_hook is None
    assert config.sns_topic is None


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("SNS_TOPIC_DEV", "arn:aws:sns:us-west-2:123456789012:closing-dev")
    assert load_stage_config(DEV).sns_topic == "arn:aws:sns:us-west-2:123456789012:closing-dev"


def test_stage_config_is_frozen():
    config = StageConfig(PROD)
    with pytest.raises(AttributeError):
        config.slack_hook = "changed"
