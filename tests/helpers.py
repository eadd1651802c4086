"""Builders for API Gateway events and Slack webhook responses."""

from unittest.mock import MagicMock


def proxy_event(path):
    return {"resource": "/{proxy+}", "pathParameters": {"proxy": path}}


def slack_response(text, status_code=200):
    resp = MagicMock()
    resp.text = text
    resp.status_code = status_code
    return resp
