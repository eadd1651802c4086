# backend/app.py
# Local stand-in for the API Gateway proxy route in front of the notify lambda.
from types import SimpleNamespace

from fastapi import FastAPI, Response

from backend.lambda_fns.notify import lambda_handler as notify
from backend.utils.env import DEV, PROD, stage_from_arn

app = FastAPI()

FUNCTION_ARN = "arn:aws:lambda:us-west-2:000000000000:function:closing-notifier"


def proxy_event(path):
    return {
        "resource": "/{proxy+}",
        "path": "/" + path,
        "httpMethod": "POST",
        "pathParameters": {"proxy": path},
    }


def fake_context(stage):
    return SimpleNamespace(invoked_function_arn=f"{FUNCTION_ARN}:{stage}")


@app.post("/closing/{kind}")
def api_closing(kind: str, stage: str = DEV):
    context = fake_context(stage)
    result = notify(proxy_event(f"closing/{kind}"), context)
    # dev failures come back as a JSON diagnostic body
    json_body = result["statusCode"] != 200 and stage_from_arn(context.invoked_function_arn) != PROD
    return Response(
        content=result["body"],
        status_code=result["statusCode"],
        headers=result["headers"],
        media_type="application/json" if json_body else "text/plain",
    )


@app.get("/")
def health():
    return {"status": "ok"}
