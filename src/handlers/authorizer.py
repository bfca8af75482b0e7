"""API Gateway Lambda authorizer: validates the Clerk JWT on every action call."""

import asyncio
from typing import Any

from core.auth import get_auth_provider
from core.errors import AuthenticationError


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    # AuthProvider methods are async; asyncio.run() bridges them into this sync handler.
    try:
        token = _extract_token(event)
        auth_provider = get_auth_provider()
        auth_user = asyncio.run(auth_provider.verify_token(token))
        return _allow_policy(event["methodArn"], auth_user.user_id, auth_user.email, auth_user.name)
    except (KeyError, AuthenticationError):
        return _deny_policy(event["methodArn"])


def _extract_token(event: dict[str, Any]) -> str:
    headers = {k.lower(): v for k, v in (event.get("headers") or {}).items()}
    authorization = headers.get("authorization", "")
    if authorization.lower().startswith("bearer "):
        return authorization[7:].strip()

    query_params = event.get("queryStringParameters") or {}
    return query_params["token"]


def _allow_policy(method_arn: str, user_id: str, email: str, name: str) -> dict[str, Any]:
    return {
        "principalId": user_id,
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [{"Action": "execute-api:Invoke", "Effect": "Allow", "Resource": method_arn}],
        },
        "context": {"userId": user_id, "email": email, "name": name},
    }


def _deny_policy(method_arn: str) -> dict[str, Any]:
    return {
        "principalId": "unauthorized",
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [{"Action": "execute-api:Invoke", "Effect": "Deny", "Resource": method_arn}],
        },
    }
