"""
Local development server for the Users API.

Wraps the two Lambda handlers in a FastAPI app so they can be exercised over
HTTP without deploying:

    uvicorn main:app --reload

Each request is turned into an API Gateway proxy event and the handler's
proxy response is relayed unchanged.
"""

import logging
from typing import Any, Callable, Dict

from dotenv import load_dotenv
from fastapi import FastAPI, Request, Response
from starlette.concurrency import run_in_threadpool

# Load environment variables before the handlers read LOG_LEVEL at import
load_dotenv()

from lambdas.create_user import handler as create_user_handler  # noqa: E402
from lambdas.list_users import handler as list_users_handler  # noqa: E402
from version import get_version_info  # noqa: E402

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Users API",
    description="Local runner for the ListUsers and CreateUser Lambdas",
    version=get_version_info()["version"],
)


async def _to_proxy_event(request: Request) -> Dict[str, Any]:
    """Build an API Gateway proxy event from an incoming HTTP request."""
    raw_body = await request.body()
    return {
        'httpMethod': request.method,
        'path': request.url.path,
        'headers': dict(request.headers),
        'queryStringParameters': dict(request.query_params) or None,
        'body': raw_body.decode('utf-8') if raw_body else None,
        'isBase64Encoded': False,
    }


def _to_response(proxy_response: Dict[str, Any]) -> Response:
    return Response(
        content=proxy_response.get('body', ''),
        status_code=proxy_response['statusCode'],
        headers=proxy_response.get('headers') or {},
    )


async def _invoke(lambda_handler: Callable, request: Request) -> Response:
    event = await _to_proxy_event(request)
    logger.debug(f"Relaying {event['httpMethod']} {event['path']} to {lambda_handler.__module__}")
    return _to_response(await run_in_threadpool(lambda_handler, event, None))


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": get_version_info()}


@app.get("/users")
async def list_users_endpoint(request: Request):
    """List the names of all users."""
    return await _invoke(list_users_handler.handler, request)


@app.post("/users")
async def create_user_endpoint(request: Request):
    """Create a user from {"name": string}."""
    return await _invoke(create_user_handler.handler, request)
