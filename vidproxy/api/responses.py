from starlette.responses import PlainTextResponse, Response

from vidproxy.services.streaming_proxy import PROXY_HEADERS
from vidproxy.types import ResponseHeaders


def cors_headers() -> ResponseHeaders:
    return {name: value for name, value in PROXY_HEADERS.items() if name.startswith('Access-Control-')}


def error_response(
    status_code: int,
    message: str,
    error_code: str | None = None,
    headers: ResponseHeaders | None = None,
) -> PlainTextResponse:
    headers = dict(headers or {})
    if error_code:
        headers['X-Error-Code'] = error_code
    return PlainTextResponse(message, status_code=status_code, headers=headers or None)


def response_500(headers: ResponseHeaders | None = None) -> PlainTextResponse:
    return error_response(500, 'Internal Server Error', 'app:internal_server_error', headers)


def response_204_preflight() -> Response:
    headers = cors_headers()
    headers['Access-Control-Max-Age'] = '86400'
    return Response(status_code=204, headers=headers)
