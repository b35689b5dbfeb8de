"""Request correlation IDs.

The current request's ID lives in a ContextVar so log records emitted
anywhere during the request (including threadpool work) carry it.
"""

import re
import uuid
from contextvars import ContextVar, Token
from typing import Optional

NO_REQUEST_ID = "no-request-id"

# Client-supplied IDs are echoed into logs and headers, so keep them short and plain
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def generate_request_id() -> str:
    return str(uuid.uuid4())


def resolve_request_id(header_value: Optional[str]) -> str:
    """Use the caller's X-Request-ID if well-formed, otherwise a fresh UUID.

    Example:
        >>> resolve_request_id("req-42")
        'req-42'
    """
    if header_value and _VALID_REQUEST_ID.match(header_value):
        return header_value
    return generate_request_id()


def get_request_id() -> str:
    return request_id_var.get() or NO_REQUEST_ID


def set_request_id(request_id: str) -> Token:
    """Bind request_id to the current context; pass the token to reset_request_id."""
    return request_id_var.set(request_id)


def reset_request_id(token: Token) -> None:
    request_id_var.reset(token)
