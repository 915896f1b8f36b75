from .payload import Payload
from .session import SessionPayload
from .api_key import FacebookPayload, GooglePayload

__all__ = [
    "Payload",
    "SessionPayload",
    "FacebookPayload",
    "GooglePayload",
]
