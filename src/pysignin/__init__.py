from .builder import SignInBuilder, PayloadConstructionError
from .credentials import CredentialSet, CredentialSource
from .payloads import (
    Payload,
    SessionPayload,
    FacebookPayload,
    GooglePayload,
)

__all__ = [
    "SignInBuilder",
    "PayloadConstructionError",
    "CredentialSet",
    "CredentialSource",
    "Payload",
    "SessionPayload",
    "FacebookPayload",
    "GooglePayload",
]
