import logging
from typing import Callable, Generic, TypeVar
from .credentials import CredentialSet
from .payloads import Payload

P = TypeVar("P")

logger = logging.getLogger(__name__)


class PayloadConstructionError(Exception):
    def __init__(self, msg: str = None, *args):
        message = (
            f"Payload construction failed: {msg}"
            if msg
            else "Payload construction failed"
        )
        super().__init__(message, *args)


class SignInBuilder(Generic[P]):
    """
    Fluent builder for CredentialSet, generic over the payload type.
    The payload comes from a zero-argument factory, usually the payload class itself:

        credentials = (
            SignInBuilder(SessionPayload)
            .set_email("test@host.com")
            .set_password("test123")
            .build()
        )

    Setters mutate this builder and return it. build() hands out an immutable snapshot,
    so the builder can keep being used and later changes never reach earlier results.
    """

    def __init__(self, payload_factory: Callable[[], P]):
        try:
            payload = payload_factory()
        except Exception as e:
            logger.warning("Could not create sign-in payload: %s", e)
            raise PayloadConstructionError(str(e)) from e

        if isinstance(payload, Payload):
            try:
                payload.validate()
            except ValueError as e:
                logger.warning("Invalid sign-in payload: %s", e)
                raise PayloadConstructionError(str(e)) from e

        logger.debug("Created %s payload", type(payload).__name__)
        self._payload: P = payload
        self._email: str | None = None
        self._password: str | None = None
        self._facebook_token: str | None = None
        self._google_token: str | None = None

    @property
    def payload(self) -> P:
        return self._payload

    def set_email(self, email: str) -> "SignInBuilder[P]":
        self._email = email
        return self

    def set_password(self, password: str) -> "SignInBuilder[P]":
        self._password = password
        return self

    def set_facebook_token(self, facebook_token: str) -> "SignInBuilder[P]":
        self._facebook_token = facebook_token
        return self

    def set_google_token(self, google_token: str) -> "SignInBuilder[P]":
        self._google_token = google_token
        return self

    def build(self) -> CredentialSet[P]:
        credentials = CredentialSet(
            payload=self._payload,
            email=self._email,
            password=self._password,
            facebook_token=self._facebook_token,
            google_token=self._google_token,
        )
        logger.debug(
            "Built credential set with sign-in methods %s",
            credentials.sign_in_methods(),
        )
        return credentials
