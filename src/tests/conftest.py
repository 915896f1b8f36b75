import pytest

from pysignin import (
    SignInBuilder,
    SessionPayload,
    FacebookPayload,
    GooglePayload,
)


@pytest.fixture()
def session_builder():
    return SignInBuilder(SessionPayload)


@pytest.fixture()
def facebook_builder():
    return SignInBuilder(FacebookPayload)


@pytest.fixture()
def google_builder():
    return SignInBuilder(GooglePayload)
