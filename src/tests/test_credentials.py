from pysignin import CredentialSet, CredentialSource, FacebookPayload


def test_defaults_are_absent():
    payload = FacebookPayload()
    credentials = CredentialSet(payload=payload)
    assert credentials.to_dict() == {
        "payload": payload,
        "email": None,
        "password": None,
        "facebook_token": None,
        "google_token": None,
    }


def test_to_dict_exclude():
    credentials = CredentialSet(payload=FacebookPayload(), email="a@b.c")
    assert credentials.to_dict(exclude=["payload", "password"]) == {
        "email": "a@b.c",
        "facebook_token": None,
        "google_token": None,
    }


def test_repr_hides_secrets():
    credentials = CredentialSet(
        payload=FacebookPayload(),
        email="test@host.com",
        password="test123",
        facebook_token="TOKEN123",
        google_token="TOKEN456",
    )
    text = repr(credentials)
    assert "test@host.com" in text
    assert "test123" not in text
    assert "TOKEN123" not in text
    assert "TOKEN456" not in text


def test_sign_in_methods():
    payload = FacebookPayload()
    assert CredentialSet(payload=payload).sign_in_methods() == []
    assert CredentialSet(payload=payload, email="a@b.c").sign_in_methods() == []
    assert CredentialSet(
        payload=payload, email="a@b.c", password="pw"
    ).sign_in_methods() == ["password"]
    assert CredentialSet(
        payload=payload, facebook_token="fb", google_token="g"
    ).sign_in_methods() == ["facebook", "google"]


def test_credential_source_protocol():
    credentials = CredentialSet(payload=FacebookPayload())
    assert isinstance(credentials, CredentialSource)
    assert not isinstance(FacebookPayload(), CredentialSource)
