from dataclasses import dataclass, field, fields
from typing import Generic, Optional, Protocol, TypeVar, runtime_checkable

P = TypeVar("P")


@runtime_checkable
class CredentialSource(Protocol):
    """Read-only view over the optional sign-in fields."""

    @property
    def email(self) -> Optional[str]: ...

    @property
    def password(self) -> Optional[str]: ...

    @property
    def facebook_token(self) -> Optional[str]: ...

    @property
    def google_token(self) -> Optional[str]: ...


@dataclass(frozen=True)
class CredentialSet(Generic[P]):
    """
    Finalized sign-in data produced by SignInBuilder.build().
    None means the field was never set, an empty string is a set value.
    Secrets are kept out of repr.
    """

    payload: P
    email: str | None = None
    password: str | None = field(default=None, repr=False)
    facebook_token: str | None = field(default=None, repr=False)
    google_token: str | None = field(default=None, repr=False)

    def to_dict(self, exclude: Optional[list[str]] = None) -> dict:
        exclude = exclude or []
        return {
            f.name: getattr(self, f.name) for f in fields(self) if f.name not in exclude
        }

    def sign_in_methods(self) -> list[str]:
        methods = []
        if self.email is not None and self.password is not None:
            methods.append("password")
        if self.facebook_token is not None:
            methods.append("facebook")
        if self.google_token is not None:
            methods.append("google")
        return methods
