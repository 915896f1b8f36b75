from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Optional


@dataclass
class Payload(ABC):
    """Provider-specific data attached to a credential set.

    Subclasses must be constructible without arguments, every field needs a default.
    """

    @abstractmethod
    def validate(self) -> "Payload":
        """Implement provider-specific validation of the payload."""
        pass

    def to_dict(self, exclude: Optional[list[str]] = None) -> dict:
        # shallow, payloads may hold live sessions
        exclude = exclude or []
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in exclude and not f.name.startswith("_")
        }
