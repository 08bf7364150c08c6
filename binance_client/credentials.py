"""API key / secret pair"""

from dataclasses import dataclass, field
from typing import Optional


def _present(value: Optional[str]) -> bool:
    return bool(value and value.strip())


@dataclass(frozen=True)
class Credentials:
    """
    Immutable API credentials.

    Presence is all that is checked locally; whether a key is valid is decided
    by the exchange.
    """

    api_key: Optional[str] = field(default=None, repr=False)
    secret_key: Optional[str] = field(default=None, repr=False)

    def has_api_key(self) -> bool:
        return _present(self.api_key)

    def has_secret_key(self) -> bool:
        return _present(self.secret_key)

    def __repr__(self) -> str:
        return (
            f"Credentials(api_key={'***' if self.has_api_key() else None}, "
            f"secret_key={'***' if self.has_secret_key() else None})"
        )
