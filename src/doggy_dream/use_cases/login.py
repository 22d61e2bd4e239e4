from __future__ import annotations

from dataclasses import dataclass

from doggy_dream.domain.errors import ValidationError
from doggy_dream.ports.dog_catalog_gateway import DogCatalogGateway


@dataclass(frozen=True, slots=True)
class LoginRequest:
    name: str
    email: str


@dataclass(frozen=True, slots=True)
class LoginResponse:
    set_cookies: tuple[str, ...]


class Login:
    """
    Exchange a name and email for an upstream session.

    The service stores nothing; the upstream cookies are handed back so the
    browser can send them with every later search.
    """

    def __init__(self, gateway: DogCatalogGateway) -> None:
        self._gateway = gateway

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """
        Raises:
            ValidationError: If name or email are blank
            AuthenticationFailed: If the upstream refuses the login
        """
        errors = []
        if not request.name.strip():
            errors.append({"field": "name", "message": "Must not be blank", "code": "REQUIRED"})
        if not request.email.strip():
            errors.append({"field": "email", "message": "Must not be blank", "code": "REQUIRED"})
        if errors:
            raise ValidationError(errors=errors)

        set_cookies = await self._gateway.login(request.name.strip(), request.email.strip())
        return LoginResponse(set_cookies=set_cookies)
