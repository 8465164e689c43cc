"""Access token issuer."""

import secrets

from lyra.domain.value import AccessToken

from .base import Service

TOKEN_BYTES = 32  # 256 bits -> 64 hex characters


class AccessTokenIssuer(Service):
    """Mints reader access tokens.

    Tokens are pure random lookup keys; nothing about the invitation is
    encoded in them. The invitations table still enforces uniqueness.
    """

    def issue(self) -> AccessToken:
        return AccessToken(secrets.token_hex(TOKEN_BYTES))
