"""
Credential Resolver

Turns a credentials secret or a Git auth configuration into the ordered list
of credentials to write.
"""

import logging
from typing import Any, List, Mapping, Optional

from ..authconfig.models import AuthConfig, AuthServer, UserAuth
from ..core.constants import CredentialConstants, ErrorMessages
from ..core.exceptions import ConfigurationError
from ..core.utils import decode_text, first_non_empty
from .models import AuthConfigRequest, CredentialRequest, CredentialTuple, SecretRequest

logger = logging.getLogger(__name__)

# Secret value of a user auth: first non-empty field wins
SECRET_FIELD_PRIORITY = ('api_token', 'bearer_token', 'password')


def resolve_secret_value(user_auth: UserAuth) -> str:
    """Pick the secret of a user auth following SECRET_FIELD_PRIORITY"""
    return first_non_empty(getattr(user_auth, field) for field in SECRET_FIELD_PRIORITY)


class CredentialResolver:
    """Resolves credential requests into CredentialTuple lists"""

    def resolve(self, request: CredentialRequest) -> List[CredentialTuple]:
        """
        Resolve a request into credentials

        Args:
            request: SecretRequest or AuthConfigRequest

        Returns:
            List of CredentialTuple in output order

        Raises:
            ConfigurationError: If an AuthConfigRequest carries no configuration
        """
        if isinstance(request, SecretRequest):
            return self.from_secret_data(request.data)
        if isinstance(request, AuthConfigRequest):
            return self.from_auth_config(request.config, request.owner)
        raise TypeError(f"unsupported credential request: {type(request).__name__}")

    def from_secret_data(self, data: Optional[Mapping[str, Any]]) -> List[CredentialTuple]:
        """
        Build the single credential held by an opaque secret

        Values are passed through as found; empty or missing keys yield empty
        fields and are left for the renderer to reject.

        Args:
            data: Secret data with user, token and url keys (bytes or str values)

        Returns:
            List holding exactly one CredentialTuple
        """
        data = data or {}
        return [CredentialTuple(
            user=decode_text(data.get(str(CredentialConstants.SecretKey.USER))),
            secret=decode_text(data.get(str(CredentialConstants.SecretKey.TOKEN))),
            service_url=decode_text(data.get(str(CredentialConstants.SecretKey.URL))),
        )]

    def from_auth_config(self, config: Optional[AuthConfig], owner: str = "") -> List[CredentialTuple]:
        """
        Build credentials for every usable user auth in the configuration

        Without an owner only each server's current auth is used. With an
        owner every user auth of that GitHub App owner is used. User auths
        without a username or secret are skipped with a warning.

        Args:
            config: Auth configuration (None is an error)
            owner: GitHub App owner filter (optional)

        Returns:
            List of CredentialTuple in server order, then user order

        Raises:
            ConfigurationError: If config is None
        """
        if config is None:
            raise ConfigurationError(str(ErrorMessages.ConfigError.NO_AUTH_CONFIG))

        credential_list = []
        for server in config.servers:
            for user_auth in self._select_user_auths(server, owner):
                username = user_auth.username
                secret = resolve_secret_value(user_auth)
                if not username or not secret:
                    logger.warning(str(ErrorMessages.CredentialWarning.EMPTY_AUTH).format(url=server.url))
                    continue

                credential_list.append(CredentialTuple(
                    user=username,
                    secret=secret,
                    service_url=server.url,
                ))

        logger.debug(f"Resolved {len(credential_list)} git credentials from auth config")
        return credential_list

    def _select_user_auths(self, server: AuthServer, owner: str) -> List[UserAuth]:
        if owner:
            return [user for user in server.users if user.github_app_owner == owner]

        current = server.current_auth()
        if current is None:
            logger.debug(f"No current auth for git server {server.url}")
            return []
        return [current]
