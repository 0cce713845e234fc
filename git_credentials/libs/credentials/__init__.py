"""
Credentials Libraries

Resolves Git provider credentials and renders them as a Git credentials file.
"""

from .models import CredentialTuple, SecretRequest, AuthConfigRequest
from .resolver import CredentialResolver, SECRET_FIELD_PRIORITY, resolve_secret_value
from .renderer import CredentialsFileRenderer, parse_service_url, format_credential_url
from .secrets import SecretClient
from .writer import CredentialsFileWriter, git_credentials_file

__all__ = [
    'CredentialTuple',
    'SecretRequest',
    'AuthConfigRequest',
    'CredentialResolver',
    'SECRET_FIELD_PRIORITY',
    'resolve_secret_value',
    'CredentialsFileRenderer',
    'parse_service_url',
    'format_credential_url',
    'SecretClient',
    'CredentialsFileWriter',
    'git_credentials_file'
]
