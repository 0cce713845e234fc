"""
Git Credentials

Pipeline step that generates a Git credentials file, usable by Git's
credential-store helper, from Git provider secrets or a gitAuth.yaml file.
"""

__version__ = "1.0.0"
__author__ = "Git Credentials Project"

from .libs import (
    # Core
    KubernetesAuth, ConfigManager, GitCredentialsError, AuthenticationError, ConfigurationError,
    SecretLookupError, WriteError, ParsingError,
    # Auth configuration
    AuthConfig, AuthServer, UserAuth, FileAuthConfigService, SecretAuthConfigService,
    # Credentials
    CredentialTuple, SecretRequest, AuthConfigRequest,
    CredentialResolver, CredentialsFileRenderer, CredentialsFileWriter, SecretClient,
    # Main
    HelpManager, GitCredentialsManager, main
)

__all__ = [
    'KubernetesAuth',
    'ConfigManager',
    'GitCredentialsError',
    'AuthenticationError',
    'ConfigurationError',
    'SecretLookupError',
    'WriteError',
    'ParsingError',
    'AuthConfig',
    'AuthServer',
    'UserAuth',
    'FileAuthConfigService',
    'SecretAuthConfigService',
    'CredentialTuple',
    'SecretRequest',
    'AuthConfigRequest',
    'CredentialResolver',
    'CredentialsFileRenderer',
    'CredentialsFileWriter',
    'SecretClient',
    'HelpManager',
    'GitCredentialsManager',
    'main'
]
