"""
Git Credentials Library

Resolves Git provider credentials and writes them as a Git credentials file.
"""

__version__ = "1.0.0"
__author__ = "Git Credentials Project"

# Core libraries
from .core import (
    KubernetesAuth, ConfigManager,
    GitCredentialsError, AuthenticationError, ConfigurationError,
    SecretLookupError, WriteError, ParsingError,
    KubernetesConstants, CredentialConstants, EnvironmentVariables, FileConstants, ErrorMessages
)

# Auth configuration libraries
from .authconfig import (
    AuthConfig, AuthServer, UserAuth,
    FileAuthConfigService, SecretAuthConfigService, create_auth_config_service
)

# Credentials libraries
from .credentials import (
    CredentialTuple, SecretRequest, AuthConfigRequest,
    CredentialResolver, CredentialsFileRenderer, CredentialsFileWriter, SecretClient
)

# Main application and help
from .help_manager import HelpManager
from .main_app import GitCredentialsManager, CredentialsOptions, main

__all__ = [
    # Core
    'KubernetesAuth',
    'ConfigManager',
    'GitCredentialsError',
    'AuthenticationError',
    'ConfigurationError',
    'SecretLookupError',
    'WriteError',
    'ParsingError',
    'KubernetesConstants',
    'CredentialConstants',
    'EnvironmentVariables',
    'FileConstants',
    'ErrorMessages',
    # Auth configuration
    'AuthConfig',
    'AuthServer',
    'UserAuth',
    'FileAuthConfigService',
    'SecretAuthConfigService',
    'create_auth_config_service',
    # Credentials
    'CredentialTuple',
    'SecretRequest',
    'AuthConfigRequest',
    'CredentialResolver',
    'CredentialsFileRenderer',
    'CredentialsFileWriter',
    'SecretClient',
    # Main
    'HelpManager',
    'GitCredentialsManager',
    'CredentialsOptions',
    'main'
]
