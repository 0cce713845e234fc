"""
Core Libraries

Shared functionality and utilities for the Git credentials tool.
"""

from .auth import KubernetesAuth
from .config import ConfigManager
from .constants import (
    KubernetesConstants, CredentialConstants, EnvironmentVariables,
    FileConstants, ErrorMessages
)
from .exceptions import (
    GitCredentialsError, AuthenticationError, ConfigurationError,
    SecretLookupError, WriteError, ParsingError
)
from .protocols import AuthProvider, ConfigProvider, AuthConfigProvider, SecretProvider, HelpProvider
from .utils import (
    setup_logging, mask_sensitive_info, first_non_empty, resolve_setting,
    parse_bool, validate_namespace, handle_api_error, decode_secret_data, decode_text
)

__all__ = [
    # Main classes
    'KubernetesAuth',
    'ConfigManager',
    # Constants
    'KubernetesConstants',
    'CredentialConstants',
    'EnvironmentVariables',
    'FileConstants',
    'ErrorMessages',
    # Exceptions
    'GitCredentialsError',
    'AuthenticationError',
    'ConfigurationError',
    'SecretLookupError',
    'WriteError',
    'ParsingError',
    # Protocols
    'AuthProvider',
    'ConfigProvider',
    'AuthConfigProvider',
    'SecretProvider',
    'HelpProvider',
    # Utilities
    'setup_logging',
    'mask_sensitive_info',
    'first_non_empty',
    'resolve_setting',
    'parse_bool',
    'validate_namespace',
    'handle_api_error',
    'decode_secret_data'
    'decode_text',
]
