"""
Auth Configuration Libraries

Models and services providing the Git provider auth configuration.
"""

from .models import AuthConfig, AuthServer, UserAuth
from .service import FileAuthConfigService, SecretAuthConfigService, create_auth_config_service

__all__ = [
    'AuthConfig',
    'AuthServer',
    'UserAuth',
    'FileAuthConfigService',
    'SecretAuthConfigService',
    'create_auth_config_service'
]
