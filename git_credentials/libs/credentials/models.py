"""
Credential Models

Immutable records passed between the resolver and the renderer.
"""

from typing import Any, Mapping, NamedTuple, Optional, Union

from ..authconfig.models import AuthConfig


class CredentialTuple(NamedTuple):
    """A resolved (user, secret, URL) triple ready for rendering"""
    user: str
    secret: str
    service_url: str


class SecretRequest(NamedTuple):
    """Resolve credentials from the data of a single opaque secret"""
    data: Mapping[str, Any]


class AuthConfigRequest(NamedTuple):
    """Resolve credentials from an auth configuration, optionally for one app owner"""
    config: Optional[AuthConfig]
    owner: str = ""


CredentialRequest = Union[SecretRequest, AuthConfigRequest]
