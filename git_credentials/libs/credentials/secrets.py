"""
Credentials Secret Client

Reads the opaque credentials secret (user, token, url) from Kubernetes.
"""

import logging
from typing import Dict

from kubernetes import client
from kubernetes.client.rest import ApiException

from ..core.constants import ErrorMessages
from ..core.exceptions import AuthenticationError, SecretLookupError
from ..core.utils import decode_secret_data

logger = logging.getLogger(__name__)


class SecretClient:
    """Fetches credentials secrets through the CoreV1 API"""

    def __init__(self, core_api: client.CoreV1Api):
        """
        Initialize secret client

        Args:
            core_api: Kubernetes CoreV1Api client
        """
        if core_api is None:
            raise AuthenticationError(str(ErrorMessages.AuthError.NOT_CONFIGURED))
        self.core_api = core_api

    def get_secret_data(self, secret_name: str, namespace: str) -> Dict[str, bytes]:
        """
        Get the decoded data of a secret

        A missing secret is not an error: an empty mapping is returned so the
        caller proceeds with empty credentials.

        Args:
            secret_name: Name of the secret
            namespace: Namespace of the secret

        Returns:
            Dict mapping data keys to raw bytes

        Raises:
            SecretLookupError: If the secret cannot be read for any other reason
        """
        try:
            secret = self.core_api.read_namespaced_secret(secret_name, namespace)
        except ApiException as e:
            if e.status == 404:
                logger.warning(str(ErrorMessages.CredentialWarning.SECRET_NOT_FOUND).format(
                    secret_name=secret_name, namespace=namespace
                ))
                return {}
            raise SecretLookupError(secret_name, namespace, e) from e
        except Exception as e:
            raise SecretLookupError(secret_name, namespace, e) from e

        logger.debug(f"Read secret {secret_name} from namespace {namespace}")
        return decode_secret_data(secret.data)
