"""
Authentication Module

Handles Kubernetes client authentication and namespace discovery.
"""

import functools
import logging
from pathlib import Path
from typing import Optional

try:
    from kubernetes import client, config
except ImportError:
    raise ImportError("kubernetes library is required. Install with: pip install kubernetes")

from .constants import KubernetesConstants
from .exceptions import AuthenticationError
from .utils import handle_api_error

logger = logging.getLogger(__name__)


class KubernetesAuth:
    """Handles Kubernetes authentication and context discovery"""

    def __init__(self, skip_tls: bool = False):
        """
        Initialize Kubernetes authentication handler

        Args:
            skip_tls: Whether to skip TLS verification for requests
        """
        self.skip_tls = skip_tls
        self.kube_url = None
        self.kube_token = None
        self.k8s_client = None
        self.core_api = None
        self.in_cluster = False

    @staticmethod
    def _handle_auth_errors(func):
        """Wrap a client setup step so any failure surfaces as AuthenticationError"""
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except AuthenticationError:
                raise
            except Exception as e:
                handle_api_error(e, "Kubernetes authentication failed", AuthenticationError)
        return wrapper

    def configure_auth(self, kube_url: str = None, kube_token: str = None) -> bool:
        """
        Configure authentication with provided URL and token, or discover from context

        Args:
            kube_url: Kubernetes API server URL (optional)
            kube_token: Bearer token for the API server (optional)

        Returns:
            bool: True if authentication was configured successfully

        Raises:
            AuthenticationError: If authentication configuration fails
        """
        if kube_url and kube_token:
            logger.info("Using provided Kubernetes URL and token for authentication")
            self.kube_url = kube_url
            self.kube_token = kube_token
            return self._configure_kubernetes_client_with_token()

        return self._discover_from_context()

    def _apply_tls_settings(self, configuration: client.Configuration) -> None:
        """Disable certificate verification on the configuration when requested"""
        if self.skip_tls:
            configuration.verify_ssl = False
            configuration.ssl_ca_cert = None

            import urllib3
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    @_handle_auth_errors
    def _initialize_api_clients(self, configuration: Optional[client.Configuration] = None) -> bool:
        """
        Initialize Kubernetes API clients

        Args:
            configuration: Optional Kubernetes configuration object

        Returns:
            bool: True if initialization successful
        """
        if configuration:
            self._apply_tls_settings(configuration)
            api_client = client.ApiClient(configuration)
        else:
            api_client = client.ApiClient()
            self._apply_tls_settings(api_client.configuration)

        self.k8s_client = api_client
        self.core_api = client.CoreV1Api(self.k8s_client)

        if api_client.configuration.host:
            self.kube_url = api_client.configuration.host
            logger.debug(f"Configured Kubernetes client for {self.kube_url}")

        return True

    @_handle_auth_errors
    def _configure_kubernetes_client_with_token(self) -> bool:
        """Configure Kubernetes client using URL and token"""
        configuration = client.Configuration()
        configuration.host = self.kube_url
        configuration.api_key = {"authorization": self.kube_token}
        configuration.api_key_prefix = {"authorization": "Bearer"}

        return self._initialize_api_clients(configuration)

    @_handle_auth_errors
    def _discover_from_context(self) -> bool:
        """
        Discover authentication from kubeconfig or in-cluster config

        Returns:
            bool: True if discovery successful
        """
        try:
            config.load_kube_config()
            logger.debug("Successfully loaded kubeconfig")

        except Exception as kubeconfig_error:
            logger.debug(f"Failed to load kubeconfig: {kubeconfig_error}")

            try:
                config.load_incluster_config()
                self.in_cluster = True
                logger.debug("Successfully loaded in-cluster config")

            except Exception as incluster_error:
                logger.warning(f"Failed to load in-cluster config: {incluster_error}")
                return False

        return self._initialize_api_clients()

    def get_current_namespace(self, namespace: str = None) -> str:
        """
        Determine the namespace that holds the credentials secrets

        Args:
            namespace: Explicit namespace (optional, wins when given)

        Returns:
            str: Namespace name
        """
        if namespace:
            return namespace

        if not self.in_cluster:
            try:
                _, active_context = config.list_kube_config_contexts()
                context_namespace = (active_context or {}).get('context', {}).get('namespace')
                if context_namespace:
                    return context_namespace
            except Exception as e:
                logger.debug(f"Could not read namespace from kubeconfig: {e}")

        namespace_file = Path(KubernetesConstants.SERVICE_ACCOUNT_NAMESPACE_FILE)
        if namespace_file.is_file():
            content = namespace_file.read_text().strip()
            if content:
                return content

        return KubernetesConstants.DEFAULT_NAMESPACE

    def is_authenticated(self) -> bool:
        """Check if authentication is properly configured"""
        return self.k8s_client is not None

    def get_core_api(self) -> client.CoreV1Api:
        """
        Get the initialized CoreV1Api client

        Raises:
            AuthenticationError: If no client has been configured
        """
        if not self.is_authenticated():
            raise AuthenticationError("Not authenticated - no Kubernetes client available")
        return self.core_api
