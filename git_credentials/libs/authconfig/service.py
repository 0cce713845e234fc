"""
Auth Configuration Services

Load the Git provider auth configuration either from a gitAuth.yaml file or
from the Git provider secrets stored in a Kubernetes namespace.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

try:
    import yaml
except ImportError:
    raise ImportError("PyYAML is required. Install with: pip install PyYAML")

from kubernetes import client
from kubernetes.client.rest import ApiException

from ..core.constants import KubernetesConstants
from ..core.exceptions import ConfigurationError, ParsingError
from ..core.utils import decode_secret_data, decode_text, handle_api_error
from .models import AuthConfig, AuthServer, UserAuth

logger = logging.getLogger(__name__)


class FileAuthConfigService:
    """Auth configuration backed by a gitAuth.yaml file"""

    def __init__(self, path: str):
        """
        Initialize file-backed auth configuration service

        Args:
            path: Path to the gitAuth.yaml file
        """
        self.path = Path(path).expanduser()
        self._config: Optional[AuthConfig] = None
        self._loaded = False

    def config(self) -> Optional[AuthConfig]:
        """
        Load the auth configuration, once

        Returns:
            AuthConfig, or None if the file does not exist

        Raises:
            ParsingError: If the file is not valid YAML or has the wrong structure
        """
        if self._loaded:
            return self._config

        if not self.path.is_file():
            logger.debug(f"No git auth config file at {self.path}")
            self._loaded = True
            return None

        try:
            with open(self.path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ParsingError(f"Invalid YAML in git auth config {self.path}: {e}") from e

        self._config = AuthConfig.from_dict(data)
        self._loaded = True
        logger.debug(f"Loaded {len(self._config.servers)} git servers from {self.path}")
        return self._config


class SecretAuthConfigService:
    """Auth configuration built from Git provider secrets in a namespace"""

    def __init__(self, core_api: client.CoreV1Api, namespace: str, git_kind: str = "",
                 github_app_mode: bool = False):
        """
        Initialize secret-backed auth configuration service

        Args:
            core_api: Kubernetes CoreV1Api client
            namespace: Namespace holding the Git provider secrets
            git_kind: Only use secrets of this service kind (optional)
            github_app_mode: Use GitHub App owner secrets instead of plain ones
        """
        if core_api is None:
            raise ConfigurationError("Kubernetes client not available for loading git auth secrets")
        self.core_api = core_api
        self.namespace = namespace
        self.git_kind = git_kind or ""
        self.github_app_mode = github_app_mode
        self._config: Optional[AuthConfig] = None

    def _list_git_secrets(self) -> List[client.V1Secret]:
        """List the Git provider secrets in the namespace, sorted by name"""
        try:
            secret_list = self.core_api.list_namespaced_secret(
                self.namespace,
                label_selector=KubernetesConstants.GIT_SECRET_SELECTOR
            )
        except ApiException as e:
            handle_api_error(
                e, f"failed to list git secrets in namespace '{self.namespace}'", ConfigurationError
            )
        items = list(secret_list.items or [])
        return sorted(items, key=lambda secret: secret.metadata.name or "")

    def _accepts(self, labels: Dict[str, str]) -> bool:
        """Check a secret's labels against the mode and kind filters"""
        owner = labels.get(str(KubernetesConstants.Label.GITHUB_APP_OWNER), "")
        if self.github_app_mode:
            if not owner:
                return False
            kind = labels.get(str(KubernetesConstants.Label.SERVICE_KIND), "")
            if self.git_kind and kind != self.git_kind:
                return False
            return True
        return not owner

    def config(self) -> AuthConfig:
        """
        Build the auth configuration from the namespace's Git secrets

        Returns:
            AuthConfig with one server per distinct URL, in secret name order
        """
        if self._config is not None:
            return self._config

        servers: Dict[str, AuthServer] = {}
        for secret in self._list_git_secrets():
            metadata = secret.metadata
            labels = metadata.labels or {}
            annotations = metadata.annotations or {}
            if not self._accepts(labels):
                logger.debug(f"Skipping git secret {metadata.name}")
                continue

            url = annotations.get(str(KubernetesConstants.Annotation.URL), "")
            if not url:
                logger.warning(f"Git secret {metadata.name} has no {KubernetesConstants.Annotation.URL} annotation")
                continue

            data = decode_secret_data(secret.data)
            user = UserAuth(
                username=decode_text(data.get(str(KubernetesConstants.GitSecretKey.USERNAME))),
                password=decode_text(data.get(str(KubernetesConstants.GitSecretKey.PASSWORD))),
                github_app_owner=labels.get(str(KubernetesConstants.Label.GITHUB_APP_OWNER), ""),
            )

            server = servers.get(url)
            if server is None:
                server = AuthServer(
                    url=url,
                    name=annotations.get(str(KubernetesConstants.Annotation.NAME), ""),
                    kind=labels.get(str(KubernetesConstants.Label.SERVICE_KIND), ""),
                    current_user=user.username,
                )
                servers[url] = server
            server.users.append(user)

        self._config = AuthConfig(servers=list(servers.values()))
        logger.debug(f"Loaded {len(self._config.servers)} git servers from namespace {self.namespace}")
        return self._config


def create_auth_config_service(core_api: client.CoreV1Api = None, namespace: str = None,
                               auth_config_file: str = None, git_kind: str = "",
                               github_app_mode: bool = False):
    """
    Factory function to pick the auth configuration service

    Args:
        core_api: Kubernetes CoreV1Api client (needed unless a file is given)
        namespace: Namespace holding the Git provider secrets
        auth_config_file: gitAuth.yaml path, used instead of cluster secrets (optional)
        git_kind: Git provider kind hint (optional)
        github_app_mode: Whether GitHub App mode is enabled

    Returns:
        An object exposing config()
    """
    if auth_config_file:
        return FileAuthConfigService(auth_config_file)
    return SecretAuthConfigService(
        core_api, namespace or KubernetesConstants.DEFAULT_NAMESPACE,
        git_kind=git_kind, github_app_mode=github_app_mode
    )
