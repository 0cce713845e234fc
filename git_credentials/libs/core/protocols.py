"""
Protocols and Interfaces

Defines protocols (interfaces) for dependency injection and type hints.
"""

from typing import Protocol, Dict, Any, Optional

try:
    from kubernetes import client
except ImportError:
    raise ImportError("kubernetes library is required. Install with: pip install kubernetes")


class AuthProvider(Protocol):
    """Protocol for Kubernetes authentication providers"""

    def configure_auth(self, kube_url: str = None, kube_token: str = None) -> bool:
        """Configure authentication with provided URL and token, or discover from context"""
        ...

    def get_core_api(self) -> client.CoreV1Api:
        """Get the initialized CoreV1Api client"""
        ...

    def get_current_namespace(self, namespace: str = None) -> str:
        """Determine the namespace holding the credentials secrets"""
        ...

    def is_authenticated(self) -> bool:
        """Check if authentication is properly configured"""
        ...


class ConfigProvider(Protocol):
    """Protocol for configuration providers"""

    def load_config(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from YAML file"""
        ...

    def generate_config_template(self, output_dir: str = None) -> str:
        """Generate configuration template file"""
        ...

    def get_config_template_content(self) -> str:
        """Generate configuration template content as string without file I/O"""
        ...

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get specific configuration section"""
        ...


class AuthConfigProvider(Protocol):
    """Protocol for Git auth configuration services"""

    def config(self) -> Optional[Any]:
        """Return the AuthConfig, or None when there is none"""
        ...


class SecretProvider(Protocol):
    """Protocol for credentials secret lookups"""

    def get_secret_data(self, secret_name: str, namespace: str) -> Dict[str, bytes]:
        """Return the decoded data of a secret, empty when it does not exist"""
        ...


class HelpProvider(Protocol):
    """Protocol for help providers"""

    def show_help(self, topic: str = None) -> None:
        """Show help for a specific topic"""
        ...

    def show_examples(self) -> None:
        """Show usage examples"""
        ...
