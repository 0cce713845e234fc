"""
Constants Module

Centralized constants for the Git credentials tool to eliminate magic strings
and improve maintainability.
"""

from enum import Enum


class BaseStrEnum(str, Enum):
    """Base enum class that inherits from str"""

    def __str__(self) -> str:
        """Return the enum value as string"""
        return self.value

    def __repr__(self) -> str:
        """Return a detailed representation of the enum"""
        return f"{self.__class__.__name__}.{self.name}"


class KubernetesConstants:
    """Kubernetes-related constants"""

    # Namespace used when neither flag, kubeconfig nor in-cluster config name one
    DEFAULT_NAMESPACE = "jx"
    SERVICE_ACCOUNT_NAMESPACE_FILE = "/var/run/secrets/kubernetes.io/serviceaccount/namespace"

    # Git provider secrets
    GIT_SECRET_SELECTOR = "jenkins.io/kind=git"

    class Label(BaseStrEnum):
        """Labels carried by Git provider secrets"""
        KIND = "jenkins.io/kind"
        SERVICE_KIND = "jenkins.io/service-kind"
        GITHUB_APP_OWNER = "jenkins.io/githubapp-owner"

    class Annotation(BaseStrEnum):
        """Annotations carried by Git provider secrets"""
        URL = "jenkins.io/url"
        NAME = "jenkins.io/name"

    class GitSecretKey(BaseStrEnum):
        """Data keys of a Git provider secret"""
        USERNAME = "username"
        PASSWORD = "password"


class CredentialConstants:
    """Credential resolution constants"""

    class SecretKey(BaseStrEnum):
        """Data keys of an opaque credentials secret"""
        USER = "user"
        TOKEN = "token"
        URL = "url"

    class Scheme(BaseStrEnum):
        """URL schemes handled by the renderer"""
        HTTP = "http"
        HTTPS = "https"


class EnvironmentVariables(BaseStrEnum):
    """Environment variables recognized by the tool"""
    CREDENTIALS_FROM_SECRET = "JX_CREDENTIALS_FROM_SECRET"
    GITHUB_APP = "JX_GITHUB_APP"
    XDG_CONFIG_HOME = "XDG_CONFIG_HOME"


class FileConstants:
    """File and directory related constants"""

    # Git credentials file, relative to the config home
    GIT_CREDENTIALS_DIR = "git"
    GIT_CREDENTIALS_FILE = "credentials"

    # rwxrw----
    DEFAULT_WRITE_PERMISSIONS = 0o760

    DEFAULT_CONFIG_FILE = "git-credentials-config.yaml"
    DEFAULT_AUTH_CONFIG_FILE = "gitAuth.yaml"


class ErrorMessages:
    """Centralized error and log message templates"""

    class ConfigError(BaseStrEnum):
        """Configuration-related error message templates"""
        NO_AUTH_CONFIG = "no git auth config found"
        INVALID_NAMESPACE = "Invalid Kubernetes namespace format: {namespace}"
        CONFIG_FILE_NOT_FOUND = "Configuration file not found: {config_path}"

    class CredentialWarning(BaseStrEnum):
        """Soft-skip warning templates"""
        EMPTY_AUTH = "Empty auth config for git service URL '{url}'"
        INVALID_URL = "Ignoring invalid git service URL '{url}'"
        SECRET_NOT_FOUND = (
            "Secret '{secret_name}' not found in namespace '{namespace}', "
            "continuing with empty credentials"
        )

    class SSLError(BaseStrEnum):
        """SSL-related message templates"""
        VERIFICATION_DISABLED_WARNING = (
            "SSL verification disabled - connections will not verify certificates. "
            "This is insecure and should only be used in development environments"
        )
        CERT_VERIFICATION_FAILED = (
            "SSL certificate verification failed. The Kubernetes API server is using self-signed certificates.\n"
            "To resolve this issue, add the --skip-tls flag to your command."
        )

    class AuthError(BaseStrEnum):
        """Authentication-related error message templates"""
        NOT_CONFIGURED = "Kubernetes client not configured. Configure authentication first."
        TOKEN_EXPIRED = "Authentication token has expired or is invalid."
        INSUFFICIENT_PERMISSIONS = "Insufficient permissions to access the requested resource."

    GITHUB_APP_NO_OWNER = (
        "this command does nothing if using github app mode and no {option} option specified"
    )
