"""
Custom Exceptions

Defines custom exception classes for the Git credentials tool.
"""


class GitCredentialsError(Exception):
    """Base exception class for Git credentials errors"""
    pass


class AuthenticationError(GitCredentialsError):
    """Raised when the Kubernetes client cannot be configured"""
    pass


class ConfigurationError(GitCredentialsError):
    """Raised when configuration is invalid or missing"""
    pass


class SecretLookupError(GitCredentialsError, LookupError):
    """Raised when a credentials secret cannot be retrieved"""

    def __init__(self, secret_name: str, namespace: str, cause: Exception = None):
        self.secret_name = secret_name
        self.namespace = namespace
        self.cause = cause
        message = f"failed to find secret '{secret_name}' in namespace '{namespace}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class WriteError(GitCredentialsError):
    """Raised when the Git credentials file cannot be written"""

    def __init__(self, path: str, cause: Exception = None):
        self.path = path
        self.cause = cause
        super().__init__(f"failed to write to {path}: {cause}")


class ParsingError(GitCredentialsError):
    """Raised when auth configuration data parsing fails"""
    pass
