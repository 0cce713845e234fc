"""
Main Application

Orchestrates the core, auth configuration and credentials libraries to
generate the Git credentials file for a pipeline.
"""

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Mapping, NamedTuple, Optional

# Core libraries
from .core import KubernetesAuth, ConfigManager, setup_logging
from .core.constants import EnvironmentVariables, ErrorMessages
from .core.exceptions import AuthenticationError, GitCredentialsError
from .core.protocols import (
    AuthProvider, ConfigProvider, AuthConfigProvider, SecretProvider, HelpProvider
)
from .core.utils import mask_sensitive_info, parse_bool, resolve_setting, validate_namespace

# Auth configuration libraries
from .authconfig import create_auth_config_service

# Credentials libraries
from .credentials import (
    AuthConfigRequest, CredentialResolver, CredentialsFileRenderer, CredentialsFileWriter,
    CredentialTuple, SecretClient, SecretRequest
)

from .help_manager import HelpManager

logger = logging.getLogger(__name__)

OPTION_OUTPUT_FILE = "output"
OPTION_GITHUB_APP_OWNER = "github-app-owner"


class CredentialsOptions(NamedTuple):
    """Settings of one credentials run, resolved once at start"""
    output: str = ""
    credentials_secret: str = ""
    github_app_owner: str = ""
    github_app: bool = False
    git_kind: str = ""
    namespace: str = ""
    auth_config: str = ""
    kube_url: str = ""
    kube_token: str = ""


class GitCredentialsManager:
    """Main application orchestrator for the Git credentials tool"""

    def __init__(
        self,
        auth_provider: Optional[AuthProvider] = None,
        config_provider: Optional[ConfigProvider] = None,
        secret_provider: Optional[SecretProvider] = None,
        help_provider: Optional[HelpProvider] = None,
        resolver: Optional[CredentialResolver] = None,
        renderer: Optional[CredentialsFileRenderer] = None,
        writer: Optional[CredentialsFileWriter] = None,
        skip_tls: bool = False,
        debug: bool = False
    ):
        """
        Initialize the manager with dependency injection

        Args:
            auth_provider: Kubernetes authentication provider (defaults to KubernetesAuth)
            config_provider: Configuration provider (defaults to ConfigManager)
            secret_provider: Credentials secret lookup (defaults to SecretClient once authenticated)
            help_provider: Help manager (defaults to HelpManager)
            resolver: Credential resolver (defaults to CredentialResolver)
            renderer: Credentials file renderer (defaults to CredentialsFileRenderer)
            writer: Credentials file writer (defaults to CredentialsFileWriter)
            skip_tls: Whether to skip TLS verification
            debug: Enable debug logging
        """
        self.skip_tls = skip_tls
        self.debug = debug

        self.auth = auth_provider or KubernetesAuth(skip_tls=skip_tls)
        self.config_manager = config_provider or ConfigManager()
        self.secret_provider = secret_provider
        self.help_manager = help_provider or HelpManager()
        self.resolver = resolver or CredentialResolver()
        self.renderer = renderer or CredentialsFileRenderer()
        self.writer = writer or CredentialsFileWriter()

    def configure_authentication(self, kube_url: str = None, kube_token: str = None) -> bool:
        """
        Configure Kubernetes authentication if it is not configured yet

        Returns:
            bool: True if a Kubernetes client is available

        Raises:
            AuthenticationError: If configuration fails
        """
        if self.auth.is_authenticated():
            return True
        return self.auth.configure_auth(kube_url, kube_token)

    def _require_core_api(self, options: CredentialsOptions):
        if not self.configure_authentication(options.kube_url or None, options.kube_token or None):
            raise AuthenticationError(str(ErrorMessages.AuthError.NOT_CONFIGURED))
        return self.auth.get_core_api()

    def _resolve_namespace(self, options: CredentialsOptions) -> str:
        namespace = self.auth.get_current_namespace(options.namespace or None)
        validate_namespace(namespace)
        return namespace

    def create_credentials_from_secret(self, secret_name: str, options: CredentialsOptions) -> List[CredentialTuple]:
        """
        Resolve the credentials held by a named secret

        Args:
            secret_name: Name of the credentials secret
            options: Run options (namespace and cluster access)

        Returns:
            List holding one CredentialTuple
        """
        if self.secret_provider is None:
            self.secret_provider = SecretClient(self._require_core_api(options))
        namespace = self._resolve_namespace(options)

        data = self.secret_provider.get_secret_data(secret_name, namespace)
        return self.resolver.resolve(SecretRequest(data))

    def create_auth_config_service(self, options: CredentialsOptions) -> AuthConfigProvider:
        """
        Create the auth configuration service for the run

        A gitAuth.yaml file needs no cluster access; otherwise the Git
        provider secrets of the namespace are used.
        """
        if options.auth_config:
            return create_auth_config_service(auth_config_file=options.auth_config)

        core_api = self._require_core_api(options)
        return create_auth_config_service(
            core_api=core_api,
            namespace=self._resolve_namespace(options),
            git_kind=options.git_kind,
            github_app_mode=options.github_app
        )

    def create_credentials_from_auth_service(self, auth_config_service: AuthConfigProvider,
                                             owner: str = "") -> List[CredentialTuple]:
        """
        Resolve credentials from an auth configuration service

        Raises:
            ConfigurationError: If the service has no configuration
        """
        return self.resolver.resolve(AuthConfigRequest(auth_config_service.config(), owner))

    def create_git_credentials_file(self, output_file: str, credentials: List[CredentialTuple]) -> str:
        """
        Render credentials and write them to the output file

        Returns:
            str: Written path

        Raises:
            WriteError: If the file cannot be written
        """
        data = self.renderer.render(credentials)
        return self.writer.write(output_file, data)

    def run(self, options: CredentialsOptions) -> Optional[str]:
        """
        Generate the Git credentials file

        Args:
            options: Resolved run options

        Returns:
            str: Path of the generated file, None when nothing was generated
        """
        out_file = self.writer.determine_output_file(options.output or None)

        if options.credentials_secret:
            credentials = self.create_credentials_from_secret(options.credentials_secret, options)
            return self.create_git_credentials_file(out_file, credentials)

        if options.github_app and not options.github_app_owner:
            logger.info(ErrorMessages.GITHUB_APP_NO_OWNER.format(option=OPTION_GITHUB_APP_OWNER))
            return None

        auth_config_service = self.create_auth_config_service(options)
        credentials = self.create_credentials_from_auth_service(
            auth_config_service, options.github_app_owner
        )
        return self.create_git_credentials_file(out_file, credentials)


# Factory function for easy creation
def create_git_credentials_manager(skip_tls: bool = False, debug: bool = False) -> GitCredentialsManager:
    """Create a GitCredentialsManager with default dependencies"""
    return GitCredentialsManager(skip_tls=skip_tls, debug=debug)


def create_argument_parser():
    """
    Create and configure argument parser with subcommands.

    Uses parent parsers to share common arguments across commands.
    """
    common_parser = argparse.ArgumentParser(add_help=False)
    common_parser.add_argument(
        '--debug', action='store_true', help='Enable debug logging'
    )
    common_parser.add_argument(
        '--examples', action='store_true',
        help='Show usage examples for this command'
    )

    auth_parser = argparse.ArgumentParser(add_help=False)
    auth_parser.add_argument(
        '--skip-tls', action='store_true',
        help='Skip TLS verification for insecure requests'
    )
    auth_parser.add_argument('--kube-url', help='Kubernetes API server URL')
    auth_parser.add_argument('--kube-token', help='Kubernetes bearer token')
    auth_parser.add_argument('--namespace', help='Namespace holding the git secrets')

    parser = argparse.ArgumentParser(
        description='Git Credentials - Generate a Git credentials file from Git provider secrets',
        add_help=False
    )
    parser.add_argument(
        '-h', '--help',
        action='store_true',
        help='Show this help message and exit'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    credentials_parser = subparsers.add_parser(
        'credentials',
        parents=[common_parser, auth_parser],
        help='Create the Git credentials file for the current pipeline',
        description='Generate a Git credentials file for the current Git provider secrets'
    )
    credentials_parser.add_argument(
        '-o', f'--{OPTION_OUTPUT_FILE}', dest='output', help='The output file name'
    )
    credentials_parser.add_argument(
        '-g', f'--{OPTION_GITHUB_APP_OWNER}', dest='github_app_owner',
        help='The owner (organisation or user name) if using GitHub App based tokens'
    )
    credentials_parser.add_argument(
        '-s', '--credentials-secret', dest='credentials_secret',
        help='The secret name to read the credentials from'
    )
    credentials_parser.add_argument(
        '--git-kind', dest='git_kind', help='The git kind. e.g. github, bitbucketserver etc'
    )
    credentials_parser.add_argument(
        '--github-app', dest='github_app', action='store_true',
        help='Use GitHub App based tokens'
    )
    credentials_parser.add_argument(
        '--auth-config', dest='auth_config',
        help='gitAuth.yaml file to read instead of the cluster git secrets'
    )
    credentials_parser.add_argument('--config', help='Configuration file path')

    generate_parser = subparsers.add_parser(
        'generate-config',
        parents=[common_parser],
        help='Generate blank configuration template',
        description='Generate a blank configuration template file'
    )
    generate_parser.add_argument('--output', help='Output directory for the template')

    return parser


def handle_examples(command_name: str) -> bool:
    """Show the examples of a command. Returns True if examples were shown."""
    help_manager = HelpManager()
    help_manager.show_help(f"{command_name.replace('-', '_')}_examples")
    return True


def resolve_credentials_options(args, config: Optional[Dict[str, Any]] = None,
                                environ: Optional[Mapping[str, str]] = None) -> CredentialsOptions:
    """
    Resolve the run options from environment, arguments and configuration file

    The JX_CREDENTIALS_FROM_SECRET environment variable overrides the
    credentials secret; otherwise command-line values win over the file.

    Args:
        args: Parsed command-line arguments
        config: Loaded configuration dictionary (optional)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        CredentialsOptions
    """
    environ = os.environ if environ is None else environ
    section = (config or {}).get('credentials') or {}

    def setting(name: str, env_value: str = None) -> str:
        return resolve_setting(env_value, getattr(args, name, None), section.get(name), "")

    env_secret = environ.get(str(EnvironmentVariables.CREDENTIALS_FROM_SECRET))
    if env_secret:
        logger.info(
            f"Overriding CredentialsSecret from env var {EnvironmentVariables.CREDENTIALS_FROM_SECRET}"
        )

    github_app = (
        bool(getattr(args, 'github_app', False))
        or parse_bool(environ.get(str(EnvironmentVariables.GITHUB_APP)))
        or parse_bool(section.get('github_app'))
    )

    return CredentialsOptions(
        output=setting('output'),
        credentials_secret=setting('credentials_secret', env_secret),
        github_app_owner=setting('github_app_owner'),
        github_app=github_app,
        git_kind=setting('git_kind'),
        namespace=setting('namespace'),
        auth_config=setting('auth_config'),
        kube_url=setting('kube_url'),
        kube_token=setting('kube_token'),
    )


def handle_credentials_command(args, manager: GitCredentialsManager, config):
    """Handle credentials command execution."""
    if getattr(args, 'examples', False):
        return handle_examples('credentials')

    options = resolve_credentials_options(args, config)
    manager.run(options)


def handle_generate_config_command(args, manager: GitCredentialsManager, config):
    """Handle generate-config command: stdout by default, a file with --output."""
    if getattr(args, 'examples', False):
        return handle_examples('generate-config')

    if getattr(args, 'output', None):
        config_file = manager.config_manager.generate_config_template(args.output)
        print(f"✓ Configuration template generated: {config_file}")
    else:
        print(manager.config_manager.get_config_template_content())


# Command dispatcher mapping
COMMAND_HANDLERS = {
    'credentials': handle_credentials_command,
    'generate-config': handle_generate_config_command,
}


def handle_early_exit_flags(args, argv: List[str]) -> bool:
    """Handle early-exit flags like --help and --examples"""
    if not argv:
        HelpManager().show_help()
        return True

    if getattr(args, 'help', False) and not args.command:
        HelpManager().show_help()
        return True

    if getattr(args, 'examples', False) and args.command:
        return handle_examples(args.command)

    return False


def load_configuration(args) -> Optional[Dict[str, Any]]:
    """Load the configuration file named by --config, if any"""
    if getattr(args, 'config', None):
        return ConfigManager().load_config(args.config)
    return None


def configure_manager(args, config) -> GitCredentialsManager:
    """Create the manager with global settings from args and config"""
    skip_tls = getattr(args, 'skip_tls', False)
    debug = getattr(args, 'debug', False)

    if config:
        global_config = config.get('global') or {}
        skip_tls = skip_tls or global_config.get('skip_tls', False)
        debug = debug or global_config.get('debug', False)

    return create_git_credentials_manager(skip_tls=skip_tls, debug=debug)


def dispatch_command(args, manager, config):
    """Dispatch to the appropriate command handler"""
    handler = COMMAND_HANDLERS.get(args.command)
    if handler:
        handler(args, manager, config)
    else:
        print(f"Unknown command: {args.command}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None):
    """Main entry point with unified execution flow"""
    argv = sys.argv[1:] if argv is None else argv
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if handle_early_exit_flags(args, argv):
        return

    if not args.command:
        print("Error: No command specified. Use --help for usage information.")
        sys.exit(1)

    setup_logging(getattr(args, 'debug', False))

    if getattr(args, 'skip_tls', False):
        logger.warning(ErrorMessages.SSLError.VERIFICATION_DISABLED_WARNING)

    try:
        config = load_configuration(args)
        if config and (config.get('global') or {}).get('debug'):
            setup_logging(True)

        manager = configure_manager(args, config)
        dispatch_command(args, manager, config)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(1)
    except GitCredentialsError as e:
        message = mask_sensitive_info(str(e), getattr(args, 'kube_token', None))
        logger.error(message)
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        message = mask_sensitive_info(str(e), getattr(args, 'kube_token', None))
        logger.error(f"Unexpected error: {message}")
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
