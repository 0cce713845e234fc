"""
Configuration Management

Handles loading and managing configuration files for the Git credentials tool.
"""

import logging
from io import StringIO
from pathlib import Path
from typing import Dict, Any

try:
    import yaml
except ImportError:
    raise ImportError("PyYAML is required. Install with: pip install PyYAML")

try:
    from ruamel.yaml import YAML
    from ruamel.yaml.comments import CommentedMap
    HAS_RUAMEL_YAML = True
except ImportError:
    HAS_RUAMEL_YAML = False

from .exceptions import ConfigurationError
from .constants import ErrorMessages, FileConstants

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading and validation"""

    # Configuration schema - defines expected structure and types
    CONFIG_SCHEMA = {
        'credentials': {
            'type': dict,
            'required': False,
            'fields': {
                'output': {'type': str, 'required': False},
                'credentials_secret': {'type': str, 'required': False},
                'github_app_owner': {'type': str, 'required': False},
                'github_app': {'type': bool, 'required': False},
                'git_kind': {'type': str, 'required': False},
                'namespace': {'type': str, 'required': False},
                'auth_config': {'type': str, 'required': False}
            }
        },
        'global': {
            'type': dict,
            'required': False,
            'fields': {
                'skip_tls': {'type': bool, 'required': False},
                'debug': {'type': bool, 'required': False}
            }
        },
    }

    def __init__(self):
        """Initialize configuration manager"""
        self.config_data = {}
        self.config_file_path = None

    def load_config(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from YAML file

        Args:
            config_path: Path to configuration file

        Returns:
            Dict containing configuration data

        Raises:
            ConfigurationError: If configuration file cannot be loaded or is invalid
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise ConfigurationError(
                str(ErrorMessages.ConfigError.CONFIG_FILE_NOT_FOUND).format(config_path=config_path)
            )

        if not config_file.is_file():
            raise ConfigurationError(f"Configuration path is not a file: {config_path}")

        try:
            with open(config_file, 'r') as f:
                self.config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file {config_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Failed to load configuration from {config_path}: {e}") from e

        self.config_file_path = config_path
        logger.debug(f"Successfully loaded configuration from {config_path}")

        self._validate_config()

        return self.config_data

    def _validate_config(self) -> None:
        """
        Validate configuration structure and values

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not isinstance(self.config_data, dict):
            raise ConfigurationError("Configuration must be a dictionary")

        self._validate_against_schema(self.config_data, self.CONFIG_SCHEMA, "config")

    def _validate_against_schema(self, data: Dict[str, Any], schema: Dict[str, Any], path: str = "") -> None:
        """
        Validate data against schema definition

        Args:
            data: Data to validate
            schema: Schema definition
            path: Current path for error reporting

        Raises:
            ConfigurationError: If data doesn't match schema
        """
        for key, field_schema in schema.items():
            current_path = f"{path}.{key}" if path else key

            if key in data:
                value = data[key]

                # Skip None values for optional fields
                if value is None and not field_schema.get('required', False):
                    continue

                expected_type = field_schema['type']
                if not isinstance(value, expected_type):
                    type_name = expected_type.__name__
                    raise ConfigurationError(f"{current_path} must be a {type_name}")

                if 'choices' in field_schema:
                    if value not in field_schema['choices']:
                        choices_str = ', '.join(f"'{c}'" for c in field_schema['choices'])
                        raise ConfigurationError(f"{current_path} must be one of: {choices_str}")

                if expected_type == dict and 'fields' in field_schema:
                    self._validate_against_schema(value, field_schema['fields'], current_path)

            elif field_schema.get('required', False):
                raise ConfigurationError(f"Required field {current_path} is missing")

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get specific configuration section

        Args:
            section: Section name (e.g., 'credentials', 'global')

        Returns:
            Dict containing section data, empty dict if section doesn't exist
        """
        return self.config_data.get(section) or {}

    def get_value(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key

        Args:
            key: Configuration key (supports dot notation like 'credentials.output')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self.config_data

        try:
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def _write_config_file(self, content: str, output_dir: str = None) -> str:
        """
        Write configuration content to file

        Args:
            content: YAML content to write
            output_dir: Directory to save file (optional, defaults to current directory)

        Returns:
            str: Path to written file

        Raises:
            ConfigurationError: If file writing fails
        """
        try:
            output_path = Path(output_dir or ".")
            output_path.mkdir(parents=True, exist_ok=True)
            config_file = output_path / FileConstants.DEFAULT_CONFIG_FILE

            with open(config_file, 'w') as f:
                f.write(content)
        except OSError as e:
            raise ConfigurationError(f"Failed to write configuration file: {e}") from e

        logger.info(f"Configuration file written: {config_file}")
        return str(config_file)

    def generate_config_template(self, output_dir: str = None) -> str:
        """
        Generate configuration template file

        Args:
            output_dir: Directory to save template (optional)

        Returns:
            str: Path to generated template file
        """
        return self._write_config_file(self.get_config_template_content(), output_dir)

    def _create_config_template_structure(self) -> Dict[str, Any]:
        """Create the standard configuration template structure"""
        return {
            'credentials': {
                'output': "",
                'credentials_secret': "",
                'github_app_owner': "",
                'github_app': False,
                'git_kind': "",
                'namespace': "",
                'auth_config': ""
            },
            'global': {
                'skip_tls': False,
                'debug': False
            }
        }

    def get_config_template_content(self) -> str:
        """
        Generate configuration template content as string without file I/O

        Returns:
            str: YAML configuration template content
        """
        template = self._create_config_template_structure()

        if not HAS_RUAMEL_YAML:
            return yaml.dump(template, default_flow_style=False, sort_keys=False)

        yaml_processor = YAML()
        yaml_processor.width = 4096
        yaml_processor.indent(mapping=2, sequence=4, offset=2)

        commented_data = CommentedMap()
        for key, value in template.items():
            commented_data[key] = CommentedMap(value)

        commented_data.yaml_set_start_comment(
            "Git Credentials Configuration File\n"
            "Command-line options override these values"
        )
        credentials = commented_data['credentials']
        credentials.yaml_add_eol_comment("defaults to $XDG_CONFIG_HOME/git/credentials", 'output')
        credentials.yaml_add_eol_comment("JX_CREDENTIALS_FROM_SECRET overrides this", 'credentials_secret')
        credentials.yaml_add_eol_comment("gitAuth.yaml used instead of cluster secrets", 'auth_config')

        stream = StringIO()
        yaml_processor.dump(commented_data, stream)
        return stream.getvalue()
