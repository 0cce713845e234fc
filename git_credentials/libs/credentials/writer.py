"""
Credentials File Writer

Determines where the Git credentials file goes and writes it.
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from ..core.constants import EnvironmentVariables, FileConstants
from ..core.exceptions import WriteError

logger = logging.getLogger(__name__)


def git_credentials_file(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Return the canonical location of the Git credentials file

    Args:
        environ: Environment to read XDG_CONFIG_HOME from (defaults to os.environ)

    Returns:
        str: $XDG_CONFIG_HOME/git/credentials, or the same under the home directory
    """
    environ = os.environ if environ is None else environ
    config_home = environ.get(str(EnvironmentVariables.XDG_CONFIG_HOME)) or str(Path.home())
    return str(Path(config_home) / FileConstants.GIT_CREDENTIALS_DIR / FileConstants.GIT_CREDENTIALS_FILE)


class CredentialsFileWriter:
    """Writes Git credentials file content to disk"""

    def __init__(self, permissions: int = FileConstants.DEFAULT_WRITE_PERMISSIONS):
        self.permissions = permissions

    def determine_output_file(self, output_file: str = None) -> str:
        """
        Resolve the output path and create its parent directory

        Args:
            output_file: Explicit output path (optional)

        Returns:
            str: Path to write to

        Raises:
            WriteError: If the parent directory cannot be created
        """
        out_file = output_file or git_credentials_file()

        parent = Path(out_file).parent
        if str(parent) not in ("", "."):
            try:
                parent.mkdir(mode=self.permissions, parents=True, exist_ok=True)
            except OSError as e:
                raise WriteError(out_file, e) from e
        return out_file

    def write(self, path: str, data: bytes) -> str:
        """
        Write the credentials file

        Args:
            path: Target file path
            data: Full file content

        Returns:
            str: The written path

        Raises:
            WriteError: If the file cannot be created or written
        """
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.permissions)
            with os.fdopen(fd, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise WriteError(path, e) from e

        logger.info(f"Generated Git credentials file {path}")
        return path
