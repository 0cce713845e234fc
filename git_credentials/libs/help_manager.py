"""
Help Manager

Serves the help and example texts of the Git credentials commands.
"""

from pathlib import Path
from typing import Optional


class HelpManager:
    """Manages help text and documentation"""

    def __init__(self, help_dir: Optional[Path] = None):
        self.help_dir = help_dir or Path(__file__).parent.parent / "help"

    def get_help(self, topic: str) -> str:
        """Get help text for a command or topic such as 'credentials_examples'"""
        help_file = self.help_dir / f"{topic.replace('-', '_')}_help.txt"

        if help_file.is_file():
            return help_file.read_text()
        return f"No help available for command: {topic}"

    def get_main_help(self) -> str:
        """Get main help text"""
        return self.get_help("main")

    def get_examples(self) -> str:
        """Get the examples of the credentials command"""
        return self.get_help("credentials_examples")

    def show_help(self, topic: Optional[str] = None) -> None:
        """Show help for a topic, or the main help if none is given"""
        print(self.get_main_help() if topic is None else self.get_help(topic))

    def show_examples(self) -> None:
        """Show examples help"""
        print(self.get_examples())
