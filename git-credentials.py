#!/usr/bin/env python3
"""
Git Credentials Entry Point

This script provides a simple entry point for the Git credentials tool.
All application logic is contained in the git_credentials.libs.main_app module.
"""

import sys
from pathlib import Path

# Allow running from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).parent))

if __name__ == "__main__":
    try:
        from git_credentials.libs.main_app import main
    except ImportError as e:
        print(f"Error importing main application: {e}", file=sys.stderr)
        print("Please install the requirements: pip install -e .", file=sys.stderr)
        sys.exit(1)
    main()
