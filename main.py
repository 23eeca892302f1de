#!/usr/bin/env python

"""
Todo List Application - Main Entry Point

A small desktop to-do list: add, check off and delete tasks, kept across
launches in a local store, with JSON export and import from the settings.

Usage:
    python main.py

Requirements:
    - Python 3.10+
    - See pyproject.toml for dependencies
"""

import sys
from pathlib import Path

# Add app directory to path
sys.path.insert(0, str(Path(__file__).parent))

from app.infra.config import get_settings
from app.logging_setup import setup_logging


def main():
    """Main entry point"""
    settings = get_settings()
    setup_logging(settings.data_dir, settings.log_level)

    from app.ui import TodoApp
    app = TodoApp()
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
