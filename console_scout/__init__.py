# console_scout/__init__.py
"""
ConsoleScout package initializer.
Defines package version and exposes the console_scripts entry point.
"""
__version__ = "0.1.0"

# Expose CLI entry point; `console_scout.cli` stays the submodule
from .cli import main
