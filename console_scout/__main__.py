# console_scout/__main__.py
"""``python -m console_scout``"""
from console_scout.cli import main

if __name__ == "__main__":
    main()
