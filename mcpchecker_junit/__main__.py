"""
Entry point for running mcpchecker_junit as a module.

Usage:
    python -m mcpchecker_junit [INPUT_FILE] [options]
"""

from mcpchecker_junit.cli import main

if __name__ == "__main__":
    main()
