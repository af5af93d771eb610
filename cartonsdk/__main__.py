"""
Entry point for running cartonsdk CLI as a module.

Usage: python -m cartonsdk [command] [options]
"""

from cartonsdk.cli.parser import main

if __name__ == "__main__":
    main()
