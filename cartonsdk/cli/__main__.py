"""
Entry point for running cartonsdk CLI as a module.

Usage: python -m cartonsdk.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
