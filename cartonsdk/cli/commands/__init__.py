"""
Command implementations for the cartonsdk CLI.

Each module exposes run(args) -> int.
"""
