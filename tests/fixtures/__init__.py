"""Test fixtures for cartonsdk tests.

- toolchains: fake swift executables, installation roots and SDK archives

Import fixtures in your tests using:
    from tests.fixtures.toolchains import fake_home, make_swift_archive
"""

__all__ = [
    "toolchains",
]
