"""End-to-end tests for cartonsdk."""
