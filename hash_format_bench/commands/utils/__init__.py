"""
:Description: Shared helpers for CLI commands.
"""
