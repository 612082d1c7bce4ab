"""
:Description: Provides convenience utilities used by all modules.
"""

from __future__ import annotations

import importlib.metadata


def get_hfb_version() -> str:
    """
    Convenience function to programmatically acquire the version of this project.

    :return: The current version of Hash Format Bench.
    """
    return importlib.metadata.version("hash-format-bench")
