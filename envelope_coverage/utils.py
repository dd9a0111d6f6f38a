# envelope_coverage/utils.py
"""
Tracing switch shared by the sweep and the harness scripts.
"""

from __future__ import annotations

# Global debug switch
VERBOSE: bool = False


def log(*args, **kwargs) -> None:            # pragma: no cover
    if VERBOSE:
        print(*args, **kwargs)
