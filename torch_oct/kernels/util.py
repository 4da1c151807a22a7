from __future__ import annotations
import warp as wp


def ensure_warp_available() -> None:
    """Ensure warp is available and initialized."""
    wp.config.quiet = True
    wp.init()
