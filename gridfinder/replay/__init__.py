"""
Replay module.

Drives step-by-step visualization of a finished search:
- SearchReplay: Forward/backward cursor over the visitation order
- apply_step: Show the first N visited nodes on a grid
- clear_visualization: Drop visited/current/path flags
"""

from gridfinder.replay.stepper import SearchReplay, apply_step, clear_visualization

__all__ = [
    "SearchReplay",
    "apply_step",
    "clear_visualization",
]
