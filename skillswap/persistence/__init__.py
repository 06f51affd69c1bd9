"""
State persistence for the SkillSwap matching system.
"""

from .storage import load_state, save_state, reconcile_state

__all__ = ["load_state", "save_state", "reconcile_state"]
