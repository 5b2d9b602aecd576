"""Replay recording and playback."""

from .replay_player import ReplayData, ReplayManager, LOAD_ERRORS

__all__ = ['ReplayData', 'ReplayManager', 'LOAD_ERRORS']
