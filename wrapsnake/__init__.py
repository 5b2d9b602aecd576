# wrapsnake Source Package
"""
wrapsnake - Snake on a wrap-around grid.

Modules:
- core: Abstract interfaces for the game engine and renderers
- game: Game state engine, session loop helpers and renderers
- visualization: Replay recording and playback
- utils: Configuration loading
"""
