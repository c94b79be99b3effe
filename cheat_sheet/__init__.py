"""
cheat-sheet - personal overrides for tldr pages

Looks up a local markdown sheet first and falls back to tldr.
"""
__version__ = "0.3.0"
