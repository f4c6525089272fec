"""
Scoutsight - observation and perception engine for a football scouting game.

A scout never sees a player's true attributes. Every observation produces a
perceived reading whose noise depends on scout skill, observation context,
how often the player has been watched and the player's current form.
"""

__version__ = "0.1.0"
