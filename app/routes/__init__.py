from . import games, health, players
