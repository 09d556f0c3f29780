"""
Base game content.

Catalogs are keyed by name and built once at import time.
"""

from .cards import BASE_GAME_CARDS, CARD_REGISTRY, Card
from .events import BASE_GAME_EVENTS, EVENT_REGISTRY, Event
from .locations import BASE_GAME_LOCATIONS, LOCATION_REGISTRY, Location
from .setup import setup_everdell_game

__all__ = [
    "Card",
    "BASE_GAME_CARDS",
    "CARD_REGISTRY",
    "Event",
    "BASE_GAME_EVENTS",
    "EVENT_REGISTRY",
    "Location",
    "BASE_GAME_LOCATIONS",
    "LOCATION_REGISTRY",
    "setup_everdell_game",
]
