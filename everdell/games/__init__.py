"""Game content: card, location and event catalogs."""
