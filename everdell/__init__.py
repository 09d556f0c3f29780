"""
Everdell - Rules engine for the Everdell card and worker-placement game.

A deterministic engine that owns the whole game state machine:
- Card, location and event catalogs with their effects
- Player resource, worker and city bookkeeping
- Multi-step turns resolved through a serializable pending-input queue
- Legal input generation and on-demand scoring
"""

__version__ = "0.1.0"
