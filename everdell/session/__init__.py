"""
Session Module - In-memory store of running games.

A session is one game: its id and the snapshots of every state it has
been through. Sessions are ephemeral; the CLI persists snapshots itself.
"""

from .manager import Session, SessionManager

__all__ = [
    "Session",
    "SessionManager",
]
