"""
API layer for the GuardWatch backend.

Exposes HTTP endpoints (/auth, /users, /events, /health) and the
notifications WebSocket (/ws).
"""
