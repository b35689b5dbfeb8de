"""Haste - text paste sharing service.

Server side: FastAPI application over a SQL key-value document store.
Client side: document lifecycle controller driving an async storage client.
"""

__version__ = "0.1.0"
