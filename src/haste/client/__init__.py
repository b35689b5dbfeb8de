"""Document client - lifecycle controller and its collaborators."""

from .application import create_controller
from .config import ClientConfig
from .controller import AppController
from .document import DocumentModel, NewDocument, LoadedDocument, DocumentState
from .highlighting import Highlighter, HighlightResult, PygmentsHighlighter
from .lifecycle import LifecycleState, StateTransitionError
from .router import Router, HistoryRouter, NavigationMode
from .storage import StorageClient, SaveResult
from .transitions import TransitionManager
from .view import DocumentView, RenderMode

__all__ = [
    "create_controller",
    "ClientConfig",
    "AppController",
    "DocumentModel",
    "NewDocument",
    "LoadedDocument",
    "DocumentState",
    "Highlighter",
    "HighlightResult",
    "PygmentsHighlighter",
    "LifecycleState",
    "StateTransitionError",
    "Router",
    "HistoryRouter",
    "NavigationMode",
    "StorageClient",
    "SaveResult",
    "TransitionManager",
    "DocumentView",
    "RenderMode",
]
