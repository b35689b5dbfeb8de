"""Client composition root."""

from typing import Optional

import httpx

from .config import ClientConfig
from .controller import AppController
from .document import DocumentModel
from .highlighting import Highlighter, PygmentsHighlighter
from .router import Router, HistoryRouter
from .storage import StorageClient
from .transitions import TransitionManager
from .view import DocumentView


def create_controller(
    view: DocumentView,
    config: Optional[ClientConfig] = None,
    router: Optional[Router] = None,
    transport: Optional[httpx.AsyncClient] = None,
    highlighter: Optional[Highlighter] = None,
    transitions: Optional[TransitionManager] = None,
) -> AppController:
    """Wire a controller with default collaborators.

    Args:
        view: Presentation port to drive
        config: Client settings (read from HASTE_* environment if None)
        router: Routing port (in-memory HistoryRouter if None)
        transport: httpx client to reuse; its base_url must point at the server
        highlighter: Highlighter (Pygments if None)
        transitions: Transition manager (no visual effect if None)

    Example:
        controller = create_controller(view)
        await controller.init()
    """
    config = config or ClientConfig()

    return AppController(
        document=DocumentModel(),
        storage=StorageClient(
            config.BASE_URL,
            client=transport,
            timeout=config.REQUEST_TIMEOUT,
        ),
        view=view,
        router=router or HistoryRouter(config.APP_NAME),
        highlighter=highlighter or PygmentsHighlighter(),
        transitions=transitions,
        config=config,
    )
