"""Client routing - the document path as navigable history.

Paths carry no leading slash; the empty path is the new-document screen
and "key" or "key.ext" addresses a stored document.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Awaitable, Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

RouteHandler = Callable[[str], Awaitable[None]]


class NavigationMode(str, Enum):
    """How navigate() records the new path.

    PUSH adds a history entry. REPLACE overwrites the current one, for
    transitions that should not leave a back-button step behind.
    """
    PUSH = "push"
    REPLACE = "replace"


class Router(ABC):
    """Routing port used by the lifecycle controller.

    navigate() only records the path; it never dispatches to the handler.
    The handler runs on init() and on history traversal.
    """

    @abstractmethod
    def navigate(self, path: str, mode: NavigationMode = NavigationMode.PUSH) -> None:
        pass

    @abstractmethod
    def on_route(self, handler: RouteHandler) -> None:
        """Register the single route handler, replacing any previous one."""
        pass

    @abstractmethod
    def current_path(self) -> str:
        pass

    @abstractmethod
    async def init(self) -> None:
        """Dispatch the current path to the handler."""
        pass


class HistoryRouter(Router):
    """In-memory history log with push/replace and back/forward traversal.

    Each entry is a (path, title) pair; titles are "{app_name}-{key}" for
    documents and app_name for the empty path.
    """

    def __init__(self, app_name: str, initial_path: str = ""):
        self.app_name = app_name
        self._entries: List[Tuple[str, str]] = [(initial_path, self._title_for(initial_path))]
        self._index = 0
        self._handler: Optional[RouteHandler] = None

    def _title_for(self, path: str) -> str:
        if not path:
            return self.app_name
        return f"{self.app_name}-{path.split('.')[0]}"

    @property
    def entries(self) -> List[str]:
        return [path for path, _ in self._entries]

    @property
    def title(self) -> str:
        return self._entries[self._index][1]

    def current_path(self) -> str:
        return self._entries[self._index][0]

    def navigate(self, path: str, mode: NavigationMode = NavigationMode.PUSH) -> None:
        if path == self.current_path():
            return

        entry = (path, self._title_for(path))
        if mode == NavigationMode.REPLACE:
            self._entries[self._index] = entry
        else:
            # Pushing discards any forward history
            del self._entries[self._index + 1:]
            self._entries.append(entry)
            self._index += 1

        logger.debug(f"Navigated to /{path} ({mode.value})")

    def on_route(self, handler: RouteHandler) -> None:
        self._handler = handler

    async def init(self) -> None:
        await self._dispatch()

    async def back(self) -> None:
        if self._index > 0:
            self._index -= 1
            await self._dispatch()

    async def forward(self) -> None:
        if self._index < len(self._entries) - 1:
            self._index += 1
            await self._dispatch()

    async def _dispatch(self) -> None:
        if self._handler is not None:
            await self._handler(self.current_path())
