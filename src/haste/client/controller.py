"""AppController - document lifecycle orchestration.

Owns the lifecycle state machine (editing | loading | saving | presenting)
and coordinates the document model, storage client, router, highlighter,
view and transition manager.

The lifecycle state doubles as the lock: every command checks its guard and
updates the state synchronously before its first await, so at most one
load or save is in flight per controller. Each accepted load/save also takes
an operation token, and its result is applied only while that token is
current and the state is still the one the operation left it in.
"""

import logging
from typing import Optional
from urllib.parse import quote

from ..domain.documents.errors import DocumentNotFoundError
from ..domain.documents.validation import is_blank
from .config import ClientConfig
from .document import DocumentModel, LoadedDocument
from .highlighting import Highlighter
from .lifecycle import LifecycleState, IN_FLIGHT_STATES, validate_transition
from .router import Router, NavigationMode
from .storage import StorageClient
from .transitions import TransitionManager
from .view import DocumentView, RenderMode

logger = logging.getLogger(__name__)

SAVE_FAILED_MESSAGE = "Failed to save document. Please try again."

# Characters encodeURI leaves alone
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


class AppController:
    """Lifecycle controller for a single document client.

    Args:
        document: Document model owned by this controller
        storage: Client for the document server
        view: Presentation port
        router: Routing port; the controller registers itself as its handler
        highlighter: Syntax highlighter and extension mapping
        transitions: Visual transition wrapper (no effect if None)
        config: Client settings (app name, sharing)
    """

    def __init__(
        self,
        document: DocumentModel,
        storage: StorageClient,
        view: DocumentView,
        router: Router,
        highlighter: Highlighter,
        transitions: Optional[TransitionManager] = None,
        config: Optional[ClientConfig] = None,
    ):
        self.document = document
        self.storage = storage
        self.view = view
        self.router = router
        self.highlighter = highlighter
        self.transitions = transitions or TransitionManager()
        self.config = config or ClientConfig()

        self._state = LifecycleState.EDITING
        self._operation = 0

        self.router.on_route(self.handle_route)

    @property
    def state(self) -> LifecycleState:
        return self._state

    async def init(self) -> None:
        """Dispatch the router's current path."""
        await self.router.init()

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    async def handle_route(self, path: str) -> None:
        """Show a blank document for the empty path, otherwise load key[.ext]."""
        if self._state in IN_FLIGHT_STATES:
            logger.debug(
                f"Ignoring route /{path} while busy",
                extra={"lifecycle_state": self._state.value},
            )
            return

        if not path:
            self._new_document(navigate=False)
        else:
            await self._load_document(path)

    async def handle_save(self, content: Optional[str] = None) -> None:
        """Save the current content (or content, if given) and present it."""
        if self._state != LifecycleState.EDITING:
            return

        if content is None:
            content = self.document.get_content()
        if is_blank(content):
            return

        self.document.set_content(content)
        token = self._begin_operation()
        self._transition_to(LifecycleState.SAVING)

        try:
            result = await self.storage.save(self.document.serialize())
        except Exception as e:
            if not self._is_current(token, LifecycleState.SAVING):
                return
            logger.error(f"Save failed: {e}", exc_info=True)
            self._transition_to(LifecycleState.EDITING)
            self.view.render_metadata(self.document.state, RenderMode.EDITING)
            self.view.notify_error(SAVE_FAILED_MESSAGE)
            return

        if not self._is_current(token, LifecycleState.SAVING):
            logger.debug("Discarding stale save result")
            return

        highlighted = self.highlighter.highlight(content)
        language = result.language or highlighted.language

        self.document.mark_saved(result.key, language)
        self._transition_to(LifecycleState.PRESENTING)
        self.router.navigate(self._display_path(result.key, language), NavigationMode.PUSH)

        logger.info("Document saved", extra={"document_key": result.key})
        self.transitions.run(
            lambda: self.view.render_full_state(
                self.document.state, RenderMode.PRESENTING, highlighted.markup
            )
        )

    def handle_new(self) -> None:
        if self._state in (LifecycleState.EDITING, LifecycleState.PRESENTING):
            self._new_document(navigate=True)

    def handle_duplicate(self) -> None:
        """Start a new document holding a copy of the presented content."""
        if self._state != LifecycleState.PRESENTING:
            return

        content = self.document.duplicate()

        def apply():
            self.document.reset()
            self.document.set_content(content)
            self._transition_to(LifecycleState.EDITING)
            self.router.navigate("", NavigationMode.REPLACE)
            self.view.render_full_state(self.document.state, RenderMode.EDITING)

        self.transitions.run(apply)

    def handle_content_input(self, content: str) -> None:
        if self._state != LifecycleState.EDITING:
            return
        self.document.set_content(content)
        self.view.render_metadata(self.document.state, RenderMode.EDITING)

    def handle_share(self) -> None:
        if self._state != LifecycleState.PRESENTING or not self.config.ENABLE_SHARING:
            return

        page_url = f"{self.config.BASE_URL.rstrip('/')}/{self.router.current_path()}"
        self.view.open_url(
            self.config.SHARE_URL_TEMPLATE.format(url=quote(page_url, safe=_URI_SAFE))
        )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _new_document(self, navigate: bool) -> None:
        def apply():
            self.document.reset()
            self._transition_to(LifecycleState.EDITING)
            if navigate:
                self.router.navigate("", NavigationMode.PUSH)
            self.view.render_full_state(self.document.state, RenderMode.EDITING)

        self.transitions.run(apply)

    async def _load_document(self, path: str) -> None:
        parts = path.split(".")
        key = parts[0]
        hint = self.highlighter.language_for_extension(parts[1]) if len(parts) > 1 and parts[1] else None

        token = self._begin_operation()
        self._transition_to(LifecycleState.LOADING)

        try:
            loaded = await self.storage.load(key)
        except Exception as e:
            if not self._is_current(token, LifecycleState.LOADING):
                return
            if isinstance(e, DocumentNotFoundError):
                logger.info("Document not found", extra={"document_key": key})
            else:
                logger.error(f"Load failed: {e}", exc_info=True, extra={"document_key": key})
            self.document.reset()
            self._transition_to(LifecycleState.EDITING)
            self.router.navigate("", NavigationMode.REPLACE)
            self.view.render_full_state(self.document.state, RenderMode.EDITING)
            return

        if not self._is_current(token, LifecycleState.LOADING):
            logger.debug("Discarding stale load result", extra={"document_key": key})
            return

        highlighted = self.highlighter.highlight(loaded.content, hint or loaded.language)
        language = highlighted.language or hint or loaded.language

        self.document.hydrate(
            LoadedDocument(content=loaded.content, key=loaded.key, language=language)
        )
        self._transition_to(LifecycleState.PRESENTING)

        canonical = self._display_path(loaded.key, language)
        if canonical != path:
            self.router.navigate(canonical, NavigationMode.REPLACE)

        self.transitions.run(
            lambda: self.view.render_full_state(
                self.document.state, RenderMode.PRESENTING, highlighted.markup
            )
        )

    def _display_path(self, key: str, language: Optional[str]) -> str:
        if not language:
            return key
        return f"{key}.{self.highlighter.extension_for_language(language)}"

    def _transition_to(self, new_state: LifecycleState) -> None:
        validate_transition(self._state, new_state)
        logger.debug(
            f"Lifecycle {self._state.value} -> {new_state.value}",
            extra={"lifecycle_state": new_state.value},
        )
        self._state = new_state

    def _begin_operation(self) -> int:
        self._operation += 1
        return self._operation

    def _is_current(self, token: int, expected: LifecycleState) -> bool:
        return token == self._operation and self._state == expected
