"""Presentation port driven by the lifecycle controller."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from .document import DocumentState


class RenderMode(str, Enum):
    EDITING = "editing"
    PRESENTING = "presenting"


class DocumentView(ABC):
    """Renders document state.

    render_full_state() redraws everything including the editable content;
    render_metadata() redraws titles and commands but leaves the content
    the user is typing untouched.
    """

    @abstractmethod
    def render_full_state(
        self,
        state: DocumentState,
        mode: RenderMode,
        highlighted: Optional[str] = None,
    ) -> None:
        pass

    @abstractmethod
    def render_metadata(self, state: DocumentState, mode: RenderMode) -> None:
        pass

    @abstractmethod
    def notify_error(self, message: str) -> None:
        pass

    @abstractmethod
    def open_url(self, url: str) -> None:
        pass
