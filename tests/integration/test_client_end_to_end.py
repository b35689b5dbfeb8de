"""End-to-end tests: controller built by create_controller against the real app."""

import httpx
import pytest

from haste.client.application import create_controller
from haste.client.config import ClientConfig
from haste.client.lifecycle import LifecycleState
from haste.client.router import HistoryRouter
from haste.client.view import DocumentView, RenderMode


class RecordingView(DocumentView):

    def __init__(self):
        self.renders = []
        self.errors = []

    def render_full_state(self, state, mode, highlighted=None):
        self.renders.append((mode, highlighted))

    def render_metadata(self, state, mode):
        pass

    def notify_error(self, message):
        self.errors.append(message)

    def open_url(self, url):
        pass


def build(app, initial_path=""):
    http = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")
    router = HistoryRouter("Haste", initial_path=initial_path)
    view = RecordingView()
    controller = create_controller(
        view,
        config=ClientConfig(BASE_URL="http://testserver"),
        router=router,
        transport=http,
    )
    return controller, router, view, http


class TestClientEndToEnd:

    @pytest.mark.asyncio
    async def test_save_and_reload(self, app):
        content = "#!/usr/bin/env python\nprint('hello')\n"
        controller, router, view, http = build(app)
        async with http:
            await controller.init()
            controller.handle_content_input(content)
            await controller.handle_save()

            assert controller.state == LifecycleState.PRESENTING
            key = controller.document.get_key()
            assert router.current_path() == f"{key}.py"

            controller.handle_new()
            assert controller.state == LifecycleState.EDITING

            await router.back()

        assert controller.state == LifecycleState.PRESENTING
        assert controller.document.get_content() == content
        assert controller.document.get_language() == "python"
        mode, highlighted = view.renders[-1]
        assert mode == RenderMode.PRESENTING
        assert '<span class="nb">print</span>' in highlighted

    @pytest.mark.asyncio
    async def test_ghost_route_lands_on_blank_editor(self, app):
        controller, router, view, http = build(app, initial_path="ghost")
        async with http:
            await controller.init()

        assert controller.state == LifecycleState.EDITING
        assert controller.document.get_content() == ""
        assert router.current_path() == ""
        assert view.renders[-1] == (RenderMode.EDITING, None)
