from typing import List

from esper import World

from linesquares.rendering.geometry import RowGeometry, RowLayout, compute_layout, scene_geometry
from linesquares.rendering.row_renderer import RowRenderer
from linesquares.utils.scene import get_row_chain


class RenderSystem:
    """Draws every row each frame; reads progress, never mutates it."""

    def __init__(self, world: World, window, renderer: RowRenderer | None = None):
        self.world = world
        self.window = window
        self.renderer = renderer or RowRenderer()
        self._last_window_size = (self.window.width, self.window.height)
        self._layout: RowLayout | None = None
        self._last_frame: List[RowGeometry] = []

    @property
    def layout(self) -> RowLayout | None:
        return self._layout

    @property
    def last_frame(self) -> List[RowGeometry]:
        return list(self._last_frame)

    def notify_resize(self, width: int, height: int):
        self._last_window_size = (width, height)
        self._layout = None

    def _current_layout(self, row_count: int) -> RowLayout:
        size = (self.window.width, self.window.height)
        if size != self._last_window_size:
            self._last_window_size = size
            self._layout = None
        if self._layout is None or self._layout.row_count != row_count:
            self._layout = compute_layout(size[0], size[1], row_count)
        return self._layout

    def process(self, arcade=None):
        """Build this frame's geometry and draw it.

        ``arcade`` may be injected (tests pass a recorder); otherwise the real
        module is used, and draw calls are skipped when no window is active.
        """
        chain = get_row_chain(self.world)
        if chain is None:
            return
        layout = self._current_layout(chain.row_count)
        self._last_frame = scene_geometry(layout, chain.scales())
        if arcade is None:
            # Local import keeps tests headless without creating a window.
            import arcade
            try:
                arcade.get_window()
            except Exception:
                return
        self.renderer.render(arcade, layout, self._last_frame)
