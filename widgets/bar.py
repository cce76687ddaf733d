from gi.repository import Gdk

from fabric.widgets.box import Box
from fabric.widgets.centerbox import CenterBox
from fabric.widgets.wayland import WaylandWindow

from services.title_resolver import TitleResolver
from widgets.window_title import WindowTitleWidget


class StatusBar(WaylandWindow):
    def __init__(
        self,
        monitor: int | Gdk.Monitor | None = None,
        resolver: TitleResolver | None = None,
    ):
        window_title = WindowTitleWidget(resolver=resolver)
        super().__init__(
            layer="top",
            anchor="left top right",
            exclusivity="auto",
            title="glaze-title",
            monitor=monitor,
            child=CenterBox(
                name="bar-inner",
                center_children=Box(children=window_title),
            ),
        )
        self.window_title = window_title
        self.show_all()

    def set_focus_state(self, data: dict):
        """Entry point for the window manager integration, which pushes GlazeWM focus output here."""
        self.window_title.set_focus_state(data)


def create_bars(resolver: TitleResolver | None = None) -> list[StatusBar]:
    """Create a StatusBar for each connected monitor."""
    display = Gdk.Display.get_default()
    return [
        StatusBar(monitor=i, resolver=resolver)
        for i in range(display.get_n_monitors())
    ]
