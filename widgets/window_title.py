from loguru import logger
from gi.repository import Gdk, Gtk

from fabric.widgets.box import Box
from fabric.widgets.button import Button
from fabric.widgets.image import Image
from fabric.widgets.label import Label

from services.containers import FocusSnapshot, Window
from services.title_resolver import TitleResolver


class WindowTitleWidget(Box):
    def __init__(self, resolver: TitleResolver | None = None):
        super().__init__(name="window-title")
        self.resolver = resolver or TitleResolver()
        self.snapshot = FocusSnapshot()

        self.icon = Image(icon_name="window-symbolic", icon_size=16)
        self.label = Label(label="")
        # visibility is driven by _update, keep show_all from overriding it
        self.icon.set_no_show_all(True)
        self.label.set_no_show_all(True)
        self.button = Button(
            name="window-title-button",
            child=Box(spacing=4, children=(self.icon, self.label)),
        )
        self.button.connect("button-press-event", self._on_press)
        self.children = self.button
        self._update()

    def set_focus_state(self, data: dict):
        """Integration entry point: the window manager layer calls this with each focus update."""
        self.snapshot = FocusSnapshot.from_dict(data)
        self._update()

    def has_controls(self) -> bool:
        if self.resolver.resolve_process_name(self.snapshot):
            return True
        container = self.snapshot.focused_container
        return isinstance(container, Window) and container.state is not None

    def _update(self):
        title = self.resolver.resolve_title(self.snapshot)
        if title:
            self.label.set_label(title)
        self.label.set_visible(bool(title))
        self.icon.set_visible(not title)
        self.button.set_tooltip_text(title or "Focused Window")

        if self.has_controls():
            self.button.add_style_class("has-controls")
        else:
            self.button.remove_style_class("has-controls")

    def _on_press(self, _, event: Gdk.EventButton):
        if not event.state & Gdk.ModifierType.MOD1_MASK:
            return
        text = self.resolver.resolve_process_name(self.snapshot) or ""
        if not text.strip():
            return
        Gtk.Clipboard.get(Gdk.SELECTION_CLIPBOARD).set_text(text, -1)
        logger.info(f"Copied to clipboard: {text}")
