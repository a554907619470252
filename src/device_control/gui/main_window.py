"""Main application window."""

import customtkinter as ctk
from typing import TYPE_CHECKING, Callable, Optional
import logging

from .components.device_list import DeviceList
from .labels import parse_temperature
from ..core.events import Event, EventType
from ..devices.base import DeviceControl, StatusMessage
from ..devices.thermostat import ThermostatControl
from ..i18n import _

if TYPE_CHECKING:
    from ..app import DeviceControlApp

logger = logging.getLogger(__name__)


class MainWindow(ctk.CTk):
    """Main application window listing every registered device."""

    def __init__(
        self,
        app: "DeviceControlApp",
        on_close: Optional[Callable] = None,
        **kwargs,
    ):
        """Initialize the main window.

        Args:
            app: The main application instance
            on_close: Callback when window is closed
            **kwargs: Additional arguments for CTk
        """
        super().__init__(**kwargs)

        self.app = app
        self._on_close = on_close

        self._setup_window()
        self._setup_ui()
        self._bind_events()

        for device in self.app.registry:
            self.device_list.add_device(device)

    def _setup_window(self) -> None:
        """Configure the window."""
        self.title(_("app_title"))

        settings = self.app.settings.load()
        width = settings.window_width
        height = settings.window_height

        # Center window on screen
        screen_width = self.winfo_screenwidth()
        screen_height = self.winfo_screenheight()
        x = (screen_width - width) // 2
        y = (screen_height - height) // 2

        self.geometry(f"{width}x{height}+{x}+{y}")
        self.minsize(400, 300)

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.grid_rowconfigure(1, weight=1)
        self.grid_columnconfigure(0, weight=1)

        header = ctk.CTkFrame(self, height=50, corner_radius=0)
        header.grid(row=0, column=0, sticky="ew")

        title = ctk.CTkLabel(
            header,
            text=_("app_title"),
            font=ctk.CTkFont(size=18, weight="bold"),
        )
        title.grid(row=0, column=0, padx=15, pady=10)

        self.device_list = DeviceList(
            self,
            on_toggle=self._handle_device_toggle,
            on_set_temperature=self._handle_set_temperature,
        )
        self.device_list.grid(row=1, column=0, sticky="nsew", padx=10, pady=10)

        footer = ctk.CTkFrame(self, height=30, corner_radius=0)
        footer.grid(row=2, column=0, sticky="ew")

        self.status_label = ctk.CTkLabel(
            footer,
            text=_("ready"),
            font=ctk.CTkFont(size=11),
            text_color="gray",
            anchor="w",
        )
        self.status_label.pack(side="left", padx=10, pady=5)

    def _bind_events(self) -> None:
        """Bind window and event bus events."""
        self.protocol("WM_DELETE_WINDOW", self._handle_close)

        self.app.event_bus.subscribe(EventType.DEVICE_STATE_CHANGED, self._on_status_event)
        self.app.event_bus.subscribe(EventType.INVALID_INPUT, self._on_status_event)
        self.app.event_bus.subscribe(EventType.DEVICE_ADDED, self._on_device_added)
        self.app.event_bus.subscribe(EventType.DEVICE_REMOVED, self._on_device_removed)

    def _on_status_event(self, event: Event) -> None:
        status: StatusMessage = event.data
        self.device_list.refresh_device(status.device_id)
        self._show_status(status.text, error=not status.accepted)

    def _on_device_added(self, event: Event) -> None:
        self.device_list.add_device(event.data)

    def _on_device_removed(self, event: Event) -> None:
        self.device_list.remove_device(event.data.device_id)

    def _show_status(self, text: str, error: bool = False) -> None:
        self.status_label.configure(text=text, text_color="#e74c3c" if error else "gray")

    def _handle_device_toggle(self, device: DeviceControl) -> None:
        device.toggle()

    def _handle_set_temperature(self, device: ThermostatControl, raw_value: str) -> None:
        """Parse the entry text and apply it to the thermostat."""
        temperature = parse_temperature(raw_value)
        if temperature is None:
            self._show_status(_("temperature_not_a_number"), error=True)
            return

        device.set_temperature(temperature)

    def _handle_close(self) -> None:
        """Handle window close button."""
        logger.debug("Closing control panel")
        self.app.event_bus.unsubscribe(EventType.DEVICE_STATE_CHANGED, self._on_status_event)
        self.app.event_bus.unsubscribe(EventType.INVALID_INPUT, self._on_status_event)
        self.app.event_bus.unsubscribe(EventType.DEVICE_ADDED, self._on_device_added)
        self.app.event_bus.unsubscribe(EventType.DEVICE_REMOVED, self._on_device_removed)

        if self._on_close:
            self._on_close()
        else:
            self.destroy()
