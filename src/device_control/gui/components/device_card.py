"""Device card component for displaying and controlling a device."""

import customtkinter as ctk
from typing import Callable, Optional
import logging

from ...devices.base import DeviceControl, DeviceCapability, DeviceType
from ...devices.thermostat import ThermostatControl
from ...i18n import _
from ..labels import action_text, state_text, type_text

logger = logging.getLogger(__name__)


class DeviceCard(ctk.CTkFrame):
    """A card component that displays device state and controls."""

    TYPE_ICONS = {
        DeviceType.LIGHT: "\U0001F4A1",  # Light bulb
        DeviceType.THERMOSTAT: "\U0001F321",  # Thermometer
        DeviceType.SMART_LOCK: "\U0001F512",  # Lock
        DeviceType.GARAGE_DOOR: "\U0001F697",  # Car
    }

    def __init__(
        self,
        parent,
        device: DeviceControl,
        on_toggle: Optional[Callable[[DeviceControl], None]] = None,
        on_set_temperature: Optional[Callable[[ThermostatControl, str], None]] = None,
        **kwargs,
    ):
        """Initialize the device card.

        Args:
            parent: Parent widget
            device: The device to display
            on_toggle: Callback when the power button is clicked
            on_set_temperature: Callback with the raw text of the temperature entry
            **kwargs: Additional arguments for CTkFrame
        """
        super().__init__(parent, **kwargs)

        self.device = device
        self._on_toggle = on_toggle
        self._on_set_temperature = on_set_temperature
        self.temperature_entry: Optional[ctk.CTkEntry] = None

        self._setup_ui()
        self._update_from_device()

    def _setup_ui(self) -> None:
        """Set up the card UI."""
        self.configure(corner_radius=10)
        self.grid_columnconfigure(0, weight=1)

        # Header row: icon, name, power button
        header_frame = ctk.CTkFrame(self, fg_color="transparent")
        header_frame.grid(row=0, column=0, sticky="ew", padx=10, pady=(10, 5))
        header_frame.grid_columnconfigure(1, weight=1)

        icon = self.TYPE_ICONS.get(self.device.device_type, "\U00002753")
        self.icon_label = ctk.CTkLabel(header_frame, text=icon, font=ctk.CTkFont(size=24))
        self.icon_label.grid(row=0, column=0, padx=(0, 10))

        self.name_label = ctk.CTkLabel(
            header_frame,
            text=self.device.name,
            font=ctk.CTkFont(size=14, weight="bold"),
            anchor="w",
        )
        self.name_label.grid(row=0, column=1, sticky="w")

        self.power_button = ctk.CTkButton(
            header_frame,
            width=90,
            height=32,
            corner_radius=16,
            command=self._handle_toggle,
        )
        self.power_button.grid(row=0, column=2, padx=(5, 0))

        # State row
        self.state_label = ctk.CTkLabel(
            self,
            font=ctk.CTkFont(size=11),
            text_color="gray",
            anchor="w",
        )
        self.state_label.grid(row=1, column=0, sticky="ew", padx=10, pady=(2, 10))

        if self.device.has_capability(DeviceCapability.TEMPERATURE):
            self._setup_temperature_controls()

    def _setup_temperature_controls(self) -> None:
        """Set up the temperature entry for thermostats."""
        temp_frame = ctk.CTkFrame(self, fg_color="transparent")
        temp_frame.grid(row=2, column=0, sticky="ew", padx=10, pady=(0, 10))

        icon = ctk.CTkLabel(temp_frame, text="\U0001F321", font=ctk.CTkFont(size=14))
        icon.pack(side="left", padx=(0, 5))

        self.temperature_entry = ctk.CTkEntry(
            temp_frame,
            width=70,
            placeholder_text=f"{ThermostatControl.MIN_TEMPERATURE}-{ThermostatControl.MAX_TEMPERATURE}",
        )
        self.temperature_entry.pack(side="left")
        self.temperature_entry.bind("<Return>", lambda event: self._handle_set_temperature())

        set_button = ctk.CTkButton(
            temp_frame,
            text=_("set_temperature"),
            width=60,
            height=28,
            command=self._handle_set_temperature,
        )
        set_button.pack(side="left", padx=(5, 0))

    def _handle_toggle(self) -> None:
        """Handle power button click."""
        if self._on_toggle:
            self._on_toggle(self.device)

    def _handle_set_temperature(self) -> None:
        if self._on_set_temperature and self.temperature_entry is not None:
            self._on_set_temperature(self.device, self.temperature_entry.get())

    def _update_from_device(self) -> None:
        """Update UI from device state."""
        self.state_label.configure(text=f"{type_text(self.device)} • {state_text(self.device)}")
        self.power_button.configure(text=action_text(self.device))

        if self.device.is_active:
            self.power_button.configure(
                fg_color=("green", "#2fa572"),
                hover_color=("darkgreen", "#1f7a50"),
            )
        else:
            self.power_button.configure(
                fg_color=("gray70", "gray30"),
                hover_color=("gray60", "gray40"),
            )

    def refresh(self) -> None:
        """Refresh the card from device state."""
        self._update_from_device()
