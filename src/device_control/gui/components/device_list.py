"""Scrollable device list component."""

import customtkinter as ctk
from typing import Callable, Optional
import logging

from .device_card import DeviceCard
from ...devices.base import DeviceControl
from ...devices.thermostat import ThermostatControl
from ...i18n import _

logger = logging.getLogger(__name__)


class DeviceList(ctk.CTkScrollableFrame):
    """A scrollable list of device cards."""

    def __init__(
        self,
        parent,
        on_toggle: Optional[Callable[[DeviceControl], None]] = None,
        on_set_temperature: Optional[Callable[[ThermostatControl, str], None]] = None,
        **kwargs,
    ):
        """Initialize the device list.

        Args:
            parent: Parent widget
            on_toggle: Callback when a device power button is clicked
            on_set_temperature: Callback when a thermostat temperature is submitted
            **kwargs: Additional arguments for CTkScrollableFrame
        """
        super().__init__(parent, **kwargs)

        self._on_toggle = on_toggle
        self._on_set_temperature = on_set_temperature
        self._cards: dict[str, DeviceCard] = {}

        self.grid_columnconfigure(0, weight=1)

        self._empty_label = ctk.CTkLabel(
            self,
            text=_("no_devices"),
            font=ctk.CTkFont(size=14),
            text_color="gray",
        )
        self._show_empty_state()

    def _show_empty_state(self) -> None:
        self._empty_label.grid(row=0, column=0, pady=50)

    def _hide_empty_state(self) -> None:
        self._empty_label.grid_forget()

    def add_device(self, device: DeviceControl) -> DeviceCard:
        """Add a device to the list.

        Args:
            device: The device to add

        Returns:
            The created DeviceCard, or the existing one if already listed
        """
        if device.device_id in self._cards:
            logger.debug(f"Device {device.device_id} already in list, refreshing")
            card = self._cards[device.device_id]
            card.refresh()
            return card

        if not self._cards:
            self._hide_empty_state()

        card = DeviceCard(
            self,
            device=device,
            on_toggle=self._on_toggle,
            on_set_temperature=self._on_set_temperature,
        )

        row = len(self._cards)
        card.grid(row=row, column=0, sticky="ew", pady=5, padx=5)
        self._cards[device.device_id] = card

        logger.debug(f"Added device card for {device.name}")
        return card

    def remove_device(self, device_id: str) -> bool:
        """Remove a device from the list.

        Args:
            device_id: ID of the device to remove

        Returns:
            True if device was removed, False if not found
        """
        if device_id not in self._cards:
            return False

        card = self._cards.pop(device_id)
        card.destroy()
        self._reorder_cards()

        if not self._cards:
            self._show_empty_state()

        logger.debug(f"Removed device card for {device_id}")
        return True

    def refresh_device(self, device_id: str) -> bool:
        """Refresh a specific device card.

        Args:
            device_id: ID of the device to refresh

        Returns:
            True if device was refreshed, False if not found
        """
        if device_id not in self._cards:
            return False

        self._cards[device_id].refresh()
        return True

    def _reorder_cards(self) -> None:
        """Reorder cards after removal."""
        for i, card in enumerate(self._cards.values()):
            card.grid(row=i, column=0, sticky="ew", pady=5, padx=5)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, device_id: str) -> bool:
        return device_id in self._cards
