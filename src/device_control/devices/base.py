"""Base device control abstraction."""

from abc import ABC, abstractmethod
from enum import Enum
from dataclasses import dataclass
from typing import Optional, Callable, Any
import logging
import uuid

logger = logging.getLogger(__name__)


class DeviceType(Enum):
    """Kinds of controllable devices."""

    LIGHT = "light"
    THERMOSTAT = "thermostat"
    SMART_LOCK = "smart_lock"
    GARAGE_DOOR = "garage_door"


class DeviceCapability(Enum):
    """Capabilities that devices can have."""

    ON_OFF = "on_off"
    TEMPERATURE = "temperature"


@dataclass
class StatusMessage:
    """A status line reported by a device operation."""

    device_id: str
    text: str
    accepted: bool = True


class DeviceControl(ABC):
    """Abstract base class for all controllable devices.

    ``turn_on`` and ``turn_off`` are the shared capability set. Subclasses
    supply the behaviour through ``_do_turn_on`` and ``_do_turn_off``.
    """

    def __init__(self, device_id: Optional[str] = None, name: Optional[str] = None):
        """Initialize a device.

        Args:
            device_id: Unique identifier (generated if omitted)
            name: Human-readable name (defaults to the device kind)
        """
        self.device_id = device_id or f"{self.device_type.value}-{uuid.uuid4().hex[:8]}"
        self.name = name or self.device_type.value.replace("_", " ").title()
        self._last_status: Optional[StatusMessage] = None
        self._on_status: Optional[Callable[[StatusMessage], None]] = None

    @property
    @abstractmethod
    def device_type(self) -> DeviceType:
        """Return the device type."""
        pass

    @property
    def capabilities(self) -> set[DeviceCapability]:
        """Return set of device capabilities."""
        return {DeviceCapability.ON_OFF}

    @property
    @abstractmethod
    def is_active(self) -> bool:
        """Whether the device is in its "on" state."""
        pass

    @property
    def last_status(self) -> Optional[StatusMessage]:
        """The most recent status reported by this device."""
        return self._last_status

    def has_capability(self, capability: DeviceCapability) -> bool:
        """Check if device has a specific capability."""
        return capability in self.capabilities

    def set_status_callback(self, callback: Optional[Callable[[StatusMessage], None]]) -> None:
        self._on_status = callback

    def turn_on(self) -> None:
        """Turn the device on."""
        self._do_turn_on()

    def turn_off(self) -> None:
        """Turn the device off."""
        self._do_turn_off()

    def toggle(self) -> None:
        """Toggle the device between its on and off states."""
        if self.is_active:
            self.turn_off()
        else:
            self.turn_on()

    @abstractmethod
    def _do_turn_on(self) -> None:
        pass

    @abstractmethod
    def _do_turn_off(self) -> None:
        pass

    def _state_dict(self) -> dict[str, Any]:
        return {"active": self.is_active}

    def _report(self, text: str, accepted: bool = True) -> StatusMessage:
        """Emit a status message for the last operation.

        Args:
            text: Human-readable status line
            accepted: False when the operation rejected its input

        Returns:
            The emitted status message
        """
        if accepted:
            logger.info(f"[{self.name}] {text}")
        else:
            logger.warning(f"[{self.name}] {text}")

        status = StatusMessage(device_id=self.device_id, text=text, accepted=accepted)
        self._last_status = status

        if self._on_status:
            try:
                self._on_status(status)
            except Exception as e:
                logger.error(f"Error in status callback for {self.device_id}: {e}")

        return status

    def to_dict(self) -> dict[str, Any]:
        """Convert device to a dictionary snapshot.

        Returns:
            Dictionary representation of the device
        """
        return {
            "id": self.device_id,
            "name": self.name,
            "type": self.device_type.value,
            "capabilities": sorted(c.value for c in self.capabilities),
            "state": self._state_dict(),
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.device_id} name={self.name}>"
