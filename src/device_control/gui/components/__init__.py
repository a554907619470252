"""Reusable GUI components."""

from .device_card import DeviceCard
from .device_list import DeviceList

__all__ = ["DeviceCard", "DeviceList"]
