"""Main application orchestrator."""

from argparse import ArgumentParser
from pathlib import Path
from typing import Optional
import logging
import sys

from .core.events import EventBus, Event, EventType
from .devices.base import DeviceControl, StatusMessage
from .devices.factory import create_default_devices
from .devices.registry import DeviceRegistry
from .i18n import init_translator
from .selftest import run_self_test
from .storage.settings import SettingsManager

logger = logging.getLogger(__name__)

# Printed in every language
SELF_TEST_PASSED = "All tests passed!"


class DeviceControlApp:
    """Owns the registry of devices and wires their status into the event bus."""

    def __init__(
        self,
        settings: Optional[SettingsManager] = None,
        log_level: Optional[str] = None,
        language: Optional[str] = None,
    ):
        """Initialize the application.

        Args:
            settings: Settings manager (defaults to the user's config directory)
            log_level: Overrides the configured log level
            language: Overrides the configured language
        """
        self.settings = settings or SettingsManager()
        app_settings = self.settings.load()

        self._setup_logging(log_level or app_settings.log_level)
        init_translator(language or app_settings.language)

        self.event_bus = EventBus()
        self.registry = DeviceRegistry()
        self.registry.on_device_added(self._handle_device_added)
        self.registry.on_device_removed(self._handle_device_removed)

    def _setup_logging(self, level: str) -> None:
        """Configure logging."""
        logging.basicConfig(
            level=getattr(logging, level.upper(), logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[
                logging.StreamHandler(sys.stdout),
            ],
        )

    def _handle_device_added(self, device: DeviceControl) -> None:
        device.set_status_callback(self._handle_device_status)
        self.event_bus.publish(Event(EventType.DEVICE_ADDED, device))

    def _handle_device_removed(self, device: DeviceControl) -> None:
        device.set_status_callback(None)
        self.event_bus.publish(Event(EventType.DEVICE_REMOVED, device))

    def _handle_device_status(self, status: StatusMessage) -> None:
        event_type = EventType.DEVICE_STATE_CHANGED if status.accepted else EventType.INVALID_INPUT
        self.event_bus.publish(Event(event_type, status))

    def self_test(self) -> None:
        """Run the device self-test and print the success line.

        Raises:
            SelfTestError: If any device misbehaves
        """
        run_self_test()
        print(SELF_TEST_PASSED)

    def load_default_devices(self) -> None:
        """Register one device of each kind."""
        for device in create_default_devices():
            self.registry.add_device(device)

    def run_demo(self) -> None:
        """Turn every registered device on and then off again."""
        for device in self.registry:
            device.turn_on()
            device.turn_off()

    def run_gui(self) -> None:
        """Open the control panel and block until it is closed."""
        import customtkinter as ctk

        from .gui.main_window import MainWindow

        settings = self.settings.load()
        ctk.set_appearance_mode(settings.theme)
        ctk.set_default_color_theme("blue")

        window = MainWindow(self)
        logger.info("Starting control panel")
        window.mainloop()

    def run(self, demo: bool = True, gui: bool = False) -> None:
        """Run the self-test, then the demo and the GUI as requested."""
        self.self_test()
        self.load_default_devices()

        if demo:
            self.run_demo()

        if gui:
            self.run_gui()


def get_argument_parser() -> ArgumentParser:
    parser = ArgumentParser(description="Control simulated household devices")
    parser.add_argument("--gui", action="store_true", help="open the control panel after the self-test")
    parser.add_argument("--no-demo", action="store_true", help="skip the on/off demo over all devices")
    parser.add_argument("--log-level", type=str, default=None, help="logging level, e.g. DEBUG or INFO")
    parser.add_argument("--language", type=str, default=None, help="language code (en or sv)")
    parser.add_argument("--config-dir", type=Path, default=None, help="directory holding settings.json")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Application entry point."""
    args = get_argument_parser().parse_args(argv)

    settings = SettingsManager(settings_dir=args.config_dir) if args.config_dir else None
    app = DeviceControlApp(settings=settings, log_level=args.log_level, language=args.language)
    app.run(demo=not args.no_demo, gui=args.gui)
    return 0


if __name__ == "__main__":
    sys.exit(main())
