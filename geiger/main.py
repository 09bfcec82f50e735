"""Command-line consumer: prints measurements from a Geiger counter."""

import argparse
import json
import logging
import signal
import sys

from PySide6 import QtCore

from geiger.core import AppSettings, Measurement
from geiger.serial import SerialReader
from geiger.version import APP_NAME, __version__

logger = logging.getLogger(__name__)


def format_measurement(measurement: Measurement, output_format: str) -> str:
    """Render a measurement for stdout."""
    if output_format == "json":
        data = measurement.to_dict()
        data['timestamp'] = measurement.timestamp.isoformat()
        return json.dumps(data)
    return str(measurement)


class MeasurementPrinter(QtCore.QObject):
    """Receives reader events on the main thread and writes them out."""

    def __init__(self, port: str, output_format: str = "text", stream=None, parent=None):
        super().__init__(parent)
        self.port = port
        self.output_format = output_format
        self.stream = stream or sys.stdout
        self.exit_code = 0

    @QtCore.Slot(object)
    def on_data(self, measurement: Measurement) -> None:
        print(format_measurement(measurement, self.output_format), file=self.stream, flush=True)

    @QtCore.Slot(str)
    def on_rejected(self, line: str) -> None:
        logger.info(f"Skipped line: {line!r}")

    @QtCore.Slot()
    def on_disconnected(self) -> None:
        logger.warning(f"{self.port} disconnected")

    @QtCore.Slot(str)
    def on_error(self, message: str) -> None:
        self.exit_code = 1
        logger.error(message)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="geiger", description="Read measurements from a Geiger counter.")
    parser.add_argument("port", nargs="?", help="serial port, e.g. /dev/ttyUSB0 (default: saved port)")
    parser.add_argument("--baud", type=int, help="baud rate (default: saved or 115200)")
    parser.add_argument("--json", action="store_true", help="print one JSON object per measurement")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="more logging (-vv for debug)")
    parser.add_argument("--save", action="store_true", help="remember port and options for next time")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {__version__}")
    return parser


def apply_args(settings: AppSettings, args: argparse.Namespace) -> AppSettings:
    """Override loaded settings with command-line options."""
    if args.port:
        settings.port = args.port
    if args.baud:
        settings.baud_rate = args.baud
    if args.json:
        settings.output_format = "json"
    if args.verbose == 1:
        settings.log_level = "INFO"
    elif args.verbose >= 2:
        settings.log_level = "DEBUG"
    return settings


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    app = QtCore.QCoreApplication.instance() or QtCore.QCoreApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_NAME)

    settings = apply_args(AppSettings.load(), args)
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not settings.port:
        logger.error("No serial port given and none saved")
        return 2
    if args.save:
        settings.save()

    reader = SerialReader(settings.port, baud=settings.baud_rate)
    printer = MeasurementPrinter(settings.port, settings.output_format)

    reader.data_received.connect(printer.on_data, QtCore.Qt.QueuedConnection)
    reader.line_rejected.connect(printer.on_rejected, QtCore.Qt.QueuedConnection)
    reader.disconnected.connect(printer.on_disconnected, QtCore.Qt.QueuedConnection)
    reader.error.connect(printer.on_error, QtCore.Qt.QueuedConnection)
    reader.finished.connect(app.quit, QtCore.Qt.QueuedConnection)

    # Python only sees Ctrl-C while the interpreter runs, so wake it up periodically
    signal.signal(signal.SIGINT, lambda *_: reader.stop())
    timer = QtCore.QTimer()
    timer.timeout.connect(lambda: None)
    timer.start(200)

    reader.start()
    app.exec()
    reader.stop()
    return printer.exit_code


if __name__ == '__main__':
    sys.exit(main())
