from __future__ import annotations

import io
import json
from datetime import datetime

from geiger.core import AppSettings, Measurement
from geiger.main import MeasurementPrinter, apply_args, build_parser, format_measurement, main


def _measurement() -> Measurement:
    return Measurement(
        deviceid="ABC123",
        timestamp=datetime(2024, 5, 1, 12, 30, 0),
        cpm=210,
        radiation_usvh=0.92,
        temp_c=23.0,
        pressure_hpa=1013.2,
        tube_v=4.9,
        power_v=12.0,
    )


def test_format_measurement_json() -> None:
    data = json.loads(format_measurement(_measurement(), "json"))
    assert data["deviceid"] == "ABC123"
    assert data["timestamp"] == "2024-05-01T12:30:00"
    assert data["cpm"] == 210


def test_format_measurement_text() -> None:
    text = format_measurement(_measurement(), "text")
    assert "cpm=210" in text
    assert "id=ABC123" in text


def test_command_line_overrides_settings() -> None:
    args = build_parser().parse_args(["/dev/ttyUSB1", "--baud", "9600", "--json", "-vv"])
    settings = apply_args(AppSettings(port="/dev/ttyUSB0"), args)

    assert settings.port == "/dev/ttyUSB1"
    assert settings.baud_rate == 9600
    assert settings.output_format == "json"
    assert settings.log_level == "DEBUG"


def test_missing_options_keep_settings() -> None:
    args = build_parser().parse_args([])
    settings = apply_args(AppSettings(port="/dev/ttyUSB0", baud_rate=57600), args)

    assert settings.port == "/dev/ttyUSB0"
    assert settings.baud_rate == 57600
    assert settings.output_format == "text"


def test_printer_writes_measurements_and_tracks_errors(qapp) -> None:
    out = io.StringIO()
    printer = MeasurementPrinter("/dev/ttyUSB0", "json", stream=out)

    printer.on_data(_measurement())
    assert printer.exit_code == 0
    printer.on_error("Serial read error: I/O error")

    assert json.loads(out.getvalue())["radiation_usvh"] == 0.92
    assert printer.exit_code == 1


def test_main_without_port_exits_with_usage_error(settings_dir) -> None:
    assert main([]) == 2
