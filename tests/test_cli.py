"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
import json
import unittest.mock
from datetime import datetime
from io import StringIO
from typing import TYPE_CHECKING
from unittest.mock import patch
from zoneinfo import ZoneInfo

if TYPE_CHECKING:
    from pathlib import Path

import pytest

from sighting_map.cli import (
    cmd_build,
    cmd_filter,
    cmd_info,
    cmd_project,
    cmd_serve,
    cmd_species,
    create_parser,
)
from sighting_map.schemas import ALL_SPECIES, FilterCriteria, TimeWindow

NOW = datetime(2026, 10, 18, 15, 0, tzinfo=ZoneInfo("America/New_York"))

RECORDS = [
    {
        "id": "pike",
        "species": "Pike",
        "description": "Near the inlet",
        "reportedBy": "Jo",
        "latitude": 44.0,
        "longitude": -72.0,
        "timestamp": "2026-10-18T10:00:00-04:00",
    },
    {
        "id": "bass",
        "species": "Bass",
        "description": "Under the dock",
        "latitude": 45.0,
        "longitude": -71.0,
        "timestamp": "2026-09-01T10:00:00-04:00",
    },
]


@pytest.fixture
def sightings_file(tmp_path: Path) -> Path:
    path = tmp_path / "sightings.json"
    path.write_text(json.dumps(RECORDS))
    return path


def filter_args(path: Path, **overrides: object) -> argparse.Namespace:
    values: dict[str, object] = {
        "path": path,
        "search": "",
        "species": ALL_SPECIES,
        "time": TimeWindow.ALL,
        "debug": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def run_captured(func: object, args: argparse.Namespace) -> tuple[int, str]:
    with (
        patch("sighting_map.cli.get_settings") as mock_settings,
        patch("sys.stdout", new=StringIO()) as mock_stdout,
    ):
        mock_settings.return_value.now.return_value = NOW
        exit_code = func(args)  # type: ignore[operator]
        return exit_code, mock_stdout.getvalue()


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "sighting-map"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        parser = create_parser()
        args = parser.parse_args(["--debug", "info"])
        assert args.debug is True

    def test_parser_filter_defaults(self) -> None:
        """Filter command defaults to no active criteria."""
        parser = create_parser()
        args = parser.parse_args(["filter", "data.json"])
        assert args.command == "filter"
        assert args.search == ""
        assert args.species == ALL_SPECIES
        assert args.time == TimeWindow.ALL

    def test_parser_filter_options(self) -> None:
        """Filter command accepts search, species, and time."""
        parser = create_parser()
        args = parser.parse_args(
            ["filter", "data.json", "--search", "pike", "--species", "Pike", "--time", "week"]
        )
        assert args.search == "pike"
        assert args.species == "Pike"
        assert args.time == TimeWindow.WEEK

    def test_parser_rejects_unknown_time(self) -> None:
        """Unknown time windows are rejected."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["filter", "data.json", "--time", "year"])

    def test_parser_serve_with_port(self) -> None:
        """Parser accepts serve --port."""
        parser = create_parser()
        args = parser.parse_args(["serve", "--port", "3000"])
        assert args.port == 3000


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_prints_app_info(self) -> None:
        """Info command prints application information."""
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            exit_code = cmd_info(argparse.Namespace())
            output = mock_stdout.getvalue()
        assert exit_code == 0
        assert "Application" in output
        assert "Timezone" in output


class TestCmdFilter:
    """Tests for cmd_filter function."""

    def test_lists_all(self, sightings_file: Path) -> None:
        exit_code, output = run_captured(cmd_filter, filter_args(sightings_file))
        assert exit_code == 0
        assert "Pike (Jo)" in output
        assert "Bass" in output
        assert "2 of 2 sightings" in output

    def test_time_window(self, sightings_file: Path) -> None:
        exit_code, output = run_captured(cmd_filter, filter_args(sightings_file, time=TimeWindow.TODAY))
        assert exit_code == 0
        assert "Bass" not in output
        assert "1 of 2 sightings" in output

    def test_invalid_file_returns_one(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{oops")
        with patch("sys.stderr", new=StringIO()) as mock_stderr:
            assert cmd_filter(filter_args(path)) == 1
            assert "Invalid sightings file" in mock_stderr.getvalue()


class TestCmdSpecies:
    """Tests for cmd_species function."""

    def test_sorted_species(self, sightings_file: Path) -> None:
        exit_code, output = run_captured(cmd_species, argparse.Namespace(path=sightings_file))
        assert exit_code == 0
        assert output.splitlines() == ["Bass", "Pike"]


class TestCmdProject:
    """Tests for cmd_project function."""

    def test_positions(self, sightings_file: Path) -> None:
        exit_code, output = run_captured(cmd_project, filter_args(sightings_file))
        lines = output.splitlines()
        assert exit_code == 0
        assert lines[0] == "Bounds: lat 44.0000..45.0000, lng -72.0000..-71.0000"
        assert lines[1] == "pike\t5.00\t95.00"
        assert lines[2] == "bass\t95.00\t5.00"

    def test_filtered_single_point_centered(self, sightings_file: Path) -> None:
        _, output = run_captured(cmd_project, filter_args(sightings_file, species="Pike"))
        assert output.splitlines()[1] == "pike\t50.00\t50.00"


class TestCmdBuild:
    """Tests for cmd_build function."""

    def test_passes_criteria(self) -> None:
        args = filter_args(None, search="pike", time=TimeWindow.MONTH)
        with (
            patch("sighting_map.cli.build_all") as mock_build,
            patch("sys.stdout", new=StringIO()),
        ):
            mock_build.return_value = {"sightings": 2, "shown": 1, "output": "data/site/index.html"}
            assert cmd_build(args) == 0
            mock_build.assert_called_once_with(
                criteria=FilterCriteria(search_term="pike", time_window=TimeWindow.MONTH)
            )

    def test_no_data_returns_one(self) -> None:
        with (
            patch("sighting_map.cli.build_all", return_value={"error": "no data"}),
            patch("sys.stderr", new=StringIO()),
        ):
            assert cmd_build(filter_args(None)) == 1


class TestCmdServe:
    """Tests for cmd_serve function."""

    def test_missing_site_dir_returns_one(self, tmp_path: Path) -> None:
        """Serve returns 1 when the site directory doesn't exist."""
        with patch("sighting_map.cli.get_settings") as mock_settings:
            mock_settings.return_value.site_dir = tmp_path / "no-such-dir"
            with patch("sys.stderr", new=StringIO()):
                assert cmd_serve(argparse.Namespace(port=8080)) == 1

    def test_uses_port_from_args(self, tmp_path: Path) -> None:
        """Serve uses --port when provided."""
        mock_server = unittest.mock.MagicMock()
        mock_server.__enter__ = unittest.mock.Mock(return_value=mock_server)
        mock_server.__exit__ = unittest.mock.Mock(return_value=False)
        mock_server.serve_forever = unittest.mock.Mock(side_effect=KeyboardInterrupt)

        with (
            patch("sighting_map.cli.get_settings") as mock_settings,
            patch("sighting_map.cli.http.server.HTTPServer", return_value=mock_server) as mock_ctor,
            patch("sys.stdout", new=StringIO()),
        ):
            mock_settings.return_value.site_dir = tmp_path
            assert cmd_serve(argparse.Namespace(port=9999)) == 0
            mock_ctor.assert_called_once()
            assert mock_ctor.call_args[0][0] == ("", 9999)

    def test_uses_port_from_settings_when_none(self, tmp_path: Path) -> None:
        """Serve falls back to api_port from settings."""
        mock_server = unittest.mock.MagicMock()
        mock_server.__enter__ = unittest.mock.Mock(return_value=mock_server)
        mock_server.__exit__ = unittest.mock.Mock(return_value=False)
        mock_server.serve_forever = unittest.mock.Mock(side_effect=KeyboardInterrupt)

        with (
            patch("sighting_map.cli.get_settings") as mock_settings,
            patch("sighting_map.cli.http.server.HTTPServer", return_value=mock_server) as mock_ctor,
            patch("sys.stdout", new=StringIO()),
        ):
            mock_settings.return_value.site_dir = tmp_path
            mock_settings.return_value.api_port = 8123
            cmd_serve(argparse.Namespace(port=None))
            assert mock_ctor.call_args[0][0] == ("", 8123)
