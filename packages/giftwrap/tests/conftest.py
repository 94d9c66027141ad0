"""Shared pytest fixtures for giftwrap tests."""

import pytest

from giftwrap._state import reset_config


class Legend:
    """An object to associate with a map."""

    def __init__(self, colored_regions, colored_lines):
        self._colored_regions = colored_regions
        self._colored_lines = colored_lines

    def region_meaning(self, color):
        return self._colored_regions.get(color)

    def line_meaning(self, color):
        return self._colored_lines.get(color)


class Map:
    """Everyone loves maps."""

    def __init__(self, type, center, units, legend=None, sheets=()):
        self.type = type
        self.center = center
        self.units = units
        self.notes = ""
        self.legend = legend
        self.sheets = list(sheets)

    def shows_roads(self):
        return self.type in self._maps_with_roads()

    def _maps_with_roads(self):
        return ["road", "traffic", "political"]


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Every test starts from the default configuration."""
    monkeypatch.delenv("GIFTWRAP_USE_SERIALIZERS", raising=False)
    monkeypatch.delenv("GIFTWRAP_CONFIG_MODULE", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def traffic_legend():
    return Legend(
        {"beige": "land", "blue": "water"},
        {
            "green": "no congestion",
            "yellow": "light congestion",
            "red": "heavy congestion",
            "black": "impassable",
        },
    )


@pytest.fixture
def physical_map():
    return Map("physical", ["here", "there"], "mi")


@pytest.fixture
def map_with_legend(traffic_legend):
    return Map("traffic", "downtown", "km", traffic_legend)


@pytest.fixture
def atlas_sheets(traffic_legend):
    return [
        Map("road", "north", "km", traffic_legend),
        Map("political", "center", "mi"),
        Map("physical", "south", "m"),
    ]
