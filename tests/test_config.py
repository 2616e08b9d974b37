"""Tests for session settings."""

import pytest

from tilegen.config import TileSettings
from tilegen.exceptions import TileGeneratorError, TileSettingsError


class TestTileSettings:
    def test_defaults(self) -> None:
        settings = TileSettings()
        assert (settings.width, settings.height, settings.cell_size) == (20, 12, 64)
        assert settings.chance_2x2 == 0.2
        assert settings.chance_other == 0.5
        assert settings.seed is None

    def test_chance_bounds_are_inclusive(self) -> None:
        TileSettings(chance_2x2=0.0, chance_other=1.0)
        TileSettings(chance_2x2=1.0, chance_other=0.0)

    @pytest.mark.parametrize("field", ["chance_2x2", "chance_other"])
    def test_chance_out_of_range(self, field) -> None:
        with pytest.raises(TileSettingsError, match=field):
            TileSettings(**{field: 1.5})

    def test_errors_are_collected(self) -> None:
        with pytest.raises(TileSettingsError) as excinfo:
            TileSettings(width=0, chance_2x2=-0.1, chance_other=2.0)
        message = str(excinfo.value)
        assert message.startswith("Invalid settings: ")
        assert "Grid must be at least 1x1" in message
        assert "chance_2x2" in message
        assert "chance_other" in message

    def test_settings_error_is_generator_error(self) -> None:
        with pytest.raises(TileGeneratorError):
            TileSettings(cell_size=0)


class TestForViewport:
    def test_default_viewport(self) -> None:
        settings = TileSettings.for_viewport()
        assert (settings.width, settings.height) == (20, 12)

    def test_partial_cells_round_up(self) -> None:
        settings = TileSettings.for_viewport(100, 65, 64)
        assert (settings.width, settings.height) == (2, 2)

    def test_passes_through_fields(self) -> None:
        settings = TileSettings.for_viewport(640, 480, 32, seed=4, chance_other=0.0)
        assert (settings.width, settings.height, settings.cell_size) == (20, 15, 32)
        assert settings.seed == 4
        assert settings.chance_other == 0.0

    def test_non_positive_cell_size(self) -> None:
        with pytest.raises(TileSettingsError, match="cell_size"):
            TileSettings.for_viewport(640, 480, 0)
