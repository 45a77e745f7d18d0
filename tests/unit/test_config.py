"""Tests for slide options."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from slidepages.core.config import SlideConfig, load_slide_config
from slidepages.core.errors import ErrorCategory, SlideConfigError


class TestSlideConfig:
    """Tests for the SlideConfig model."""

    def test_defaults(self) -> None:
        config = SlideConfig()
        assert config.loop is False
        assert config.start_page_x == 0
        assert config.start_page_y == 0

    def test_is_frozen(self) -> None:
        config = SlideConfig(loop=True)
        with pytest.raises(ValidationError):
            config.loop = False  # type: ignore[misc]

    def test_rejects_unknown_options(self) -> None:
        with pytest.raises(ValidationError):
            SlideConfig(autoplay=True)  # type: ignore[call-arg]

    def test_rejects_negative_start_page(self) -> None:
        with pytest.raises(ValidationError):
            SlideConfig(start_page_x=-1)


class TestLoadSlideConfig:
    """Tests for load_slide_config and environment loading."""

    def test_valid_overrides(self) -> None:
        config = load_slide_config(loop=True, start_page_y=2)
        assert config.loop is True
        assert config.start_page_y == 2

    def test_invalid_overrides_raise_config_error(self) -> None:
        with pytest.raises(SlideConfigError) as exc_info:
            load_slide_config(start_page_x=-3)
        assert exc_info.value.category == ErrorCategory.CONFIGURATION
        assert isinstance(exc_info.value.original_error, ValidationError)

    def test_from_env_defaults(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            config = SlideConfig.from_env()
        assert config == SlideConfig()

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on"])
    def test_from_env_truthy_loop(self, value: str) -> None:
        with patch.dict("os.environ", {"SLIDE_LOOP": value}, clear=True):
            assert SlideConfig.from_env().loop is True

    def test_from_env_falsy_loop(self) -> None:
        with patch.dict("os.environ", {"SLIDE_LOOP": "no"}, clear=True):
            assert SlideConfig.from_env().loop is False

    def test_from_env_start_pages(self) -> None:
        env = {"SLIDE_START_PAGE_X": "2", "SLIDE_START_PAGE_Y": "1"}
        with patch.dict("os.environ", env, clear=True):
            config = SlideConfig.from_env()
        assert config.start_page_x == 2
        assert config.start_page_y == 1

    def test_from_env_invalid_start_page(self) -> None:
        with patch.dict("os.environ", {"SLIDE_START_PAGE_X": "first"}, clear=True):
            with pytest.raises(SlideConfigError):
                SlideConfig.from_env()
