"""Unit tests for :mod:`textflow.engine.config`."""
from __future__ import annotations

import logging

import pytest

from textflow.engine.config import EngineConfig, GroupingOptions, resolve_options


def test_default_grouping_options() -> None:
    options = GroupingOptions.default()

    assert options.reading_order_y_tolerance == 5.0
    assert options.same_line_min_tolerance == 2.0
    assert options.same_line_font_ratio == 0.25
    assert options.same_line_font_size_tolerance == 2.0
    assert options.column_gap_threshold == 100.0
    assert options.next_line_font_size_tolerance == 1.0
    assert options.next_line_max_gap_ratio == 2.5
    assert options.left_align_tolerance == 20.0
    assert options.semantic_left_align_font_ratio == 4.0
    assert options.alignment_tolerance == 5.0
    assert options.validate()


@pytest.mark.parametrize(
    "overrides",
    [
        {'column_gap_threshold': -1.0},
        {'alignment_tolerance': float("nan")},
        {'left_align_tolerance': float("inf")},
        {'same_line_font_ratio': "0.25"},
        {'reading_order_y_tolerance': True},
    ],
)
def test_invalid_grouping_options(overrides, caplog: pytest.LogCaptureFixture) -> None:
    options = GroupingOptions(**overrides)

    with caplog.at_level(logging.ERROR):
        assert not options.validate()

    assert next(iter(overrides)) in caplog.text


def test_grouping_options_dict_round_trip() -> None:
    options = GroupingOptions(column_gap_threshold=80.0, alignment_tolerance=3.0)

    assert GroupingOptions.from_dict(options.to_dict()) == options


def test_grouping_options_unknown_key_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        options = GroupingOptions.from_dict({'column_gap_threshold': 60.0, 'gutter': 3})

    assert options.column_gap_threshold == 60.0
    assert "Unknown grouping option 'gutter' will be ignored" in caplog.text


def test_engine_config_defaults() -> None:
    config = EngineConfig.default()

    assert config.validate_input is True
    assert config.strict_mode is False
    assert config.effective_log_level() == "INFO"
    assert config.grouping == GroupingOptions()
    assert config.validate()


def test_engine_config_instances_do_not_share_grouping() -> None:
    first = EngineConfig()
    second = EngineConfig()

    first.grouping.column_gap_threshold = 10.0

    assert second.grouping.column_gap_threshold == 100.0


def test_engine_config_from_nested_dict(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        config = EngineConfig.from_dict({
            'strict_mode': True,
            'log_level': "debug",
            'grouping': {'left_align_tolerance': 12.0},
            'output_format': "json",
        })

    assert config.strict_mode is True
    assert config.grouping.left_align_tolerance == 12.0
    assert config.effective_log_level() == "DEBUG"
    assert config.validate()
    assert "Unknown config key 'output_format' will be ignored" in caplog.text


def test_engine_config_to_dict_nests_grouping() -> None:
    data = EngineConfig(enable_debug_logging=True).to_dict()

    assert data['enable_debug_logging'] is True
    assert data['grouping']['column_gap_threshold'] == 100.0
    assert EngineConfig.from_dict(data) == EngineConfig(enable_debug_logging=True)


def test_engine_config_rejects_unknown_log_level() -> None:
    assert not EngineConfig(log_level="VERBOSE").validate()


def test_engine_config_rejects_invalid_grouping() -> None:
    assert not EngineConfig(grouping={'column_gap_threshold': 1.0}).validate()
    assert not EngineConfig(grouping=GroupingOptions(column_gap_threshold=-5)).validate()


def test_debug_flag_overrides_log_level() -> None:
    config = EngineConfig(log_level="WARNING", enable_debug_logging=True)

    assert config.effective_log_level() == "DEBUG"
    assert "log_level=DEBUG" in repr(config)


def test_resolve_options() -> None:
    options = GroupingOptions(column_gap_threshold=42.0)

    assert resolve_options(None) == GroupingOptions()
    assert resolve_options(options) is options
    assert resolve_options({'column_gap_threshold': 42.0}) == options
    with pytest.raises(TypeError):
        resolve_options([("column_gap_threshold", 42.0)])
