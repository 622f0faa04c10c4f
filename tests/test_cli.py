"""Tests for CLI argument handling."""

import settings
from cli.main import build_parser, config_from_args


def test_cli_overrides_settings():
    args = build_parser().parse_args(
        ["--institution", "Tech U", "--upstream-host", "tech.instructure.com", "--no-passthrough"]
    )

    config = config_from_args(args)

    assert config.institution_name == "Tech U"
    assert config.upstream_api_host == "tech.instructure.com"
    assert config.passthrough_enabled is False


def test_cli_defaults_come_from_settings():
    config = config_from_args(build_parser().parse_args([]))

    assert config.institution_name == settings.INSTITUTION_NAME
    assert config.upstream_api_host == settings.UPSTREAM_API_HOST
    assert config.passthrough_enabled == settings.PASSTHROUGH_ENABLED
