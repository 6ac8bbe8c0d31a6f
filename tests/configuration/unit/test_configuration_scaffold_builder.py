"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pomeloc.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from pomeloc.configuration.loader import load_configuration


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Compile configuration for pomeloc" in scaffold
    assert "protos:" in scaffold
    assert "server:" in scaffold
    assert "client:" in scaffold
    assert "target:" in scaffold
    assert "namespace:" in scaffold
    assert "output:" in scaffold
    assert "<OPTIONAL>" in scaffold


def test_placeholder_configuration_is_valid_yaml() -> None:
    parsed = yaml.safe_load(build_placeholder_configuration())

    assert parsed["protos"] == {"server": "serverProtos.json", "client": "clientProtos.json"}
    assert parsed["target"] == "csharp"


def test_write_placeholder_configuration_writes_loadable_file(tmp_path: Path) -> None:
    output_path = tmp_path / "pomeloc.yaml"

    written_path = write_placeholder_configuration(output_path)
    configuration = load_configuration(written_path)

    assert written_path == output_path.resolve()
    assert configuration.protos.server == (tmp_path / "serverProtos.json").resolve()
    assert configuration.output.directory == (tmp_path / "generated").resolve()


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "pomeloc.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
