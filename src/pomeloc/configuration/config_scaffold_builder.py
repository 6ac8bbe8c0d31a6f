"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "pomeloc.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Compile configuration for pomeloc.
# Paths are resolved relative to this file. Command line options override them.

protos:
  # Provide at least one protocol description document.
  server: "serverProtos.json"
  client: "clientProtos.json"

# Generation target id; run `pomeloc targets` for the registered ids.
target: "csharp"

# Optional namespace wrapped around every generated declaration.
namespace: ""

output:
  directory: "generated"
  # Base file name without extension; defaults to the client document's name.
  # file_name: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML compile configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder compile configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
