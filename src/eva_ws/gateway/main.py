"""Command line helpers for the EVA web services.

Example:
    >>> python -m eva_ws.gateway.main --export-openapi
    >>> python -m eva_ws.gateway.main --export-openapi --output openapi.yaml
"""

from __future__ import annotations

# ==============================================================================
# IMPORTS
# ==============================================================================

import argparse
from pathlib import Path
from typing import Any

from yaml import safe_dump

from .app import create_app

# ==============================================================================
# EXPORT FUNCTIONS
# ==============================================================================


def export_openapi() -> str:
    """Return the OpenAPI document of the REST endpoints as YAML."""
    app = create_app()
    openapi_schema: dict[str, Any] = app.openapi()
    return safe_dump(openapi_schema, sort_keys=False)


# ==============================================================================
# CLI INTERFACE
# ==============================================================================


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="EVA web services helper utilities")
    parser.add_argument("--export-openapi", action="store_true", help="Print OpenAPI document")
    parser.add_argument("--output", type=Path, default=None, help="Optional file path to write")
    args = parser.parse_args(argv)

    if not args.export_openapi:
        parser.error("Choose at least one export option")

    content = export_openapi()
    if args.output:
        args.output.write_text(content)
    else:
        print(content)


__all__ = ["export_openapi", "main"]


if __name__ == "__main__":  # pragma: no cover
    main()
