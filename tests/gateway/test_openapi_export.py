from __future__ import annotations

import yaml

from eva_ws.gateway.main import export_openapi, main


def test_openapi_lists_public_routes() -> None:
    document = yaml.safe_load(export_openapi())
    paths = document["paths"]
    assert "/v1/studies/{study}/files" in paths
    assert set(paths["/v1/ga4gh/callsets/search"]) == {"get", "post"}
    assert "/metrics" not in paths


def test_main_writes_output_file(tmp_path) -> None:
    target = tmp_path / "openapi.yaml"
    main(["--export-openapi", "--output", str(target)])
    assert "EVA Web Services" in target.read_text()
