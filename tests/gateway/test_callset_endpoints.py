from __future__ import annotations

from fastapi.testclient import TestClient

from eva_ws.adapters.registry import AdaptorRegistry
from eva_ws.config.settings import get_settings
from eva_ws.gateway.app import create_app


def test_search_expands_accessions_to_legacy_ids(client, adaptor) -> None:
    response = client.get("/v1/ga4gh/callsets/search", params={"variantSetIds": "ERZ017134"})

    assert response.status_code == 200
    body = response.json()
    assert "apiVersion" not in body
    assert [call_set["id"] for call_set in body["callSets"]] == ["HG00096", "HG00097"]
    assert body["callSets"][0] == {
        "id": "HG00096",
        "name": "HG00096",
        "variantSetIds": ["ERZ017134"],
        "sampleId": "HG00096",
        "created": -1,
        "updated": -1,
        "info": {},
    }
    assert body["nextPageToken"] is None
    [(operation, (source_ids, options))] = adaptor.calls
    assert operation == "get_samples_by_sources"
    assert source_ids == ["ERZ017134", "52"]
    assert (options["skip"], options["limit"]) == (0, 10)
    assert options["species"] == "hsapiens_grch37"


def test_search_groups_samples_across_files(client) -> None:
    response = client.get("/v1/ga4gh/callsets/search", params={"variantSetIds": "52,53"})
    call_sets = {call_set["id"]: call_set for call_set in response.json()["callSets"]}
    assert call_sets["HG00097"]["variantSetIds"] == ["ERZ017134", "53"]
    assert call_sets["HG00099"]["variantSetIds"] == ["53"]


def test_post_search_reads_json_body(client) -> None:
    response = client.post(
        "/v1/ga4gh/callsets/search",
        json={"variantSetIds": ["ERZ017134"], "pageSize": 1, "pageToken": "0"},
    )
    assert response.status_code == 200
    body = response.json()
    assert [call_set["id"] for call_set in body["callSets"]] == ["HG00096", "HG00097"]
    assert body["nextPageToken"] is None


def test_missing_variant_set_ids_is_a_client_error(client, adaptor) -> None:
    response = client.get("/v1/ga4gh/callsets/search")
    assert response.status_code == 400
    assert "variantSetIds" in response.json()["error"]
    assert adaptor.calls == []

    empty = client.post("/v1/ga4gh/callsets/search", json={"variantSetIds": []})
    assert empty.status_code == 400


def test_invalid_page_size_is_a_client_error(client) -> None:
    response = client.get(
        "/v1/ga4gh/callsets/search", params={"variantSetIds": "52", "pageSize": "0"}
    )
    assert response.status_code == 400

    malformed = client.get(
        "/v1/ga4gh/callsets/search", params={"variantSetIds": "52", "pageSize": "ten"}
    )
    assert malformed.status_code == 400
    assert malformed.json()["error"].startswith("Request validation failed")


def test_adaptor_failure_is_reported_as_server_error(failing_client) -> None:
    response = failing_client.get("/v1/ga4gh/callsets/search", params={"variantSetIds": "52"})

    assert response.status_code == 500
    assert response.json()["error"] == "connection refused by variant store"


def test_search_labels_positional_rows_by_requested_file(positional_adaptor, translator) -> None:
    registry = AdaptorRegistry({"hsapiens_grch37": positional_adaptor})
    client = TestClient(create_app(get_settings(), adaptors=registry, translator=translator))

    legacy = client.get("/v1/ga4gh/callsets/search", params={"variantSetIds": "52,208"})
    mixed = client.post(
        "/v1/ga4gh/callsets/search", json={"variantSetIds": ["52", "ERZ019953"]}
    )

    for response in (legacy, mixed):
        assert response.status_code == 200
        assert {
            call_set["id"]: call_set["variantSetIds"] for call_set in response.json()["callSets"]
        } == {"A": ["ERZ017134"], "B": ["ERZ019953"]}
