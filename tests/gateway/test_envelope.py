from __future__ import annotations

import json
from dataclasses import dataclass

from eva_ws.gateway.presentation.envelope import ResponseEnvelopeBuilder, as_result_sequence
from eva_ws.models.ga4gh import CallSet


class FakeClock:
    def __init__(self, *values: float) -> None:
        self._values = list(values)

    def __call__(self) -> float:
        return self._values.pop(0) if len(self._values) > 1 else self._values[0]


@dataclass
class Row:
    fileId: str


def _body(response) -> dict:
    return json.loads(response.body)


def test_ok_wraps_rows_with_metadata() -> None:
    builder = ResponseEnvelopeBuilder(
        query_options={"species": "hsapiens"}, started_at=10.0, clock=FakeClock(10.25)
    )
    response = builder.ok([{"fileId": "ERZ017134"}, {"fileId": "53"}])

    assert response.status_code == 200
    assert response.media_type == "application/json"
    assert _body(response) == {
        "apiVersion": "v1",
        "time": 250,
        "queryOptions": {"species": "hsapiens"},
        "response": [{"fileId": "ERZ017134"}, {"fileId": "53"}],
    }


def test_single_object_becomes_one_element_list() -> None:
    assert as_result_sequence({"studyId": "PRJEB4019"}) == [{"studyId": "PRJEB4019"}]
    assert as_result_sequence("PRJEB4019") == ["PRJEB4019"]
    assert as_result_sequence([]) == []


def test_models_and_dataclasses_are_dumped() -> None:
    call_set = CallSet(id="HG00096", name="HG00096", sample_id="HG00096", variant_set_ids=["52"])
    rows = as_result_sequence([call_set, Row(fileId="52")])
    assert rows[0]["variantSetIds"] == ["52"]
    assert rows[1] == {"fileId": "52"}


def test_user_error_keeps_query_options_and_sets_error() -> None:
    builder = ResponseEnvelopeBuilder(query_options={"species": "hsapiens"})
    response = builder.user_error("Study identifier not found")
    body = _body(response)
    assert response.status_code == 400
    assert body["error"] == "Study identifier not found"
    assert body["response"] == []
    assert body["queryOptions"] == {"species": "hsapiens"}


def test_time_is_never_negative() -> None:
    builder = ResponseEnvelopeBuilder(started_at=5.0, clock=FakeClock(4.0))
    assert _body(builder.ok([]))["time"] == 0


def test_unserialisable_payload_becomes_server_error() -> None:
    builder = ResponseEnvelopeBuilder()
    response = builder.ok([{"value": object()}])
    body = _body(response)
    assert response.status_code == 500
    assert "error" in body
    assert body["response"] == []


def test_error_dispatches_on_status() -> None:
    builder = ResponseEnvelopeBuilder()
    assert builder.error("boom", status_code=503).status_code == 503
    assert builder.error("bad", status_code=404).status_code == 404
