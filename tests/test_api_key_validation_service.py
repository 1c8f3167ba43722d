import asyncio

import httpx
import pytest

from conftest import ProbeRecorder


@pytest.mark.parametrize(
    "candidate",
    [
        "",
        "AIza",
        "AIza" + "x" * 25,  # 29 chars
        "aiza" + "x" * 40,
        "sk-" + "x" * 40,
        " AIza" + "x" * 40,
    ],
)
def test_is_plausible_rejects_bad_format(candidate: str) -> None:
    assert ProbeRecorder().validator().is_plausible(candidate) is False


def test_is_plausible_accepts_prefix_and_min_length() -> None:
    validator = ProbeRecorder().validator()
    assert validator.is_plausible("AIza" + "x" * 26) is True  # exactly 30
    assert validator.is_plausible("AIza" + "x" * 35) is True


def test_probe_sends_key_as_query_param(valid_key: str) -> None:
    recorder = ProbeRecorder(200)
    assert asyncio.run(recorder.validator().probe(valid_key)) is True

    assert len(recorder.requests) == 1
    request = recorder.requests[0]
    assert request.method == "GET"
    assert request.url.path == "/v1beta/models"
    assert request.url.params["key"] == valid_key


@pytest.mark.parametrize("status_code", [201, 204])
def test_probe_accepts_any_2xx(valid_key: str, status_code: int) -> None:
    assert asyncio.run(ProbeRecorder(status_code).validator().probe(valid_key)) is True


@pytest.mark.parametrize("status_code", [400, 401, 403, 404, 429, 500, 503])
def test_probe_rejects_non_2xx(valid_key: str, status_code: int) -> None:
    assert asyncio.run(ProbeRecorder(status_code).validator().probe(valid_key)) is False


def test_probe_treats_transport_errors_as_rejection(valid_key: str) -> None:
    recorder = ProbeRecorder(exc=httpx.ConnectError("connection refused"))
    assert asyncio.run(recorder.validator().probe(valid_key)) is False
    assert len(recorder.requests) == 1
