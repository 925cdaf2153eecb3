"""
Utility helpers shared across the integration test suite.
"""
from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from fastapi.testclient import TestClient


@dataclass(frozen=True)
class EndpointCase:
    """
    Declarative representation of an endpoint invocation used by helpers.
    """

    method: str
    path: str
    json: Any = None
    params: dict[str, Any] | None = None
    files: dict[str, Any] | None = None
    description: str | None = None

    def label(self) -> str:
        return self.description or f"{self.method} {self.path}"


def _exercise_cases(client: TestClient, cases: Iterable[EndpointCase]):
    for case in cases:
        request_kwargs: dict[str, Any] = {}
        if case.json is not None:
            request_kwargs["json"] = case.json
        if case.params is not None:
            request_kwargs["params"] = case.params
        if case.files is not None:
            request_kwargs["files"] = case.files

        response = client.request(case.method, case.path, **request_kwargs)
        yield case, response


def _format_failure(case: EndpointCase, received: int, expected: Sequence[int]) -> str:
    return f"{case.label()} returned {received}, expected one of {tuple(expected)}"


def assert_status_codes(
    client: TestClient,
    cases: Iterable[EndpointCase],
    *,
    expected_status: Sequence[int] = (200,),
):
    """
    Execute a batch of endpoint cases asserting their HTTP status codes.
    """
    responses = []
    for case, response in _exercise_cases(client, cases):
        assert (
            response.status_code in expected_status
        ), _format_failure(case, response.status_code, expected_status)
        responses.append(response)
    return responses


def upload_backup(client: TestClient, content: str | bytes, filename: str = "backup.daylio"):
    """POST a backup file to the import endpoint."""
    raw = content.encode("utf-8") if isinstance(content, str) else content
    return client.post(
        "/api/import",
        files={"file": (filename, io.BytesIO(raw), "application/octet-stream")},
    )
