r"""Unit tests for raw responses, status validation and VaultResponse."""

from __future__ import annotations

import httpx
import pytest

from tests.helpers import create_raw_response
from vaultclient.core.config import HEALTH_ACCEPTED_STATUS_CODES
from vaultclient.exceptions import ValidationError
from vaultclient.response import RawResponse, VaultResponse, validate_status

TEST_URL = "https://vault.example.com:8200/v1/sys/health"


#################################
#     Tests for RawResponse     #
#################################


def test_raw_response_from_httpx() -> None:
    response = httpx.Response(200, json={"sealed": False}, headers={"X-Request": "abc"})

    raw = RawResponse.from_httpx(response)

    assert raw.status_code == 200
    assert raw.headers["x-request"] == "abc"
    assert raw.json() == {"sealed": False}


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        (b'{"a": 1}', {"a": 1}),
        (b"", {}),
        (b"not json", {}),
        (b"[1, 2]", {}),
        (b"null", {}),
        (b"\xff\xfe", {}),
    ],
)
def test_raw_response_json(body: bytes, expected: dict) -> None:
    """Test that decoding never raises on unexpected bodies."""
    assert RawResponse(200, body=body).json() == expected


#####################################
#     Tests for validate_status     #
#####################################


@pytest.mark.parametrize("status_code", sorted(HEALTH_ACCEPTED_STATUS_CODES))
def test_validate_status_accepted(status_code: int) -> None:
    validate_status(
        create_raw_response(status_code), HEALTH_ACCEPTED_STATUS_CODES, method="GET", url=TEST_URL
    )


@pytest.mark.parametrize("status_code", [204, 400, 403, 404, 503])
def test_validate_status_rejected(status_code: int) -> None:
    """Test that the error carries the status code and not the body."""
    response = create_raw_response(status_code, payload={"errors": ["secret detail"]})

    with pytest.raises(
        ValidationError, match=rf"Vault responded with HTTP status code: {status_code}"
    ) as exc_info:
        validate_status(response, HEALTH_ACCEPTED_STATUS_CODES, method="GET", url=TEST_URL)

    error = exc_info.value
    assert error.status_code == status_code
    assert error.method == "GET"
    assert error.url == TEST_URL
    assert "secret detail" not in str(error)


def test_validate_status_override_accepts_204() -> None:
    """Test that adding a code to the accepted set makes it a success."""
    validate_status(
        create_raw_response(204), HEALTH_ACCEPTED_STATUS_CODES | {204}, method="GET", url=TEST_URL
    )


def test_validate_status_ignores_body() -> None:
    """Test that an unparsable body does not affect validation."""
    validate_status(create_raw_response(200, body=b"<html>"), {200}, method="GET", url=TEST_URL)


###################################
#     Tests for VaultResponse     #
###################################


def test_vault_response_from_raw() -> None:
    raw = RawResponse(200, headers={"content-type": "application/json"}, body=b'{"data": {}}')

    response = VaultResponse.from_raw(raw, retries=3)

    assert response.rest_response is raw
    assert response.retries == 3
    assert response.status_code == 200
    assert response.headers == {"content-type": "application/json"}
    assert response.body == b'{"data": {}}'
    assert response.json() == {"data": {}}


def test_vault_response_empty_body() -> None:
    response = VaultResponse.from_raw(RawResponse(204), retries=0)

    assert response.status_code == 204
    assert response.json() == {}
