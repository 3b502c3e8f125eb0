from __future__ import annotations

import json
from decimal import Decimal

import pytest
from requests import exceptions as req_exc

from lendpay.adapters.borrower_rest import BorrowerRestAdapter
from lendpay.adapters.http_client import HttpConfig
from lendpay.domain.entities import DraftBorrower
from lendpay.domain.errors import (
    ConfigError,
    DomainError,
    SchemaError,
    TransportError,
    ValidationError,
)
from lendpay.tests.unit.helpers import ResponseStub, SessionStub


def _adapter(responses, base_url: str = "http://api.local/") -> tuple[BorrowerRestAdapter, SessionStub]:
    adapter = BorrowerRestAdapter(HttpConfig(base_url=base_url, request_timeout_s=3))
    stub = SessionStub(responses)
    adapter.http.session = stub  # type: ignore[assignment]
    return adapter, stub


def test_list_borrowers_parses_payload_in_backend_order() -> None:
    payload = [
        {"id": 2, "name": "Zed", "email": "z@x.com", "phone": "9", "loanAmount": "10"},
        {"id": 1, "name": "Bob", "email": "bob@x.com", "phone": "123", "loanAmount": "500.00", "extra": True},
    ]
    adapter, stub = _adapter([ResponseStub(payload)])

    borrowers = adapter.list_borrowers()

    assert [b.id for b in borrowers] == [2, 1]
    assert borrowers[1].loan_amount == Decimal("500.00")
    assert stub.calls[0]["method"] == "GET"
    assert stub.calls[0]["url"] == "http://api.local/borrowers"
    assert stub.calls[0]["timeout"] == 3
    assert stub.calls[0]["headers"]["Accept"] == "application/json"


def test_list_borrowers_rejects_non_list_with_schema_error() -> None:
    adapter, _ = _adapter([ResponseStub({"items": []})])

    with pytest.raises(SchemaError):
        adapter.list_borrowers()


def test_list_borrowers_rejects_negative_amount() -> None:
    adapter, _ = _adapter([ResponseStub([{"id": 1, "loanAmount": -5}])])

    with pytest.raises(SchemaError):
        adapter.list_borrowers()


def test_list_borrowers_invalid_json_is_schema_error() -> None:
    adapter, _ = _adapter([ResponseStub(ValueError("bad json"), text="<html>")])

    with pytest.raises(SchemaError) as excinfo:
        adapter.list_borrowers()

    assert "<html>" in str(excinfo.value)


def test_list_borrowers_server_error_is_transport_error() -> None:
    adapter, _ = _adapter([ResponseStub({"message": "db down"}, status_code=503)])

    with pytest.raises(TransportError) as excinfo:
        adapter.list_borrowers()

    assert excinfo.value.status == 503
    assert "db down" in str(excinfo.value)


def test_timeout_is_reported_as_timeout() -> None:
    adapter, _ = _adapter([req_exc.Timeout("slow")])

    with pytest.raises(TransportError) as excinfo:
        adapter.list_borrowers()

    assert str(excinfo.value) == "Timeout contacting http://api.local/borrowers"
    assert excinfo.value.context == "GET http://api.local/borrowers"


def test_connection_failure_is_reported_separately_from_timeout() -> None:
    adapter, _ = _adapter([req_exc.ConnectionError("refused")])

    with pytest.raises(TransportError) as excinfo:
        adapter.initiate_onboarding(1)

    assert str(excinfo.value).startswith("Cannot connect to http://api.local/payments/onboard")
    assert "refused" in str(excinfo.value)
    assert "Timeout" not in str(excinfo.value)


def test_plain_text_error_body_lands_in_message_without_hint() -> None:
    adapter, _ = _adapter([ResponseStub(ValueError("not json"), status_code=502, text="Bad Gateway")])

    with pytest.raises(TransportError) as excinfo:
        adapter.list_borrowers()

    assert str(excinfo.value) == "list_borrowers: Bad Gateway (HTTP 502)"
    assert excinfo.value.hint is None


def test_create_borrower_posts_draft_fields() -> None:
    created = {"id": "b9", "name": "Alice", "email": "a@x.com", "phone": "555", "loanAmount": 1000}
    adapter, stub = _adapter([ResponseStub(created, status_code=201)])
    draft = DraftBorrower(name="Alice", email="a@x.com", phone="555", loan_amount="1000")

    borrower = adapter.create_borrower(draft)

    assert borrower.id == "b9"
    call = stub.calls[0]
    assert call["url"] == "http://api.local/borrowers"
    assert call["headers"]["Content-Type"] == "application/json"
    assert json.loads(call["data"]) == {
        "name": "Alice",
        "email": "a@x.com",
        "phone": "555",
        "loanAmount": 1000,
    }


@pytest.mark.parametrize("status", [400, 422])
def test_create_borrower_rejection_is_validation_error(status: int) -> None:
    adapter, _ = _adapter([ResponseStub({"errors": ["name is required"]}, status_code=status)])

    with pytest.raises(ValidationError) as excinfo:
        adapter.create_borrower(DraftBorrower())

    assert excinfo.value.hint == "name is required"


def test_create_borrower_unauthorized_is_transport_error() -> None:
    adapter, _ = _adapter([ResponseStub("forbidden", status_code=403)])

    with pytest.raises(TransportError) as excinfo:
        adapter.create_borrower(DraftBorrower(name="x"))

    assert not isinstance(excinfo.value, ValidationError)


def test_onboarding_returns_redirect_url_from_json_string() -> None:
    adapter, stub = _adapter([ResponseStub("https://processor.example/onboard/abc")])

    url = adapter.initiate_onboarding(1)

    assert url == "https://processor.example/onboard/abc"
    assert stub.calls[0]["url"] == "http://api.local/payments/onboard"
    assert json.loads(stub.calls[0]["data"]) == {"borrowerId": 1}


def test_onboarding_accepts_plain_text_and_url_object() -> None:
    adapter, _ = _adapter(
        [
            ResponseStub(ValueError("not json"), text="https://processor.example/a\n"),
            ResponseStub({"url": "https://processor.example/b"}),
        ]
    )

    assert adapter.initiate_onboarding("b1") == "https://processor.example/a"
    assert adapter.initiate_onboarding("b1") == "https://processor.example/b"


@pytest.mark.parametrize("payload", [{"link": "x"}, "not a url", "/relative/path", 42])
def test_onboarding_rejects_unexpected_shapes(payload) -> None:
    adapter, _ = _adapter([ResponseStub(payload)])

    with pytest.raises(SchemaError):
        adapter.initiate_onboarding(1)


def test_disbursement_posts_borrower_and_amount() -> None:
    adapter, stub = _adapter([ResponseStub(None, status_code=204, text="")])

    adapter.initiate_disbursement("b1", Decimal("250"))

    assert stub.calls[0]["url"] == "http://api.local/payments/disburse"
    assert json.loads(stub.calls[0]["data"]) == {"borrowerId": "b1", "amount": 250}


def test_disbursement_amount_is_sent_rounded_to_cents() -> None:
    adapter, stub = _adapter([ResponseStub(None, status_code=204, text="")])

    adapter.initiate_disbursement("b1", Decimal("99.999"))

    assert json.loads(stub.calls[0]["data"]) == {"borrowerId": "b1", "amount": 100}


@pytest.mark.parametrize("status", [400, 402, 409, 422])
def test_disbursement_rejection_is_domain_error(status: int) -> None:
    adapter, _ = _adapter([ResponseStub({"error": "insufficient funds"}, status_code=status)])

    with pytest.raises(DomainError) as excinfo:
        adapter.initiate_disbursement("b1", Decimal("10.5"))

    assert excinfo.value.status == status


def test_disbursement_server_error_is_transport_error() -> None:
    adapter, _ = _adapter([ResponseStub("boom", status_code=500)])

    with pytest.raises(TransportError):
        adapter.initiate_disbursement("b1", Decimal("1"))


def test_http_config_requires_base_url() -> None:
    with pytest.raises(ConfigError):
        HttpConfig(base_url="  ")
