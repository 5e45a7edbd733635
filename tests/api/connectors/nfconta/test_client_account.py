"""Testes das operações de conta do NFContaClient."""

from __future__ import annotations

import pytest

from nfconta.api.connectors.nfconta import NFContaClient
from nfconta.api.validators.nfconta import DOCUMENT_TYPES
from nfconta.utils.errors import RemoteError, ValidationError


def _company_ids(params: list[dict]) -> list:
    return [item["value"] for item in params if item["name"] == "company_id"]


class TestCompanyIdQueryParam:
    """company_id na query nunca duplica."""

    def test_added_to_query(self, client, transport) -> None:
        client.get_balance(10)
        assert transport.last_call.method == "GET"
        assert transport.last_call.path == "nfconta/balance"
        assert transport.last_call.params == [{"name": "company_id", "value": 10}]

    def test_caller_company_id_is_replaced(self, client, transport) -> None:
        params = [{"name": "company_id", "value": 99}, {"name": "page", "value": 2}]
        client.get_statement(10, params)

        assert _company_ids(transport.last_call.params) == [10]
        assert transport.last_call.params[0] == {"name": "page", "value": 2}

    def test_repeated_calls_keep_single_entry(self, client, transport) -> None:
        params = [{"name": "company_id", "value": 1}]
        client.list_accounts(10, params)
        client.list_accounts(20, params)

        assert _company_ids(transport.calls[0].params) == [10]
        assert _company_ids(transport.calls[1].params) == [20]
        # lista do chamador não é alterada
        assert params == [{"name": "company_id", "value": 1}]

    def test_empty_company_id_is_not_sent(self, client, transport) -> None:
        client.get_summary(0, [{"name": "company_id", "value": 5}])
        assert _company_ids(transport.last_call.params) == []


class TestAccountOperations:
    """Paths, métodos e políticas de resposta."""

    @pytest.mark.parametrize(
        ("operation", "path"),
        [
            ("check_account_active", "nfconta/is_active"),
            ("list_documents", "nfconta/documents"),
            ("get_balance", "nfconta/balance"),
            ("get_summary", "nfconta/resume"),
            ("get_statement", "nfconta/extract"),
            ("list_accounts", "nfconta/accounts"),
            ("get_qrcode_url", "nfconta/auth/qrcode"),
        ],
    )
    def test_get_operations(self, client, transport, operation: str, path: str) -> None:
        envelope = getattr(client, operation)(10)
        assert transport.last_call.method == "GET"
        assert transport.last_call.path == path
        assert envelope.http_code == 200

    def test_get_statement_entry(self, client, transport) -> None:
        client.get_statement_entry(10, 555)
        assert transport.last_call.path == "nfconta/extract/555"

    def test_list_banks_has_no_company(self, client, transport) -> None:
        client.list_banks([{"name": "search", "value": "itau"}])
        assert transport.last_call.path == "nfconta/banks"
        assert transport.last_call.params == [{"name": "search", "value": "itau"}]

    def test_activate_account_uses_path(self, client, transport) -> None:
        client.activate_account(10)
        call = transport.last_call
        assert (call.method, call.path, call.body) == ("POST", "companies/10/nfconta/create", {})

    def test_activate_account_returns_raw_envelope(self, client, transport) -> None:
        transport.queue(400, {"message": "Conta já ativa"})
        envelope = client.activate_account(10)
        assert envelope.message == "Conta já ativa"

    def test_generate_secret_sends_company_in_body(self, client, transport) -> None:
        client.generate_secret(10)
        assert transport.last_call.body == {"company_id": 10}
        assert transport.last_call.path == "nfconta/auth/generate"

    def test_message_raises_remote_error(self, client, transport) -> None:
        transport.queue(200, {"message": "Conta não encontrada"})
        with pytest.raises(RemoteError, match="Conta não encontrada"):
            client.check_account_active(10)

    @pytest.mark.parametrize("operation", ["list_documents", "get_balance", "get_summary"])
    def test_raw_operations_never_raise(self, client, transport, operation: str) -> None:
        transport.queue(400, {"message": "X"})
        assert getattr(client, operation)(10).http_code == 400

    def test_success_envelope_is_returned_verbatim(self, client, transport) -> None:
        body = {"data": [{"id": 1, "value": 10.5}], "total": 1}
        transport.queue(200, body)
        assert client.get_statement(10).body is body


class TestSubmitDocuments:
    """Validação e achatamento de documentos."""

    def test_flattens_documents_into_form(self, client, transport) -> None:
        payload = {
            "documents": [
                {"type": "SOCIAL_CONTRACT", "document": b"pdf-1"},
                {"type": "IDENTIFICATION", "document": ("rg.png", b"png", "image/png")},
            ],
            "observation": "primeiro envio",
        }
        client.submit_documents(10, payload)

        call = transport.last_call
        assert call.path == "nfconta/documents"
        assert call.options.form is True
        assert call.body == {
            "observation": "primeiro envio",
            "documents[0][type]": "SOCIAL_CONTRACT",
            "documents[0][document]": b"pdf-1",
            "documents[1][type]": "IDENTIFICATION",
            "documents[1][document]": ("rg.png", b"png", "image/png"),
            "company_id": 10,
        }
        assert "documents" in payload

    @pytest.mark.parametrize("payload", [{}, {"documents": []}, {"documents": "arquivo.pdf"}])
    def test_documents_list_is_required(self, client, transport, payload) -> None:
        with pytest.raises(ValidationError, match="campo chamado documents"):
            client.submit_documents(10, payload)
        assert transport.calls == []

    def test_unknown_type_always_errors(self, client, transport) -> None:
        payload = {"documents": [{"type": "PASSPORT", "document": b"x"}]}
        with pytest.raises(ValidationError) as exc_info:
            client.submit_documents(10, payload)
        assert exc_info.value.violations == (
            "O campo type do documento da posição 0 deve ter um dos seguintes valores: "
            + ", ".join(DOCUMENT_TYPES),
        )
        assert transport.calls == []

    def test_all_violations_are_aggregated(self, client) -> None:
        payload = {"documents": [{"document": b"x"}, {"type": "IDENTIFICATION"}]}
        with pytest.raises(ValidationError) as exc_info:
            client.submit_documents(10, payload)
        assert exc_info.value.violations == (
            "O documento da posição 0 não possui o campo type",
            "O documento da posição 1 não possui o campo document",
        )
        assert str(exc_info.value) == "\r\n".join(exc_info.value.violations)

    def test_remote_message_raises(self, client, transport) -> None:
        transport.queue(400, {"message": "Documento ilegível"})
        with pytest.raises(RemoteError, match="Documento ilegível"):
            client.submit_documents(10, {"documents": [{"type": "IDENTIFICATION", "document": b"x"}]})


class TestLifecycle:
    def test_context_manager_closes_transport(self, transport) -> None:
        with NFContaClient(transport) as client:
            client.list_banks()
        assert transport.closed
