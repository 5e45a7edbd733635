"""Testes das operações de cobrança do NFContaClient."""

from __future__ import annotations

from decimal import Decimal

import httpx
import pytest

from nfconta.api.connectors.nfconta import NFContaClient
from nfconta.api.connectors.nfhub import HttpClientConfig, NFHubHttpClient
from nfconta.utils.errors import RemoteError, ValidationError

CHARGE = {"customer_id": 7, "value": 150.0, "due_date": "2026-11-10"}

CARD_CONTRACT = {
    "customer_id": 7,
    "total_value": 300.0,
    "due_date": "2026-11-10",
    "type": 2,
    "parcel_value": 100.0,
    "parcel_quantity": 3,
    "ip": "200.200.200.1",
    "credit_card": {
        "name": "MARIA SILVA",
        "number": "4111111111111111",
        "expiry_month": "12",
        "expiry_year": "2030",
        "ccv": "123",
    },
    "holder_info": {
        "name": "Maria Silva",
        "cpfcnpj": "12345678909",
        "cep": "01001000",
        "address_number": "100",
        "phone": "1133334444",
    },
}


class TestCreateCharge:
    def test_posts_with_company_in_body(self, client, transport) -> None:
        client.create_charge(10, CHARGE)
        call = transport.last_call
        assert (call.method, call.path) == ("POST", "nfconta/charges")
        assert call.body == {**CHARGE, "company_id": 10}
        assert "company_id" not in CHARGE

    def test_all_missing_fields_are_reported(self, client, transport) -> None:
        """Todas as violações em uma única mensagem."""
        with pytest.raises(ValidationError) as exc_info:
            client.create_charge(10, {})
        assert str(exc_info.value) == (
            "O ID do cliente é obrigatório\r\n"
            "O valor da cobrança é obrigatório\r\n"
            "A data de vencimento da cobrança é obrigatória"
        )
        assert transport.calls == []

    @pytest.mark.parametrize("empty", [None, "", 0, 0.0, Decimal("0"), False])
    def test_empty_values_count_as_missing(self, client, empty) -> None:
        with pytest.raises(ValidationError) as exc_info:
            client.create_charge(10, {**CHARGE, "value": empty})
        assert exc_info.value.violations == ("O valor da cobrança é obrigatório",)

    def test_remote_message(self, client, transport) -> None:
        transport.queue(422, {"message": "Cliente não encontrado"})
        with pytest.raises(RemoteError) as exc_info:
            client.create_charge(10, CHARGE)
        assert exc_info.value.message == "Cliente não encontrado"
        assert exc_info.value.http_code == 422


class TestChargeLifecycle:
    def test_confirm_cash_receipt(self, client, transport) -> None:
        client.confirm_cash_receipt(10, 33)
        call = transport.last_call
        assert (call.method, call.path, call.body) == ("POST", "nfconta/charges/33/cash", {"company_id": 10})

    def test_remove_charge(self, client, transport) -> None:
        client.remove_charge(10, 33)
        call = transport.last_call
        assert (call.method, call.path) == ("DELETE", "nfconta/charges/33")
        assert call.params == [{"name": "company_id", "value": 10}]

    def test_update_charge(self, client, transport) -> None:
        client.update_charge(10, 33, {"value": 99.0, "due_date": "2026-12-01"})
        call = transport.last_call
        assert (call.method, call.path) == ("PUT", "nfconta/charges/33")
        assert call.body == {"value": 99.0, "due_date": "2026-12-01", "company_id": 10}

    def test_update_charge_requires_value_and_due_date(self, client) -> None:
        with pytest.raises(ValidationError) as exc_info:
            client.update_charge(10, 33, {"customer_id": 7})
        assert len(exc_info.value.violations) == 2

    def test_create_deposit(self, client, transport) -> None:
        client.create_deposit(10, {"value": 500.0, "due_date": "2026-11-01"})
        assert transport.last_call.path == "nfconta/deposit"

    def test_create_deposit_validation(self, client) -> None:
        with pytest.raises(ValidationError) as exc_info:
            client.create_deposit(10, {})
        assert exc_info.value.violations == (
            "O valor do depósito é obrigatório",
            "A data de vencimento do depósito é obrigatória",
        )

    def test_get_charge_uses_installments_path(self, client, transport) -> None:
        client.get_charge(10, 33)
        assert transport.last_call.path == "installments/33"


class TestContractCharge:
    def test_full_card_payload_is_valid(self, client, transport) -> None:
        client.create_contract_charge(10, CARD_CONTRACT)
        assert transport.last_call.path == "nfconta/contracts/charge"
        assert transport.last_call.body["company_id"] == 10

    def test_signature_variant_path(self, client, transport) -> None:
        client.create_contract_charge(10, CARD_CONTRACT, signature=True)
        assert transport.last_call.path == "nfconta/contracts/charge/1"

    def test_card_type_as_string(self, client) -> None:
        with pytest.raises(ValidationError) as exc_info:
            client.create_contract_charge(10, {**CARD_CONTRACT, "type": "2", "ip": ""})
        assert exc_info.value.violations == (
            "Não é possível criar uma cobrança por cartão sem o ip do cliente",
        )

    def test_missing_ccv_is_named(self, client, transport) -> None:
        credit_card = {k: v for k, v in CARD_CONTRACT["credit_card"].items() if k != "ccv"}
        with pytest.raises(ValidationError, match="ccv"):
            client.create_contract_charge(10, {**CARD_CONTRACT, "credit_card": credit_card})
        assert transport.calls == []

    def test_missing_sub_objects_yield_one_violation_each(self, client) -> None:
        payload = {k: v for k, v in CARD_CONTRACT.items() if k not in ("credit_card", "holder_info")}
        with pytest.raises(ValidationError) as exc_info:
            client.create_contract_charge(10, payload)
        assert exc_info.value.violations == (
            "Não é possível criar uma cobrança por cartão sem as informações do mesmo",
            "Não é possível criar uma cobrança por cartão sem as informações do titular",
        )

    def test_empty_payload_and_company(self, client) -> None:
        with pytest.raises(ValidationError) as exc_info:
            client.create_contract_charge(0, {})
        assert exc_info.value.violations == (
            "Não é possível criar uma cobrança sem o ID da empresa",
            "Não é possível criar uma cobrança sem o ID do cliente",
            "Não é possível criar uma cobrança sem o valor total da mesma",
            "Não é possível criar uma cobrança sem a data de vencimento da mesma",
            "Não é possível criar uma cobrança sem o tipo da mesma",
        )

    def test_boleto_type_skips_card_rules(self, client, transport) -> None:
        payload = {"customer_id": 7, "total_value": 10.0, "due_date": "2026-11-10", "type": 1}
        client.create_contract_charge(10, payload)
        assert len(transport.calls) == 1

    def test_non_200_with_errors_joins_them(self, client, transport) -> None:
        """Esta operação decide por status HTTP, não por `message`."""
        transport.queue(400, {"errors": ["a", "b"]})
        with pytest.raises(RemoteError) as exc_info:
            client.create_contract_charge(10, CARD_CONTRACT)
        assert str(exc_info.value) == "a\r\nb"

    def test_200_with_message_is_success(self, client, transport) -> None:
        transport.queue(200, {"message": "Cobrança criada"})
        assert client.create_contract_charge(10, CARD_CONTRACT).body == {"message": "Cobrança criada"}


class TestBoleto:
    def test_decode_disabled_only_for_boleto(self, client, transport) -> None:
        pdf = b"%PDF-1.4 boleto"
        transport.queue(200, pdf, content_type="application/pdf")

        envelope = client.get_boleto(10, 33)
        client.get_charge(10, 33)

        assert envelope.body == pdf
        assert transport.calls[0].path == "nfconta/charges/33/pdf"
        assert transport.calls[0].options.decode is False
        assert transport.calls[1].options.decode is True

    def test_boleto_message_raises(self, client, transport) -> None:
        transport.queue(404, {"message": "Boleto não encontrado"})
        with pytest.raises(RemoteError, match="Boleto não encontrado"):
            client.get_boleto(10, 33)

    def test_boleto_json_error_raises_through_http_transport(self) -> None:
        """Erro JSON no endpoint do PDF é detectado mesmo com decode desligado."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "Boleto não encontrado"})

        http = NFHubHttpClient(
            HttpClientConfig(base_url="https://api.nfhub.test/api"),
            http_client=httpx.Client(transport=httpx.MockTransport(handler)),
        )
        with pytest.raises(RemoteError, match="Boleto não encontrado") as exc_info:
            NFContaClient(http).get_boleto(10, 33)
        assert exc_info.value.http_code == 404

    def test_boleto_pdf_through_http_transport_stays_bytes(self) -> None:
        pdf = b"%PDF-1.4 boleto"

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=pdf, headers={"Content-Type": "application/pdf"})

        http = NFHubHttpClient(
            HttpClientConfig(base_url="https://api.nfhub.test/api"),
            http_client=httpx.Client(transport=httpx.MockTransport(handler)),
        )
        assert NFContaClient(http).get_boleto(10, 33).body == pdf


class TestWfpayCharges:
    def test_get_wfpay_charge(self, client, transport) -> None:
        client.get_wfpay_charge(10, 8)
        assert transport.last_call.path == "nfconta/charges/8"
        assert transport.last_call.params == [{"name": "company_id", "value": 10}]

    def test_create_wfpay_charge_sends_company_in_query(self, client, transport) -> None:
        data = {"value": 20.0}
        client.create_wfpay_charge(10, data, [{"name": "company_id", "value": 3}])
        call = transport.last_call
        assert call.path == "nfconta/installments"
        assert call.body == {"value": 20.0}
        assert call.params == [{"name": "company_id", "value": 10}]
