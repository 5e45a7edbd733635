"""Operações de cobrança: boletos, depósitos, contratos e cobranças WFPay."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nfconta.api.connectors.nfconta._base import NFContaClientBase
from nfconta.api.connectors.nfhub.nfhub_errors import ResponsePolicy
from nfconta.api.validators.nfconta import (
    validate_charge,
    validate_charge_update,
    validate_contract_charge,
    validate_deposit,
)
from nfconta.app.protocols.models import RequestOptions

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from nfconta.app.protocols.models import ResponseEnvelope

# PDF do boleto chega como bytes
_RAW_BODY = RequestOptions(decode=False)


class ChargeOperationsMixin(NFContaClientBase):
    """Cobranças (installments) da conta NFConta."""

    def create_charge(
        self,
        company_id: int,
        payload: Mapping[str, Any],
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Gera uma cobrança (boleto) para um cliente.

        Args:
            company_id: ID da empresa no NFHub
            payload: Dados da cobrança; exige `customer_id`, `value` e `due_date`
            params: Query params adicionais

        Returns:
            Envelope da API sem alterações

        Raises:
            ValidationError: Campos obrigatórios ausentes (todos reunidos)
            RemoteError: Se a API responder com `message`
        """
        validate_charge(payload)
        return self._post(
            "create_charge",
            ResponsePolicy.MESSAGE,
            "nfconta/charges",
            self._body(company_id, payload),
            self._params(params),
        )

    def confirm_cash_receipt(
        self,
        company_id: int,
        installment_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Confirma que a cobrança foi recebida em dinheiro."""
        return self._post(
            "confirm_cash_receipt",
            ResponsePolicy.MESSAGE,
            f"nfconta/charges/{installment_id}/cash",
            self._body(company_id, None),
            self._params(params),
        )

    def remove_charge(
        self,
        company_id: int,
        installment_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        return self._delete(
            "remove_charge",
            ResponsePolicy.MESSAGE,
            f"nfconta/charges/{installment_id}",
            self._query(company_id, params),
        )

    def update_charge(
        self,
        company_id: int,
        installment_id: int,
        payload: Mapping[str, Any],
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Atualiza valor e vencimento de uma cobrança existente.

        Raises:
            ValidationError: Sem `value` ou `due_date`
            RemoteError: Se a API responder com `message`
        """
        validate_charge_update(payload)
        return self._put(
            "update_charge",
            ResponsePolicy.MESSAGE,
            f"nfconta/charges/{installment_id}",
            self._body(company_id, payload),
            self._params(params),
        )

    def create_deposit(
        self,
        company_id: int,
        payload: Mapping[str, Any],
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Gera um boleto de depósito na própria conta."""
        validate_deposit(payload)
        return self._post(
            "create_deposit",
            ResponsePolicy.MESSAGE,
            "nfconta/deposit",
            self._body(company_id, payload),
            self._params(params),
        )

    def get_charge(
        self,
        company_id: int,
        installment_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        return self._get(
            "get_charge",
            ResponsePolicy.MESSAGE,
            f"installments/{installment_id}",
            self._query(company_id, params),
        )

    def create_contract_charge(
        self,
        company_id: int,
        payload: Mapping[str, Any],
        signature: bool = False,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Gera a cobrança de contratação do NFHub.

        Com `type == 2` (cartão) também são obrigatórios `parcel_value`,
        `parcel_quantity`, `ip` e os objetos `credit_card` e `holder_info`
        completos.

        Args:
            company_id: ID da empresa no NFHub
            payload: Dados da cobrança
            signature: Usa o endpoint de assinatura (`nfconta/contracts/charge/1`)
            params: Query params adicionais

        Raises:
            ValidationError: Com todas as violações encontradas
            RemoteError: Status diferente de 200 (mensagem ou lista `errors`)
        """
        validate_contract_charge(company_id, payload)
        path = "nfconta/contracts/charge/1" if signature else "nfconta/contracts/charge"
        return self._post(
            "create_contract_charge",
            ResponsePolicy.HTTP_STATUS,
            path,
            self._body(company_id, payload),
            self._params(params),
        )

    def get_boleto(
        self,
        company_id: int,
        installment_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Baixa o PDF do boleto; `envelope.body` traz os bytes sem decodificação."""
        return self._get(
            "get_boleto",
            ResponsePolicy.MESSAGE,
            f"nfconta/charges/{installment_id}/pdf",
            self._query(company_id, params),
            _RAW_BODY,
        )

    def get_wfpay_charge(
        self,
        company_id: int,
        wfpay_installment_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        return self._get(
            "get_wfpay_charge",
            ResponsePolicy.MESSAGE,
            f"nfconta/charges/{wfpay_installment_id}",
            self._query(company_id, params),
        )

    def create_wfpay_charge(
        self,
        company_id: int,
        data: Mapping[str, Any],
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Gera cobrança pelo WFPay. O ID da empresa vai na query, não no corpo."""
        return self._post(
            "create_wfpay_charge",
            ResponsePolicy.MESSAGE,
            "nfconta/installments",
            dict(data),
            self._query(company_id, params),
        )
