"""Operações de conta: ativação, documentos, saldo, extrato e 2FA."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nfconta.api.connectors.nfconta._base import NFContaClientBase
from nfconta.api.connectors.nfhub.nfhub_errors import ResponsePolicy
from nfconta.api.payload_builders.nfconta import flatten_documents
from nfconta.api.validators.nfconta import validate_documents
from nfconta.app.protocols.models import RequestOptions

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from nfconta.app.protocols.models import ResponseEnvelope

_FORM = RequestOptions(form=True)


class AccountOperationsMixin(NFContaClientBase):
    """Conta NFConta da empresa."""

    def check_account_active(
        self,
        company_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Verifica se a conta NFConta da empresa está ativa.

        Raises:
            RemoteError: Se a API responder com `message`
        """
        return self._get(
            "check_account_active",
            ResponsePolicy.MESSAGE,
            "nfconta/is_active",
            self._query(company_id, params),
        )

    def activate_account(
        self,
        company_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Solicita a ativação da conta. O envelope é devolvido sem inspeção."""
        return self._post(
            "activate_account",
            ResponsePolicy.RAW,
            f"companies/{company_id}/nfconta/create",
            {},
            self._params(params),
        )

    def submit_documents(
        self,
        company_id: int,
        payload: Mapping[str, Any],
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Envia os documentos da empresa para análise.

        `payload["documents"]` é uma lista de {"type", "document"}; a lista é
        achatada em campos `documents[i][type]` / `documents[i][document]` e
        enviada como multipart/form-data.

        Args:
            company_id: ID da empresa no NFHub
            payload: Dados com a lista `documents`
            params: Query params adicionais

        Raises:
            ValidationError: Lista ausente ou entradas inválidas (todas reunidas)
            RemoteError: Se a API responder com `message`
        """
        validate_documents(payload)
        body = self._body(company_id, flatten_documents(payload))
        return self._post(
            "submit_documents",
            ResponsePolicy.MESSAGE,
            "nfconta/documents",
            body,
            self._params(params),
            _FORM,
        )

    def list_documents(
        self,
        company_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        return self._get(
            "list_documents",
            ResponsePolicy.RAW,
            "nfconta/documents",
            self._query(company_id, params),
        )

    def get_balance(
        self,
        company_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        return self._get(
            "get_balance",
            ResponsePolicy.RAW,
            "nfconta/balance",
            self._query(company_id, params),
        )

    def get_summary(
        self,
        company_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Resumo financeiro da conta."""
        return self._get(
            "get_summary",
            ResponsePolicy.RAW,
            "nfconta/resume",
            self._query(company_id, params),
        )

    def get_statement(
        self,
        company_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Extrato da conta. Filtros (período, página) vão em `params`."""
        return self._get(
            "get_statement",
            ResponsePolicy.MESSAGE,
            "nfconta/extract",
            self._query(company_id, params),
        )

    def get_statement_entry(
        self,
        company_id: int,
        extract_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        return self._get(
            "get_statement_entry",
            ResponsePolicy.MESSAGE,
            f"nfconta/extract/{extract_id}",
            self._query(company_id, params),
        )

    def list_banks(
        self,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Bancos disponíveis para transferência (não depende da empresa)."""
        return self._get(
            "list_banks",
            ResponsePolicy.MESSAGE,
            "nfconta/banks",
            self._params(params),
        )

    def list_accounts(
        self,
        company_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        return self._get(
            "list_accounts",
            ResponsePolicy.MESSAGE,
            "nfconta/accounts",
            self._query(company_id, params),
        )

    def generate_secret(
        self,
        company_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        """Gera o segredo do Google Authenticator usado para autorizar pagamentos."""
        return self._post(
            "generate_secret",
            ResponsePolicy.MESSAGE,
            "nfconta/auth/generate",
            self._body(company_id, None),
            self._params(params),
        )

    def get_qrcode_url(
        self,
        company_id: int,
        params: Iterable[Mapping[str, Any]] | None = None,
    ) -> ResponseEnvelope:
        return self._get(
            "get_qrcode_url",
            ResponsePolicy.MESSAGE,
            "nfconta/auth/qrcode",
            self._query(company_id, params),
        )
