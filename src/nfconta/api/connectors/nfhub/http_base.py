"""Cliente HTTP síncrono da plataforma NFHub.

Cada chamada faz uma única requisição, sem retry. Status HTTP de erro não
levantam exceção aqui: o envelope segue para o facade classificar. Apenas
falhas de comunicação viram TransportError.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from nfconta.api.connectors.nfhub.nfhub_logging import (
    log_request_completed,
    log_transport_failure,
)
from nfconta.api.payload_builders.nfconta import multipart_fields, to_httpx_params
from nfconta.app.observability import get_correlation_id
from nfconta.app.protocols.models import DEFAULT_OPTIONS, ResponseEnvelope
from nfconta.config.settings.nfhub import DEFAULT_USER_AGENT
from nfconta.utils.errors import TransportError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from nfconta.app.protocols.models import QueryParams, RequestOptions


def encode_json_body(body: Mapping[str, Any]) -> bytes:
    """Serializa o corpo em JSON; Decimal, date e afins viram string."""
    return json.dumps(dict(body), default=str).encode("utf-8")


def is_json_response(response: httpx.Response) -> bool:
    content_type = response.headers.get("Content-Type", "")
    return content_type.split(";", 1)[0].strip().lower().endswith("json")


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    base_url: str = ""
    token: str = ""
    timeout_seconds: float = 30.0
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    default_headers: dict[str, str] = field(default_factory=dict)


class NFHubHttpClient:
    """Transporte HTTP (httpx) usado pelo facade NFConta."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._http_client = http_client

    def get(
        self,
        path: str,
        params: QueryParams | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseEnvelope:
        return self._request("GET", path, params=params, options=options)

    def post(
        self,
        path: str,
        body: Mapping[str, Any] | None = None,
        params: QueryParams | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseEnvelope:
        return self._request("POST", path, body=body, params=params, options=options)

    def put(
        self,
        path: str,
        body: Mapping[str, Any] | None = None,
        params: QueryParams | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseEnvelope:
        return self._request("PUT", path, body=body, params=params, options=options)

    def delete(
        self,
        path: str,
        params: QueryParams | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseEnvelope:
        return self._request("DELETE", path, params=params, options=options)

    def close(self) -> None:
        """Fecha o httpx.Client subjacente, se já criado."""
        if self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> NFHubHttpClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def build_url(self, path: str) -> str:
        """Junta base_url e path; barras iniciais do path são irrelevantes."""
        base = self._config.base_url.rstrip("/")
        return f"{base}/{path.lstrip('/')}"

    def _client(self) -> httpx.Client:
        if self._http_client is None:
            self._http_client = httpx.Client(
                timeout=self._config.timeout_seconds,
                verify=self._config.verify_ssl,
            )
        return self._http_client

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self._config.user_agent,
            **self._config.default_headers,
        }
        if self._config.token:
            headers["Authorization"] = f"Bearer {self._config.token}"
        correlation_id = get_correlation_id()
        if correlation_id:
            headers["X-Correlation-ID"] = correlation_id
        return headers

    def _request(
        self,
        method: str,
        path: str,
        *,
        body: Mapping[str, Any] | None = None,
        params: QueryParams | None = None,
        options: RequestOptions | None = None,
    ) -> ResponseEnvelope:
        opts = options or DEFAULT_OPTIONS
        request_kwargs: dict[str, Any] = {
            "params": to_httpx_params(params),
            "headers": self._build_headers(),
            "timeout": self._config.timeout_seconds,
        }
        if body is not None:
            if opts.form:
                request_kwargs["files"] = multipart_fields(body)
            else:
                request_kwargs["content"] = encode_json_body(body)
                request_kwargs["headers"]["Content-Type"] = "application/json"

        started = time.perf_counter()
        try:
            response = self._client().request(method, self.build_url(path), **request_kwargs)
        except httpx.TimeoutException as exc:
            log_transport_failure(method, path, type(exc).__name__)
            raise TransportError("nfhub_timeout") from exc
        except httpx.HTTPError as exc:
            log_transport_failure(method, path, type(exc).__name__)
            raise TransportError("nfhub_connection_error") from exc

        log_request_completed(
            method,
            path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return ResponseEnvelope(
            http_code=response.status_code,
            body=self._decode(response, method, path, opts),
        )

    def _decode(
        self,
        response: httpx.Response,
        method: str,
        path: str,
        options: RequestOptions,
    ) -> Any:
        # Erros chegam em JSON mesmo quando o corpo esperado é binário (PDF)
        if not options.decode and not is_json_response(response):
            return response.content
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            log_transport_failure(method, path, "invalid_json", response.status_code)
            raise TransportError(
                "Response JSON inválido",
                status_code=response.status_code,
            ) from exc
