"""Bootstrap: composição do cliente NFConta."""

from nfconta.app.bootstrap.clients import create_http_client_config, create_nfconta_client

__all__ = ["create_http_client_config", "create_nfconta_client"]
