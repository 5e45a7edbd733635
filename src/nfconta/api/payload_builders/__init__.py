"""Payload builders: construção de query params e corpos para APIs externas.

Estrutura:
- nfconta/: API NFConta (query params {name, value}, formulário de documentos)
"""

__all__: list[str] = []
