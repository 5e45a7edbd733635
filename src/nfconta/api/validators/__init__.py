"""Validators: validação de payloads antes de chamar APIs externas.

Estrutura:
- nfconta/: operações da API NFConta
"""

__all__: list[str] = []
