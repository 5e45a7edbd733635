"""Conectores externos.

- nfhub/: transporte HTTP (httpx) da plataforma NFHub
- nfconta/: facade com as operações da NFConta
"""
