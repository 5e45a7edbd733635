"""Camada de aplicação: protocolos, observabilidade e bootstrap."""
