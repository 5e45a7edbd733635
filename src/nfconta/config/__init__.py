"""Configuração: settings e logging."""
