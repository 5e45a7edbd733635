"""Camada de borda: conectores HTTP, validadores e builders de payload."""
