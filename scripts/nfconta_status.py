#!/usr/bin/env python3
"""Consulta status e saldo da conta NFConta de uma empresa.

Uso:
    NFHUB_API_BASE_URL=https://... NFHUB_API_TOKEN=... \
        python scripts/nfconta_status.py --company-id 10

Imprime o corpo JSON das respostas; sai com código 1 em erro da NFConta.
"""

from __future__ import annotations

import argparse
import json
import sys

from nfconta import NFContaError, create_nfconta_client
from nfconta.app.observability import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from nfconta.config.logging import configure_logging
from nfconta.config.settings import get_base_settings


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--company-id",
        type=int,
        required=True,
        help="ID da empresa no NFHub.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Sobrescreve LOG_LEVEL do ambiente.",
    )
    return parser.parse_args(argv)


def run(company_id: int) -> int:
    try:
        client = create_nfconta_client()
    except ValueError as exc:
        print(f"configuração inválida: {exc}", file=sys.stderr)
        return 1

    with client:
        try:
            status = client.check_account_active(company_id)
            balance = client.get_balance(company_id)
        except NFContaError as exc:
            print(f"erro: {exc}", file=sys.stderr)
            return 1

    print(json.dumps({"is_active": status.body, "balance": balance.body}, ensure_ascii=False, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    base = get_base_settings()
    configure_logging(
        level=args.log_level or base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )
    token = set_correlation_id()
    try:
        return run(args.company_id)
    finally:
        reset_correlation_id(token)


if __name__ == "__main__":
    sys.exit(main())
