"""Builders de query params e corpos de requisição da API NFConta."""

from nfconta.api.payload_builders.nfconta.form import (
    flatten_documents,
    is_file_part,
    multipart_fields,
    split_form_body,
)
from nfconta.api.payload_builders.nfconta.query_params import (
    set_param,
    set_param_if_present,
    to_httpx_params,
    with_company_id,
)

__all__ = [
    "flatten_documents",
    "is_file_part",
    "multipart_fields",
    "set_param",
    "set_param_if_present",
    "split_form_body",
    "to_httpx_params",
    "with_company_id",
]
