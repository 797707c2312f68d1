"""
Bootstrap environment for Streamlit Cloud & local dev:
- Flatten st.secrets into uppercase os.environ keys (nested -> PREFIX_CHILD)
- If a [gcp_service_account] table is present in secrets (the layout Streamlit
  documents for service accounts), expose its client_email / private_key as
  GOOGLE_SERVICE_ACCOUNT_EMAIL / GOOGLE_PRIVATE_KEY
- Finally, load .env (without overriding existing env vars)
"""

from __future__ import annotations

import os
import re
from typing import Any, Dict, Iterator, Tuple

import streamlit as st
from dotenv import load_dotenv


SERVICE_ACCOUNT_SECTION = "gcp_service_account"


def _sanitize_key(key: str) -> str:
    # Uppercase and replace non-alphanumeric with underscores
    return re.sub(r"[^A-Za-z0-9_]", "_", key.upper())


def _flatten_secrets(prefix: str, val: Any) -> Iterator[Tuple[str, str]]:
    if isinstance(val, dict):
        for k, v in val.items():
            yield from _flatten_secrets(f"{prefix}_{k}", v)
    else:
        yield _sanitize_key(prefix), str(val)


def _secrets_as_dict() -> Dict[str, Any]:
    try:
        items = getattr(st, "secrets", None)
        if not items:
            return {}
        try:
            return items.to_dict()  # type: ignore[attr-defined]
        except AttributeError:
            return dict(items)
    except Exception:
        # st.secrets raises when no secrets.toml exists outside Streamlit Cloud
        return {}


def _bridge_secrets_to_env(secrets_dict: Dict[str, Any]) -> None:
    for key, value in secrets_dict.items():
        if isinstance(value, dict):
            for flat_k, flat_v in _flatten_secrets(key, value):
                os.environ.setdefault(flat_k, flat_v)
        else:
            os.environ.setdefault(_sanitize_key(key), str(value))


def _bridge_service_account(secrets_dict: Dict[str, Any]) -> None:
    section = secrets_dict.get(SERVICE_ACCOUNT_SECTION)
    if not isinstance(section, dict):
        return
    email = section.get("client_email")
    key = section.get("private_key")
    if email:
        os.environ.setdefault("GOOGLE_SERVICE_ACCOUNT_EMAIL", str(email))
    if key:
        os.environ.setdefault("GOOGLE_PRIVATE_KEY", str(key))


def ensure_env() -> None:
    """Idempotent: make sure env vars and creds are available.
    Safe to call multiple times, both inside and outside Streamlit runtime.
    """
    secrets_dict = _secrets_as_dict()
    _bridge_secrets_to_env(secrets_dict)
    _bridge_service_account(secrets_dict)
    # load_dotenv will not override existing env vars by default
    load_dotenv(override=False)
