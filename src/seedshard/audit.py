"""Offline audit trail with Ed25519 signatures and hash chaining.

Only operation metadata is recorded (word counts, shard indices, thresholds);
phrases, entropy and shard values never reach the log. Nothing is written
unless an audit directory is configured via ``SEEDSHARD_AUDIT_DIR``.
"""
from __future__ import annotations

import hashlib
import json
import logging
import os
import time
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from seedshard import policy as _policy_module

KEY_NAME = "signing_key.pem"
CHAIN_STATE_NAME = "chain.state"
GENESIS = "GENESIS"

_logger = logging.getLogger(__name__)


def resolve_audit_dir(audit_dir: os.PathLike[str] | str | None = None) -> Optional[Path]:
    """Return the directory for audit artefacts, creating it, or ``None`` when disabled."""

    directory = Path(audit_dir).expanduser() if audit_dir else _policy_module.policy.audit_dir
    if directory is None:
        return None
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _load_private_key(directory: Path) -> Ed25519PrivateKey:
    key_path = directory / KEY_NAME
    if key_path.exists():
        return serialization.load_pem_private_key(key_path.read_bytes(), password=None)
    private_key = Ed25519PrivateKey.generate()
    key_path.write_bytes(
        private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    return private_key


def _load_prev_hash(directory: Path) -> str:
    try:
        return (directory / CHAIN_STATE_NAME).read_text().strip()
    except FileNotFoundError:
        return GENESIS


def _canonical(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")


def record_event(
    event: str,
    *,
    details: Dict[str, Any] | None = None,
    audit_dir: os.PathLike[str] | str | None = None,
) -> Optional[Path]:
    """Append a signed entry for *event*; returns its path or ``None`` if auditing is off."""

    directory = resolve_audit_dir(audit_dir)
    if directory is None:
        return None

    timestamp = int(time.time())
    payload = {
        "event": event,
        "details": details or {},
        "timestamp": timestamp,
        "prev_hash": _load_prev_hash(directory),
    }
    message = _canonical(payload)
    signature = _load_private_key(directory).sign(message)
    chain_hash = hashlib.sha3_512(message + signature).hexdigest()
    entry = {
        "payload": payload,
        "signature": signature.hex(),
        "chain_hash": chain_hash,
    }
    file_path = directory / f"audit_{timestamp}_{uuid.uuid4().hex}.json"
    file_path.write_text(json.dumps(entry, ensure_ascii=False, indent=2))
    (directory / CHAIN_STATE_NAME).write_text(chain_hash)
    _logger.debug("Recorded audit event %s in %s", event, file_path.name)
    return file_path


def verify_log(path: os.PathLike[str] | str) -> bool:
    """Check the signature and chain hash of one audit entry."""

    entry_path = Path(path)
    data = json.loads(entry_path.read_text())
    message = _canonical(data["payload"])
    signature = bytes.fromhex(data.get("signature") or "")
    public_key = _load_private_key(entry_path.parent).public_key()
    try:
        public_key.verify(signature, message)
    except InvalidSignature:
        return False
    return hashlib.sha3_512(message + signature).hexdigest() == data.get("chain_hash")


__all__ = ["record_event", "verify_log", "resolve_audit_dir"]
