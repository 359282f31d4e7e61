# src/sync/github/signature.py

import hashlib
import hmac
from typing import Optional

SIGNATURE_PREFIX = "sha256="


def compute_signature(raw_body: bytes, secret: str) -> str:
    """
    GitHub과 같은 방식으로 서명 생성: "sha256=" + lowercase hex HMAC
    """
    digest = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def verify_signature(raw_body: bytes, provided_signature: Optional[str], secret: str) -> bool:
    """
    X-Hub-Signature-256 헤더 검증.

    Args:
        raw_body: 파싱 전 request body (bytes 그대로)
        provided_signature: 헤더 값, 없으면 None
        secret: webhook shared secret
    Returns:
        서명이 일치하면 True
    """
    if not provided_signature or not secret:
        return False

    expected = compute_signature(raw_body, secret).encode("ascii")
    provided = provided_signature.encode("utf-8")

    # compare_digest는 길이가 같을 때만 constant-time. 길이 자체는 비밀이 아님
    if len(provided) != len(expected):
        return False

    return hmac.compare_digest(provided, expected)
