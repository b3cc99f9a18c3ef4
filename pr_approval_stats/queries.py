from __future__ import annotations

from .errors import ConfigError

_APPROVED_TEMPLATE = "is:pr is:merged review:approved org:{org}"
_NOT_APPROVED_TEMPLATE = "is:pr is:merged -review:approved org:{org}"


def _checked(org: str) -> str:
    org = (org or "").strip()
    if not org:
        raise ConfigError("Organization name is required.")
    if " " in org:
        raise ConfigError(f"Invalid organization name: {org!r}")
    return org


def approved_query(org: str) -> str:
    return _APPROVED_TEMPLATE.format(org=_checked(org))


def not_approved_query(org: str) -> str:
    return _NOT_APPROVED_TEMPLATE.format(org=_checked(org))
