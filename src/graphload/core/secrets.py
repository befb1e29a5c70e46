# src/graphload/core/secrets.py
"""Secret version reference grammar.

Connection settings may be supplied as a reference to a secret manager entry
instead of an inline URI. This module only checks the reference's shape; it
never resolves or fetches the secret.

    projects/{project}/secrets/{secret}/versions/{version}
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_SECRET_VERSION_PATTERN = re.compile(r"projects/([^/\s]+)/secrets/([^/\s]+)/versions/([^/\s]+)")


class InvalidSecretReferenceError(ValueError):
    """Raised when a string is not a secret version reference."""


@dataclass(frozen=True, slots=True)
class SecretVersionRef:
    """Parsed secret version reference (never contains the secret value).

    Attributes:
        project: Project owning the secret
        secret: Secret identifier
        version: Version identifier ("latest" or a number)
    """

    project: str
    secret: str
    version: str

    def __str__(self) -> str:
        return f"projects/{self.project}/secrets/{self.secret}/versions/{self.version}"


def parse_secret_version(reference: str) -> SecretVersionRef:
    """Parse a secret version reference.

    Args:
        reference: String of the form projects/{p}/secrets/{s}/versions/{v}

    Returns:
        The parsed reference

    Raises:
        InvalidSecretReferenceError: If the string does not match the grammar
    """
    match = _SECRET_VERSION_PATTERN.fullmatch(reference)
    if match is None:
        raise InvalidSecretReferenceError(f"Not a secret version reference: {reference!r}")
    project, secret, version = match.groups()
    return SecretVersionRef(project=project, secret=secret, version=version)


def is_secret_version(reference: str) -> bool:
    """Whether ``reference`` parses as a secret version reference."""
    try:
        parse_secret_version(reference)
    except InvalidSecretReferenceError:
        return False
    return True
