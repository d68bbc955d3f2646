# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Host-callable exports.

Hosts that embed secpass register these callables under fixed names at
start-up, e.g. ``register_exports(host.exports.add)``.
"""
from typing import Any, Callable, Dict

from secpass.auth.password import hash_password, verify_password


class UnknownExportError(KeyError):
    """Raised when a host asks for an export that does not exist."""
    pass


EXPORTS: Dict[str, Callable[..., Any]] = {
    "hashPassword": hash_password,
    "verifyPassword": verify_password,
}


def register_exports(register: Callable[[str, Callable[..., Any]], Any]) -> None:
    """Register every export with a host.

    Args:
        register: Host callback taking (name, function)
    """
    for name, func in EXPORTS.items():
        register(name, func)


def get_export(name: str) -> Callable[..., Any]:
    """Look up an export by name.

    Raises:
        UnknownExportError: If no export has that name
    """
    try:
        return EXPORTS[name]
    except KeyError:
        raise UnknownExportError(name) from None
