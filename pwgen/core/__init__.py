"""Generation core for pwgen: character pools, passwords, and usernames."""

from __future__ import annotations


def generate_password(request, rng=None):
    from pwgen.core.password_service import generate_password as _generate_password

    return _generate_password(request, rng)


def generate_username(request, rng=None):
    from pwgen.core.username_service import generate_username as _generate_username

    return _generate_username(request, rng)


__all__ = ["generate_password", "generate_username"]
