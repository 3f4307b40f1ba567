#!/usr/bin/env python3
"""
Generate an RSA key pair for JWT authentication.

Prints both keys in PEM format, escaped onto one line so they can be pasted
straight into a .env file as JWT_PRIVATE_KEY_PEM / JWT_PUBLIC_KEY_PEM.

Usage:
    python scripts/generate_keys.py [--bits 2048]
"""

import argparse

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa


def generate_rsa_keypair(key_size: int = 4096) -> tuple[str, str]:
    """Return ``(private_pem, public_pem)`` for a fresh RSA key."""
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=key_size)

    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")

    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("utf-8")

    return private_pem, public_pem


def as_env_line(name: str, pem: str) -> str:
    """Render a PEM block as a single quoted .env assignment."""
    escaped = pem.strip().replace("\n", "\\n")
    return f'{name}="{escaped}"'


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--bits", type=int, default=4096, choices=(2048, 3072, 4096))
    args = parser.parse_args()

    private_pem, public_pem = generate_rsa_keypair(args.bits)

    print("# Keep the private key secret; never commit it.")
    print(as_env_line("JWT_PRIVATE_KEY_PEM", private_pem))
    print(as_env_line("JWT_PUBLIC_KEY_PEM", public_pem))


if __name__ == "__main__":
    main()
