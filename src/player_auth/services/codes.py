"""Authentication code generation."""

import secrets
import string

CODE_LENGTH = 8


def generate_code() -> str:
    """Generate an 8-character lowercase hex code from the OS random source."""
    return secrets.token_hex(CODE_LENGTH // 2)


def is_valid_code(code: str) -> bool:
    """Validate code format: 8 lowercase hexadecimal characters."""
    if len(code) != CODE_LENGTH:
        return False
    return all(c in string.hexdigits and not c.isupper() for c in code)
