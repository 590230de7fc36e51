"""Arithmetic for the Curve25519 field and the Edwards25519 group."""

__version__ = "0.1.0"
__all__ = [
    "encoding",
    "field",
    "field_ops",
    "group",
    "montgomery",
    "powers",
    "scalarmult",
]