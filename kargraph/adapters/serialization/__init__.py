from .binary_codec import MAGIC, VERSION, deserialize, serialize

__all__ = [
    "MAGIC",
    "VERSION",
    "deserialize",
    "serialize",
]
