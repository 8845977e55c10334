"""Sockets, stream serialization and math helpers for multiplayer game networking."""

__version__ = "0.1.0"
__all__ = ["address", "bitstream", "byteswap", "linking", "memorystream", "robomath", "sockets"]