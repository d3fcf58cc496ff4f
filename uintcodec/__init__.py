"""Fixed-width unsigned integer helpers: limbs, bytes, sampling, RLP, hex and SCALE codecs."""

__version__ = "0.1.0"
__all__ = ["limbs", "rlp", "sampling", "scale", "serial", "utils"]