# =============================================================================
# ReadBench -- Payload Generator
# =============================================================================

from .constants import PAYLOAD_MODULUS

_CYCLE = bytes(range(PAYLOAD_MODULUS))


def generate_payload(length: int) -> bytes:
    """Build the payload sent to every client: byte ``i`` is ``i % 255``."""
    if length < 0:
        raise ValueError(f"payload length must be >= 0, got {length}")
    repeats = -(-length // PAYLOAD_MODULUS)
    return (_CYCLE * repeats)[:length]
