"""
Deterministic pseudo-embedder.

Maps text to a fixed-length unit vector by accumulating character codes
through sin/cos/tan terms at neighbouring positions. This is a fingerprint
of character positions and codes, not a semantic embedding; the only
property callers may rely on is determinism.

Dependencies: math (stdlib)
System role: Vector values for conversation memory records
"""

import logging
import math

logger = logging.getLogger(__name__)

EMBEDDING_DIMENSION = 1024


class PseudoEmbedder:
    """Character-code trigonometric embedder."""

    def __init__(self, dimension: int = EMBEDDING_DIMENSION) -> None:
        if dimension < 1:
            raise ValueError("dimension must be positive")
        self.dimension = dimension

    def embed(self, text: str) -> list[float]:
        """
        Embed text as an L2-normalized vector of length `dimension`.

        A zero accumulation stays the zero vector. Any arithmetic fault falls
        back to the fixed vector sin(i).

        Args:
            text: Chunk text

        Returns:
            list[float]: Embedding values
        """
        try:
            return self._normalize(self._accumulate(text))
        except (ArithmeticError, ValueError) as e:
            logger.error(
                "Embedding failed, using fallback vector",
                extra={"error_type": type(e).__name__, "error_msg": str(e)},
            )
            return self.fallback_vector()

    def fallback_vector(self) -> list[float]:
        """Fixed deterministic vector used when accumulation fails."""
        return [math.sin(i) for i in range(self.dimension)]

    def _accumulate(self, text: str) -> list[float]:
        dimension = self.dimension
        values = [0.0] * dimension

        for i, code in enumerate(_utf16_code_units(text)):
            position = i % dimension
            values[position] += (code / 255) * math.sin(i)
            values[(position + 1) % dimension] += (code / 510) * math.cos(i)
            values[(position - 1 + dimension) % dimension] += (code / 510) * math.tan(i % 1.5)

        return values

    @staticmethod
    def _normalize(values: list[float]) -> list[float]:
        total = 0.0
        for value in values:
            total += value * value
        magnitude = math.sqrt(total)
        if not math.isfinite(magnitude):
            raise ArithmeticError("non-finite embedding magnitude")
        if magnitude == 0:
            return [0.0] * len(values)
        return [value / magnitude for value in values]


def embed_text(text: str, dimension: int = EMBEDDING_DIMENSION) -> list[float]:
    """Embed text with a one-off PseudoEmbedder."""
    return PseudoEmbedder(dimension).embed(text)


def _utf16_code_units(text: str) -> list[int]:
    """Character codes as UTF-16 code units, so astral characters count twice."""
    data = text.encode("utf-16-le")
    return [int.from_bytes(data[j:j + 2], "little") for j in range(0, len(data), 2)]
