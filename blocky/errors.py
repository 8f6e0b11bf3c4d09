"""Exceptions raised by blocky."""


class BlockyError(Exception):
    pass


class InvalidOptionsError(BlockyError, ValueError):
    """Options could not be resolved (bad size, scale, seed or color)."""


class EncodingError(BlockyError):
    """The image encoder failed to serialize the sample buffer."""
