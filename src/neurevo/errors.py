"""Exception types raised while decoding and compiling genomes."""

from typing import List, Optional


class NeurevoError(Exception):
    """Base for all neurevo exceptions."""

    pass


class DecodeError(NeurevoError, ValueError):
    """An instruction frame carries an opcode tag that maps to no opcode."""

    def __init__(self, tag: int, offset: Optional[int] = None):
        self.tag = int(tag)
        self.offset = offset
        message = f"No opcode mapped to tag {self.tag}"
        if offset is not None:
            message += f" (frame at byte {offset})"
        super().__init__(message)


class MissingOutputError(NeurevoError, RuntimeError):
    """A network was built before both of its outputs were assigned."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(f"Network outputs not assigned: {', '.join(self.missing)}")


__all__ = ["NeurevoError", "DecodeError", "MissingOutputError"]
