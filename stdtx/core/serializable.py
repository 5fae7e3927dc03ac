"""
Base class for the objects stdtx serializes: transactions, their inputs and outputs, and redeem scripts
"""
import json
from abc import ABC, abstractmethod

from stdtx.core.byte_stream import SERIALIZED

__all__ = ["Serializable"]


class Serializable(ABC):
    """
    An object with a wire form. Two objects are equal when their wire forms are.
    """

    @classmethod
    @abstractmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        raise NotImplementedError(f"{cls.__name__} must implement from_bytes()")

    @abstractmethod
    def to_bytes(self) -> bytes:
        raise NotImplementedError(f"{self.__class__.__name__} must implement to_bytes()")

    @abstractmethod
    def to_dict(self) -> dict:
        raise NotImplementedError(f"{self.__class__.__name__} must implement to_dict()")

    @property
    def length(self) -> int:
        """Serialized size in bytes"""
        return len(self.to_bytes())

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Serializable):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_bytes().hex()})"
