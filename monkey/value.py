import abc
from dataclasses import dataclass
from typing import Callable


class Value(abc.ABC):
    @classmethod
    @abc.abstractmethod
    def type_name(cls) -> str:
        ...

    @abc.abstractmethod
    def inspect(self) -> str:
        """Text shown to the user for this value"""


UnaryOperationImpl = Callable[[Value], Value]
BinaryOperationImpl = Callable[[Value, Value], Value]


@dataclass(frozen=True)
class Integer(Value):
    v: int

    @classmethod
    def type_name(cls) -> str:
        return "Integer"

    def inspect(self) -> str:
        return str(self.v)
