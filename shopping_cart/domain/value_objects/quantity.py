"""数量を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Quantity:
    """カートに入れる商品の数量（1〜100）."""

    value: int

    MAX = 100

    def __post_init__(self) -> None:
        """バリデーション."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidArgumentError(f"Quantity must be an integer: {self.value!r}")
        if self.value <= 0:
            raise InvalidArgumentError("Quantity must be a positive number")
        if self.value > self.MAX:
            raise InvalidArgumentError(f"Quantity must be less than or equal to {self.MAX}")

    @classmethod
    def of(cls, value: int) -> Quantity:
        """指定数量でQuantityを生成する."""
        return cls(value)

    def __str__(self) -> str:
        """文字列表現."""
        return str(self.value)
