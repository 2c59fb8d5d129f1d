"""金額を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Money:
    """金額（USD）を表現する値オブジェクト.

    合計は浮動小数点で積算し、表示は Python 標準の float 文字列変換
    （"0.0", "70.0" のように小数部を最低1桁含む）に従う。
    """

    value: float

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.value < 0:
            raise InvalidArgumentError("Money value cannot be negative")

    @classmethod
    def of(cls, value: Decimal | int | float) -> Money:
        """指定金額でMoneyを生成する."""
        return cls(float(value))

    @classmethod
    def zero(cls) -> Money:
        """ゼロドルを生成する."""
        return cls(0.0)

    def add(self, other: Money) -> Money:
        """金額を加算して新しいMoneyを返す."""
        return Money(self.value + other.value)

    def multiply(self, factor: int) -> Money:
        """金額を乗算して新しいMoneyを返す."""
        if factor < 0:
            raise InvalidArgumentError("Factor cannot be negative")
        return Money(self.value * factor)

    def format(self) -> str:
        """表示用フォーマット（例: "70.0"）."""
        return str(float(self.value))

    def __str__(self) -> str:
        """文字列表現."""
        return self.format()
