"""カタログ商品を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..catalog import CATALOG
from ..exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Item:
    """カタログに存在する商品（正規化済みの商品名で等価判定）."""

    name: str

    _MIN_LENGTH = 1
    _MAX_LENGTH = 100

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.name, str):
            raise InvalidArgumentError(f"Name must be a string: {self.name!r}")
        if len(self.name) < self._MIN_LENGTH:
            raise InvalidArgumentError(f"Name must be at least {self._MIN_LENGTH} character")
        if len(self.name) > self._MAX_LENGTH:
            raise InvalidArgumentError(f"Name must be at most {self._MAX_LENGTH} characters")
        if not CATALOG.contains(self.name):
            raise InvalidArgumentError("Item not found in catalog")

    @classmethod
    def of(cls, raw_name: str) -> Item:
        """前後の空白を除去し小文字化した商品名からItemを生成する."""
        if not isinstance(raw_name, str):
            raise InvalidArgumentError(f"Name must be a string: {raw_name!r}")
        return cls(raw_name.strip().lower())

    def unit_price(self) -> Decimal:
        """単価を取得する."""
        return CATALOG.price_of(self.name)

    def __str__(self) -> str:
        """文字列表現."""
        return self.name
