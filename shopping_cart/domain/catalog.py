"""商品カタログ.

販売可能な商品名と単価（USD）の固定テーブル。
プロセス起動時に一度だけ構築され、以後変更されない。
"""
from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from .exceptions import InvalidArgumentError, NotFoundError


class Catalog:
    """商品名から単価を引く読み取り専用のカタログ."""

    def __init__(self, prices: Mapping[str, Decimal]) -> None:
        """初期化.

        Args:
            prices: 商品名 -> 単価 のマッピング

        Raises:
            InvalidArgumentError: 商品名が正規化されていない、または単価が負の場合
        """
        for name, price in prices.items():
            if not name or name != name.strip().lower():
                raise InvalidArgumentError(f"Catalog name must be lowercase and trimmed: {name!r}")
            if price < 0:
                raise InvalidArgumentError(f"Catalog price cannot be negative: {name}")
        self._prices: Mapping[str, Decimal] = MappingProxyType(dict(prices))

    def price_of(self, name: str) -> Decimal:
        """商品の単価を取得する.

        Raises:
            NotFoundError: カタログに存在しない商品の場合
        """
        try:
            return self._prices[name]
        except KeyError:
            raise NotFoundError(f"Item not found in catalog: {name}") from None

    def contains(self, name: str) -> bool:
        """カタログに商品が存在するか判定する."""
        return name in self._prices

    def names(self) -> list[str]:
        """商品名のリストを取得する（テーブル順）."""
        return list(self._prices)

    def __contains__(self, name: object) -> bool:
        return name in self._prices

    def __len__(self) -> int:
        return len(self._prices)


CATALOG = Catalog(
    {
        "apple box": Decimal("5.0"),
        "banana box": Decimal("3.75"),
        "orange box": Decimal("10.0"),
        "pear box": Decimal("10.0"),
        "grape box": Decimal("3.45"),
        "watermelon box": Decimal("13.50"),
        "pineapple box": Decimal("15.00"),
        "mango box": Decimal("12.0"),
        "kiwi box": Decimal("7.0"),
        "strawberry box": Decimal("10.0"),
        "shirts": Decimal("15.0"),
        "pants": Decimal("20.0"),
        "shoes": Decimal("30.0"),
        "socks": Decimal("2.50"),
        "nvidia rtx 3090": Decimal("1500.0"),
        "amd ryzen 9 5950x": Decimal("800.0"),
        "soccer ball": Decimal("25.0"),
        "basketball": Decimal("30.0"),
        "volleyball": Decimal("20.0"),
        "football": Decimal("25.0"),
        "baseball": Decimal("10.0"),
        "tennis ball": Decimal("5.0"),
        "lotion": Decimal("7.0"),
        "shampoo": Decimal("5.0"),
        "conditioner": Decimal("5.0"),
        "toothpaste": Decimal("3.0"),
        "toothbrush": Decimal("2.0"),
        "floss": Decimal("1.0"),
        "soap": Decimal("2.0"),
        "towel": Decimal("10.0"),
    }
)
