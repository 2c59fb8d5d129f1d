"""カート集約ルート."""
from __future__ import annotations

import logging

from ..exceptions import ItemNotInCartError
from ..identifiers import CartId, CustomerId
from ..value_objects import Item, Money, Quantity

logger = logging.getLogger(__name__)


class Cart:
    """1人の顧客が購入を検討する商品と数量を保持するコンテナ（集約ルート）.

    カートIDは生成時に一度だけ採番され、顧客IDは生成時に検証される。
    どちらも生成後は変更できない。商品は最初に追加された順序を保持する。
    """

    def __init__(self, customer_id: str) -> None:
        """初期化.

        Args:
            customer_id: 顧客ID（例: "ABC12345DE-A"）

        Raises:
            InvalidArgumentError: 顧客IDが形式に一致しない場合
        """
        self._customer_id = CustomerId(customer_id)
        self._cart_id = CartId.generate()
        self._contents: dict[Item, int] = {}
        logger.debug("Created cart %s for customer %s", self._cart_id, self._customer_id)

    @property
    def id(self) -> str:
        """カートID."""
        return self._cart_id.value

    @property
    def customer_id(self) -> str:
        """顧客ID."""
        return self._customer_id.value

    @property
    def items(self) -> list[str]:
        """カート内容のスナップショット（"<商品名>: <数量>" のリスト）."""
        return [f"{item.name}: {quantity}" for item, quantity in self._contents.items()]

    def update(self, item_name: str, quantity: int) -> None:
        """商品をカートに追加する。既に存在する場合は数量を置き換える.

        Args:
            item_name: 商品名（前後の空白と大文字小文字は無視される）
            quantity: 数量（1〜100）

        Raises:
            InvalidArgumentError: 数量または商品名が不正な場合
        """
        new_quantity = Quantity.of(quantity)
        item = Item.of(item_name)

        self._contents[item] = new_quantity.value
        logger.debug("Cart %s: set %s to %d", self._cart_id, item, new_quantity.value)

    def remove(self, item_name: str, quantity: int) -> None:
        """カートから商品を指定数量だけ取り除く.

        残数が0以下になる場合は商品ごと削除する。

        Args:
            item_name: 商品名
            quantity: 取り除く数量（1〜100）

        Raises:
            InvalidArgumentError: 数量または商品名が不正な場合
            ItemNotInCartError: 商品がカートに存在しない場合
        """
        removed = Quantity.of(quantity)
        item = Item.of(item_name)

        if item not in self._contents:
            raise ItemNotInCartError(item.name)

        remaining = self._contents[item] - removed.value
        if remaining <= 0:
            del self._contents[item]
            logger.debug("Cart %s: removed %s", self._cart_id, item)
        else:
            self._contents[item] = remaining
            logger.debug("Cart %s: decreased %s to %d", self._cart_id, item, remaining)

    def total_cost(self) -> str:
        """合計金額を計算する（例: "70.0"）."""
        if not self._contents:
            return Money.zero().format()

        total = Money.zero()
        for item, quantity in self._contents.items():
            total = total.add(Money.of(item.unit_price()).multiply(quantity))
        return total.format()

    def clear(self) -> None:
        """全商品を削除する."""
        self._contents.clear()
        logger.debug("Cart %s: cleared", self._cart_id)

    def get_item_count(self) -> int:
        """商品の種類数を取得する."""
        return len(self._contents)

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return len(self._contents) == 0

    def __repr__(self) -> str:
        return f"Cart(id={self.id!r}, customer_id={self.customer_id!r}, items={self.items!r})"
