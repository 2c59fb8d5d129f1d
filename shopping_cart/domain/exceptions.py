"""ドメイン例外."""


class InvalidArgumentError(ValueError):
    """入力値が制約を満たさない場合のエラー."""

    pass


class NotFoundError(LookupError):
    """指定された対象が見つからない場合のエラー."""

    pass


class ItemNotInCartError(NotFoundError):
    """カートに存在しない商品を操作しようとした場合のエラー."""

    def __init__(self, item_name: str) -> None:
        self.item_name = item_name
        super().__init__(f"Item not found in cart: {item_name}")
