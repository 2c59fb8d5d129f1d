"""パッケージ公開APIのテスト."""
import pytest

import shopping_cart
from shopping_cart import Cart, InvalidArgumentError, NotFoundError


class TestPublicApi:
    """トップレベルから利用するシナリオのテスト."""

    def test_カート操作の一連の流れ(self) -> None:
        """追加・合計・削除の一連の操作を確認."""
        cart = Cart("ABC12345DE-A")
        cart.update("kiwi box", 4)
        cart.update("strawberry box", 3)
        cart.update("mango box", 1)
        assert cart.items == ["kiwi box: 4", "strawberry box: 3", "mango box: 1"]
        assert cart.total_cost() == "70.0"

        cart.remove("kiwi box", 1)
        assert cart.total_cost() == "63.0"

    def test_組み込み例外として捕捉できる(self) -> None:
        """公開例外が組み込みのValueError/LookupErrorとして捕捉できることを確認."""
        cart = Cart("ABC12345DE-A")
        with pytest.raises(ValueError):
            cart.update("kiwi box", 101)
        with pytest.raises(LookupError):
            cart.remove("kiwi box", 1)
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(NotFoundError, LookupError)

    def test_全公開名がインポートできる(self) -> None:
        """__all__の全ての名前がパッケージから参照できることを確認."""
        for name in shopping_cart.__all__:
            assert hasattr(shopping_cart, name)
