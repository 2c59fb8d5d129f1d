"""CustomerIdのテスト."""
import pytest

from shopping_cart.domain.exceptions import InvalidArgumentError
from shopping_cart.domain.identifiers import CustomerId


class TestCustomerId:
    """CustomerIdの単体テスト."""

    @pytest.mark.parametrize(
        "value",
        [
            "ABC12345DE-A",
            "abc12345de-Q",
            "AbC12345dE-A",
            "éñó12345êã-A",  # フランス語・スペイン語・ポルトガル語
            "вгд12345жз-A",  # ロシア語
            "äöü12345ßß-A",  # ドイツ語
            "çşü12345ğı-A",  # トルコ語
            "αβγ54321δε-A",  # ギリシャ語
            "أبج12345دس-A",  # アラビア語
            "אבג45678דה-Q",  # ヘブライ語
            "あいう12345えお-A",  # 日本語
            "가나다12345라마-Q",  # 韓国語
        ],
    )
    def test_有効な顧客IDで生成できる(self, value: str) -> None:
        """任意の言語の文字を含む有効な顧客IDで生成できることを確認."""
        assert CustomerId(value).value == value

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "ABC12345DE",  # サフィックスなし
            "ABC12345DE-B",  # サフィックスがA/Q以外
            "ABC12345DE-a",  # サフィックスは大文字のみ
            "AB12345DE-A",  # 文字が2つ
            "ABC1234DE-A",  # 数字が4桁
            "ABC123456DE-A",  # 数字が6桁
            "ABC12345D-A",  # 末尾の文字が1つ
            "A1C12345DE-A",  # 文字部分に数字
            "A_C12345DE-A",  # 文字部分にアンダースコア
            "ABC12345DE-AQ",  # サフィックスが2文字
            " ABC12345DE-A",  # 前後の空白
            "ABC12345DE-A\n",
            "ABC１２３４５DE-A",  # 全角数字
        ],
    )
    def test_不正な顧客IDで生成するとエラー(self, value: str) -> None:
        """形式に一致しない顧客IDではInvalidArgumentErrorが発生することを確認."""
        with pytest.raises(InvalidArgumentError, match="Customer id is invalid"):
            CustomerId(value)

    def test_文字列変換でvalueが返る(self) -> None:
        """str()で入力値がそのまま返ることを確認."""
        assert str(CustomerId("abc12345de-Q")) == "abc12345de-Q"

    def test_同じ値のCustomerIdは等価(self) -> None:
        """同じvalue値を持つCustomerIdは等しいと判定されることを確認."""
        assert CustomerId("ABC12345DE-A") == CustomerId("ABC12345DE-A")
