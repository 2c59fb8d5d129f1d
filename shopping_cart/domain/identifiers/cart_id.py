"""カート識別子の値オブジェクト."""
from __future__ import annotations

import uuid
from dataclasses import dataclass

from ..exceptions import InvalidArgumentError


@dataclass(frozen=True)
class CartId:
    """カートID.

    小文字16進・ハイフン区切り（8-4-4-4-12）のUUID v4文字列のみを受け付ける。
    """

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.value, str):
            raise InvalidArgumentError("CartId must be a UUID v4 string")
        try:
            parsed = uuid.UUID(self.value)
        except ValueError:
            raise InvalidArgumentError("CartId must be a UUID v4 string") from None
        # 波括弧・大文字・ハイフンなし等の別表記は正規形と一致しない
        if parsed.version != 4 or str(parsed) != self.value:
            raise InvalidArgumentError("CartId must be a UUID v4 string")

    @classmethod
    def generate(cls) -> CartId:
        """ランダムなUUID v4からCartIdを採番する."""
        return cls(str(uuid.uuid4()))

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
