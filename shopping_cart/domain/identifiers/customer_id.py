"""顧客識別子の値オブジェクト."""
from __future__ import annotations

import re
from dataclasses import dataclass

from ..exceptions import InvalidArgumentError


@dataclass(frozen=True)
class CustomerId:
    """顧客ID（例: "ABC12345DE-A"）.

    文字3つ + 数字5桁 + 文字2つ + "-" + "A" または "Q"。
    文字部分は任意のUnicode文字（大文字・小文字を問わない）を許容する。
    """

    value: str

    _PATTERN = re.compile(r"(.{3})[0-9]{5}(.{2})-[AQ]")

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.value, str):
            raise InvalidArgumentError("Customer id is invalid")
        match = self._PATTERN.fullmatch(self.value)
        # str.isalpha は Unicode の L* カテゴリのみ True
        if match is None or not all(group.isalpha() for group in match.groups()):
            raise InvalidArgumentError("Customer id is invalid")

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
