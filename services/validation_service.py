"""
驗證服務：檢查來自外部的不可信輸入

純計算邏輯，沒有副作用。在資料交給 Room 或加入流程之前先擋掉格式錯誤的輸入。
"""
from collections.abc import Mapping
from typing import Any
import re

USERNAME_PATTERN = re.compile(r"[a-z0-9_-]+", re.IGNORECASE | re.ASCII)
ROOM_ID_PATTERN = re.compile(r"[0-9]+")

MAX_USERNAME_LENGTH = 30


def is_valid_username(username: Any) -> bool:
    """
    檢查 username 是否合法

    規則：
    - 必須是字串
    - 長度 1 ~ 29
    - 只能包含 ASCII 英文字母、數字、底線、連字號（不分大小寫）

    範例：
        is_valid_username("griffpatch") -> True
        is_valid_username("Alice_99") -> True
        is_valid_username("a b") -> False
        is_valid_username("") -> False
    """
    return (
        isinstance(username, str)
        and 0 < len(username) < MAX_USERNAME_LENGTH
        and USERNAME_PATTERN.fullmatch(username) is not None
    )


def is_valid_room_id(room_id: Any) -> bool:
    """
    檢查房間 ID 是否合法（非空字串，只有十進位數字）

    範例：
        is_valid_room_id("104") -> True
        is_valid_room_id("12a") -> False
        is_valid_room_id(104) -> False
    """
    return isinstance(room_id, str) and ROOM_ID_PATTERN.fullmatch(room_id) is not None


def is_valid_variable_map(obj: Any) -> bool:
    """
    檢查變數集合是否為結構化物件（JSON object 或 array 解碼後的結果）

    注意：
        只檢查外型，不檢查每個變數的名稱與值，那是 Room 的責任
    """
    return isinstance(obj, (Mapping, list))
