"""
Room：一個 session 的雲端變數空間與連線中的 Client

職責：
1. 管理成員列表（加入 / 離開，依加入順序，不可重複）
2. 管理雲端變數（建立 / 更新，有數量與長度上限）
3. 查詢成員與變數快照

原則：
- 先驗證再修改：所有檢查都在修改前完成，失敗時不留下部分狀態
- 檢查順序固定：名稱 -> 值 -> 存在性 -> 容量，錯誤回報可預測
- Room 不通知任何人：廣播由外部 dispatcher 負責
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple
import logging

from core.client import Client
from core.locks import new_room_lock, with_room_lock
from core.exceptions import (
    DuplicateClient,
    ClientNotFound,
    InvalidName,
    InvalidValue,
    VariableExists,
    VariableNotFound,
    CapacityExceeded
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoomLimits:
    """雲端變數的限制（程序層級常數，不可變）"""
    max_variables: int = 10
    max_name_length: int = 100
    max_value_length: int = 1000
    name_prefix: str = "☁ "


DEFAULT_LIMITS = RoomLimits()


def utf16_length(text: str) -> int:
    """
    以 UTF-16 code unit 計算字串長度（與 JS 的 String.length 相同）

    範例：
        utf16_length("abc") -> 3
        utf16_length("😀") -> 2（BMP 以外的字元佔兩個 code unit）
    """
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def is_valid_variable_name(name: Any, limits: RoomLimits = DEFAULT_LIMITS) -> bool:
    """
    檢查變數名稱是否可以使用

    規則：
    - 必須是字串
    - 必須以前綴「☁ 」開頭
    - 總長度 < 100（UTF-16 code unit）
    """
    return (
        isinstance(name, str)
        and name.startswith(limits.name_prefix)
        and utf16_length(name) < limits.max_name_length
    )


def is_valid_value(value: Any, limits: RoomLimits = DEFAULT_LIMITS) -> bool:
    """檢查變數值是否可以設定（字串，長度 < 1000 個 UTF-16 code unit）"""
    return isinstance(value, str) and utf16_length(value) < limits.max_value_length


class Room:
    """雲端變數房間"""

    def __init__(self, limits: RoomLimits = DEFAULT_LIMITS):
        self.limits = limits
        self._variables: Dict[str, str] = {}
        self._clients: List[Client] = []
        self._lock = new_room_lock()

    def __repr__(self):
        return (
            f"<Room clients={len(self._clients)} "
            f"variables={len(self._variables)}/{self.limits.max_variables}>"
        )

    @property
    def client_count(self) -> int:
        return len(self._clients)

    @property
    def variable_count(self) -> int:
        return len(self._variables)

    # ============ Client ============

    def add_client(self, client: Client) -> None:
        """
        加入新的 Client

        參數：
            client: 要加入的 Client（以物件身分比對，不是以值比對）

        異常：
            DuplicateClient: 同一個 Client 已經在房間內
        """
        with with_room_lock(self):
            if any(c is client for c in self._clients):
                raise DuplicateClient(client)
            self._clients.append(client)
            count = len(self._clients)

        logger.info(f"Client {client.username} joined room ({count} connected)")

    def remove_client(self, client: Client) -> None:
        """
        移除 Client，其餘成員的順序不變

        異常：
            ClientNotFound: Client 不屬於這個房間
        """
        with with_room_lock(self):
            for index, c in enumerate(self._clients):
                if c is client:
                    del self._clients[index]
                    break
            else:
                raise ClientNotFound(client)
            count = len(self._clients)

        logger.info(f"Client {client.username} left room ({count} connected)")

    def get_clients(self) -> Tuple[Client, ...]:
        """取得所有連線中的 Client（依加入順序，唯讀快照）"""
        with with_room_lock(self):
            return tuple(self._clients)

    def has_client_with_username(self, username: str) -> bool:
        """
        檢查房間內是否已有使用該 username 的 Client

        username 比對不分大小寫，外部的加入流程用來確保房間內名稱唯一
        """
        username = username.lower()
        return any(c.username.lower() == username for c in self.get_clients())

    # ============ Variable ============

    def get_all_variables(self) -> Mapping[str, str]:
        """取得所有變數（name -> value，依建立順序，唯讀快照）"""
        with with_room_lock(self):
            return MappingProxyType(dict(self._variables))

    def _validate(self, name: Any, value: Any) -> None:
        if not is_valid_variable_name(name, self.limits):
            raise InvalidName(name)
        if not is_valid_value(value, self.limits):
            raise InvalidValue(value)

    def create_var(self, name: str, value: str) -> None:
        """
        建立新變數

        這個方法不會通知 Client，只修改狀態。

        檢查順序：
        1. 名稱是否合法
        2. 值是否合法
        3. 變數是否已存在
        4. 是否已達數量上限

        異常：
            InvalidName: 名稱不合法
            InvalidValue: 值不合法
            VariableExists: 變數已經存在
            CapacityExceeded: 已有 max_variables 個變數
        """
        with with_room_lock(self):
            self._validate(name, value)
            if name in self._variables:
                raise VariableExists(name)
            if len(self._variables) >= self.limits.max_variables:
                logger.warning(
                    f"Rejected variable {name}: room already holds "
                    f"{self.limits.max_variables} variables"
                )
                raise CapacityExceeded(self.limits.max_variables)
            self._variables[name] = value

        logger.info(f"Created variable {name}")

    def set(self, name: str, value: str) -> None:
        """
        更新既有變數的值（建立順序不變）

        這個方法不會通知 Client，只修改狀態。

        異常：
            InvalidName: 名稱不合法
            InvalidValue: 值不合法
            VariableNotFound: 變數不存在
        """
        with with_room_lock(self):
            self._validate(name, value)
            if name not in self._variables:
                raise VariableNotFound(name)
            self._variables[name] = value

        logger.debug(f"Set variable {name}")
