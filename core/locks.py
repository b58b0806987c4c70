"""
並發控制工具

每個 Room 擁有一把 threading.RLock，所有會修改狀態的操作
（add_client / remove_client / create_var / set）以及快照讀取
（get_clients / get_all_variables）都必須在同一把鎖內完成，
避免 check-then-act 的競態條件（Race Condition）：
- 兩個請求同時通過容量檢查，導致變數超過上限
- 兩個請求同時通過存在性檢查，導致重複建立
"""
from contextlib import contextmanager
from typing import Iterator
import threading


def new_room_lock() -> threading.RLock:
    """
    建立 Room 專用的鎖

    使用 RLock（可重入），Room 的方法互相呼叫時不會 deadlock
    """
    return threading.RLock()


@contextmanager
def with_room_lock(room) -> Iterator:
    """
    鎖定一個 Room

    使用場景：
    - 修改 Room 狀態時
    - 外部 dispatcher 需要把多個操作組成一個原子單位時
      （例如：檢查 username 是否重複後再 add_client）

    範例：
        with with_room_lock(room):
            if not room.has_client_with_username(client.username):
                room.add_client(client)

    參數：
        room: 任何帶有 _lock 屬性的 Room

    返回：
        Context manager，進入時 yield 該 Room
    """
    with room._lock:
        yield room
