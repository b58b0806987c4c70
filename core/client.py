"""
Client 參照

Room 不擁有 Client，只保存參照，並讀取 username 做唯一性檢查。
成員以物件身分比對：兩個 username 相同的 Client 仍是不同的成員。
"""
from typing import Optional, Protocol
from uuid import UUID, uuid4


class Client(Protocol):
    username: str


class ClientHandle:
    """
    連線中參與者的不透明 handle

    參數：
        username: 使用者名稱
        client_id: 連線識別碼（未提供時自動產生 UUID）

    注意：
        不覆寫 __eq__ / __hash__，比對一律以物件身分為準
    """

    __slots__ = ("username", "client_id")

    def __init__(self, username: str, client_id: Optional[UUID] = None):
        self.username = username
        self.client_id = client_id or uuid4()

    def __repr__(self):
        return f"<ClientHandle {self.username} {self.client_id}>"
