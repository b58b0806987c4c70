"""
自定義異常類別

集中管理所有 Room 操作的異常，方便外部 dispatcher 統一轉換成協定錯誤
"""


class CloudRoomException(Exception):
    """所有 Room 異常的基類"""
    pass


# ============ Client 相關異常 ============

class DuplicateClient(CloudRoomException):
    """Client 已經在房間內"""
    def __init__(self, client):
        self.client = client
        super().__init__("Client is already added to this Room")


class ClientNotFound(CloudRoomException):
    """Client 不屬於這個房間"""
    def __init__(self, client):
        self.client = client
        super().__init__("Client does not belong to this Room")


# ============ Variable 相關異常 ============

class InvalidName(CloudRoomException):
    """變數名稱不合法（缺少前綴、太長或不是字串）"""
    def __init__(self, name):
        self.name = name
        super().__init__(f"Invalid variable name: {name!r}")


class InvalidValue(CloudRoomException):
    """變數值不合法（太長或不是字串）"""
    def __init__(self, value):
        self.value = value
        super().__init__("Invalid value")


class VariableExists(CloudRoomException):
    """變數已經存在"""
    def __init__(self, name):
        self.name = name
        super().__init__(f"Variable {name} already exists")


class VariableNotFound(CloudRoomException):
    """變數不存在"""
    def __init__(self, name):
        self.name = name
        super().__init__(f"Variable {name} does not exist")


class CapacityExceeded(CloudRoomException):
    """已達最大變數數量"""
    def __init__(self, limit):
        self.limit = limit
        super().__init__(f"Too many variables (max {limit})")
