"""
核心業務邏輯層

這個 package 包含所有核心業務邏輯，包括：
- Room：雲端變數空間與成員列表
- Client：房間持有的 Client 參照
- Exceptions：所有 Room 操作的異常
- Locks：並發控制工具
"""
