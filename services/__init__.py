"""
服務層

這個 package 包含純計算邏輯，不負責狀態轉換：
- ValidationService：外部輸入（username、房間 ID、變數集合）的格式檢查
"""
