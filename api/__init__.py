"""
API 層：提供給外部 dispatcher 的錯誤轉換
"""
