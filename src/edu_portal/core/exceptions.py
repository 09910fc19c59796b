"""
异常定义 - 请求边界统一转换为 {"success": false, "error": ...}
"""


class PortalError(Exception):
    """业务异常基类"""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PortalError):
    """调用方输入缺失或格式错误"""

    status_code = 400


class UnsupportedOperationError(PortalError):
    """尚未实现的功能（如文件上传）"""

    status_code = 400


class NotFoundError(PortalError):
    """引用的记录不存在"""

    status_code = 404


class StoreError(PortalError):
    """
    持久化层失败

    message 只返回给调用方通用描述，真实原因通过异常链 (__cause__) 记录到日志
    """

    status_code = 500
