from .errors import ErrorCode, create_error_content

__all__ = ['ErrorCode', 'create_error_content']
