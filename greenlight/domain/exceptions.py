from typing import Dict, Optional


class DomainError(Exception):
    pass


class ValidationError(DomainError):
    def __init__(self, errors: Dict[str, str]):
        super().__init__("failed validation")
        self.errors = errors


class NotFoundError(DomainError):
    pass


class EditConflictError(DomainError):
    pass


class FormatError(DomainError, ValueError):
    pass


class BackendError(DomainError):
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
