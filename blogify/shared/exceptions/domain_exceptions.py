"""
Domain Exceptions

Исключения доменного слоя.
"""


class DomainException(Exception):
    """Базовое исключение домена."""
    pass


class DomainValidationError(DomainException):
    """Ошибка валидации доменной сущности (до обращения к бэкенду)."""
    pass


class EntityNotFoundError(DomainException):
    """Сущность не найдена."""
    pass


class BusinessRuleViolation(DomainException):
    """Нарушение бизнес-правила."""
    pass


class NotAuthenticatedError(DomainException):
    """Нет текущего пользователя — защищённый раздел недоступен."""
    pass


class SaveInProgressError(DomainException):
    """Повторная отправка формы, пока предыдущее сохранение не завершено."""
    pass
