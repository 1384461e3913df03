class AppError(Exception):
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class NotFoundError(AppError):
    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} '{resource_id}' not found", code="NOT_FOUND")


class ValidationError(AppError):
    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code=code)


class InvalidInputError(ValidationError):
    def __init__(self, message: str):
        super().__init__(message, code="INPUT_ERROR")


class MappingValidationError(ValidationError):
    def __init__(self, messages: list[str]):
        self.messages = messages
        super().__init__(
            f"Please map these required fields: {'; '.join(messages)}", code="MAPPING_ERROR"
        )


class ConflictError(AppError):
    def __init__(self, message: str):
        super().__init__(message, code="CONFLICT")


class ImportFailedError(AppError):
    """The record writer could not be reached or answered with something unusable."""

    def __init__(self, message: str):
        super().__init__(message, code="IMPORT_FAILED")
