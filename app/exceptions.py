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


class ImportFileError(ValidationError):
    """The uploaded document could not be read as a record array."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_IMPORT_FILE")


class ConflictError(AppError):
    def __init__(self, message: str):
        super().__init__(message, code="CONFLICT")


class UnauthorizedError(AppError):
    def __init__(self, message: str):
        super().__init__(message, code="UNAUTHORIZED")


class UnknownEntityKindError(AppError):
    def __init__(self, kind: str):
        super().__init__(f"No importer registered for '{kind}'", code="UNKNOWN_ENTITY_KIND")
