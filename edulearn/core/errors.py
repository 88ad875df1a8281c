from typing import Optional


class EduLearnError(Exception):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(EduLearnError):
    status_code = 404


class FileMissingError(NotFoundError):
    pass


class ValidationFailedError(EduLearnError):
    status_code = 400


class ConflictError(ValidationFailedError):
    """Unique slug or email already taken."""


class IngestionError(EduLearnError):
    """Bulk import stopped partway; everything before the failure stays committed."""

    def __init__(self, detail: str, results: Optional[list] = None):
        super().__init__(detail)
        self.results = results or []
