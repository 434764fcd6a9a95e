"""
Error types for the Pick'em application

The scoring engine itself never raises for out-of-range odds; these errors are
raised at the edges, when raw request or CLI input is turned into records.
"""


class AppError(Exception):
    """Base application error carrying an error code and HTTP status"""

    code = "APP_ERROR"
    status_code = 500

    def __init__(self, message, code=None, status_code=None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"error": self.message, "code": self.code}


class ValidationError(AppError):
    """Raised when user supplied input cannot be accepted"""

    code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(self, message, field=None):
        super().__init__(message)
        self.field = field

    def to_dict(self):
        data = super().to_dict()
        if self.field:
            data["field"] = self.field
        return data

