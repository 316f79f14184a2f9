"""Domain errors raised by the analyzer, the stores and the query interpreter.

Each error carries the HTTP status it is reported with and a stable message
that ends up in the ``error`` field of the JSON response body.
"""


class StringAnalyzerError(Exception):
    status_code = 500
    message = "internal_server_error"

    def __init__(self, message=None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(StringAnalyzerError):
    status_code = 400
    message = "Invalid request body or missing 'value' field"


class InvalidInputError(ValidationError):
    status_code = 422
    message = "Invalid data type for 'value' (must be string)"


class ConflictError(StringAnalyzerError):
    status_code = 409
    message = "String already exists in the system"


class NotFoundError(StringAnalyzerError):
    status_code = 404
    message = "String does not exist in the system"


class UnparsableQueryError(StringAnalyzerError):
    status_code = 400
    message = "Unable to parse natural language query"
