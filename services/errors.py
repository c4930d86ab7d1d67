# services/errors.py


class ContentError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ContentError):
    status_code = 400


class NotFoundError(ContentError):
    status_code = 404
