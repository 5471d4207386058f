class TaskApiException(Exception):
    def __init__(self, message: str, status: int | None = None):
        self.status = status
        super().__init__(message)
