class BookingSubmissionError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class AuthenticationRequiredError(Exception):
    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")
