"""Error taxonomy for the question pipeline."""


class QuestionError(Exception):
    """Base for failures of a single fetch. `message` is safe to show the user."""

    # Prepended when the error is shown on screen
    display_prefix = "Error: "

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def display_message(self) -> str:
        return f"{self.display_prefix}{self.message}"


class EncodingError(QuestionError):
    """Request could not be built or serialized; nothing was sent."""

    display_prefix = ""


class TransportError(QuestionError):
    """Network failure: DNS, TLS, connect or timeout."""


class ServerError(QuestionError):
    """Non-2xx status from the vendor. Carries the code, never the body."""

    def __init__(self, status_code: int):
        super().__init__(
            f"The server could not process the request (Code: {status_code}). Please try again."
        )
        self.status_code = status_code


class DecodeError(QuestionError):
    """Response body was not valid JSON or did not match the schema."""


class EmptyResultError(QuestionError):
    """Response decoded fine but carried no choices."""

    display_prefix = ""

    def __init__(self, message: str = "No question found in Groq response."):
        super().__init__(message)


class FetchInProgressError(Exception):
    """A fetch was triggered while another one is still loading."""


class SecretsError(Exception):
    """The API credential could not be loaded. Fatal at startup."""
