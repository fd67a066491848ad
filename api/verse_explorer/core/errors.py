"""
Error taxonomy for the verse analysis pipeline.

Every stage fails fast with exactly one of these exceptions. Callers turn
them into a user-visible message (CLI, session state) or an HTTP error
body (API).
"""

from enum import Enum

from fastapi import status


class ErrorKind(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    INVALID_ENDPOINT = "invalid_endpoint"
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_RESPONSE = "malformed_response"


class AnalysisError(Exception):
    """Base class for failures that abort a single verse query."""

    kind: ErrorKind
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    @property
    def user_message(self) -> str:
        return self.detail


class MissingCredential(AnalysisError):
    kind = ErrorKind.MISSING_CREDENTIAL
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, detail: str = "API Key not found.") -> None:
        super().__init__(detail)

    @property
    def user_message(self) -> str:
        return f"{self.detail} Check that GROQ_API_KEY is set in the environment or .env file."


class InvalidEndpoint(AnalysisError):
    kind = ErrorKind.INVALID_ENDPOINT
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    @property
    def user_message(self) -> str:
        return f"Invalid API URL. {self.detail}"


class TransportFailure(AnalysisError):
    kind = ErrorKind.TRANSPORT_FAILURE
    status_code = status.HTTP_502_BAD_GATEWAY

    @property
    def user_message(self) -> str:
        return f"Failed to reach the analysis service. Error: {self.detail}"


class MalformedResponse(AnalysisError):
    kind = ErrorKind.MALFORMED_RESPONSE
    status_code = status.HTTP_502_BAD_GATEWAY

    @property
    def user_message(self) -> str:
        return (
            "Failed to generate or parse analysis. Verses with complex punctuation "
            "(such as quotation marks) can cause the model to return invalid JSON."
            f"\n\nDecoding Error: {self.detail}"
        )
