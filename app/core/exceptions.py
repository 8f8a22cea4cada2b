"""Domain errors raised by the test session and progression engines.

Each error carries the HTTP status and machine-readable code the API layer
renders; the engines themselves never deal with responses.
"""
from typing import Any, Dict, Optional
from fastapi import status


class AssessmentError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "ASSESSMENT_ERROR"
    message: str = "The request could not be processed."

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)


class IneligibleStage(AssessmentError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "INELIGIBLE_STAGE"
    message = "You are not eligible to take this test stage."


class InsufficientQuestionPool(AssessmentError):
    status_code = status.HTTP_409_CONFLICT
    code = "INSUFFICIENT_QUESTION_POOL"
    message = "Not enough active questions are available for this test stage."


class AttemptNotFound(AssessmentError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "SESSION_NOT_FOUND"
    message = "Test session not found."


class SessionNotActive(AssessmentError):
    status_code = status.HTTP_409_CONFLICT
    code = "SESSION_NOT_ACTIVE"
    message = "Test session is not active."


class SessionExpired(AssessmentError):
    status_code = status.HTTP_410_GONE
    code = "SESSION_EXPIRED"
    message = "The time limit for this test session has elapsed."


class UnknownQuestion(AssessmentError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "UNKNOWN_QUESTION"
    message = "Question does not belong to this test session."


class InvalidOption(AssessmentError):
    status_code = 422
    code = "VALIDATION_ERROR"
    message = "Selected option is out of range for this question."


class UserNotFound(AssessmentError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "USER_NOT_FOUND"
    message = "User not found."


class NoActiveSession(AssessmentError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NO_ACTIVE_SESSION"
    message = "No active test session found."


class QuestionNotFound(AssessmentError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "QUESTION_NOT_FOUND"
    message = "Question not found."


class InvalidQuestion(AssessmentError):
    status_code = 422
    code = "VALIDATION_ERROR"
    message = "Question update is invalid."
