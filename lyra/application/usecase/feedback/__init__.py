"""Author feedback use cases."""

from lyra.application.usecase.feedback.list_contacts import (
    ListContactsRequest,
    ListContactsResponse,
    ListContactsUseCase,
)
from lyra.application.usecase.feedback.list_feedback_readers import (
    ListFeedbackReadersRequest,
    ListFeedbackReadersResponse,
    ListFeedbackReadersUseCase,
)

__all__ = [
    "ListContactsRequest",
    "ListContactsResponse",
    "ListContactsUseCase",
    "ListFeedbackReadersRequest",
    "ListFeedbackReadersResponse",
    "ListFeedbackReadersUseCase",
]
