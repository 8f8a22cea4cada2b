from typing import List
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session

from app.core.clock import Clock
from app.schemas.response import APIResponse
from app.schemas.test_attempt import (
    AnswerAck, AnswerSubmit, AvailableTests, StartTestRequest, StartedTest,
    TestAttemptSummary, TestResult, TestSessionView,
)
from app.services.test_session import test_session_service
from app.models.user import User
from app.utils import deps

router = APIRouter()


@router.get("/available", response_model=APIResponse[AvailableTests])
def get_available_tests(
    *,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user)
):
    available = test_session_service.get_available_tests(db, user_id=current_user.id)
    return APIResponse(message="Available tests retrieved successfully", data=available)


@router.post("/start", response_model=APIResponse[StartedTest], status_code=status.HTTP_201_CREATED)
def start_test(
    *,
    db: Session = Depends(deps.get_transactional_db),
    payload: StartTestRequest,
    current_user: User = Depends(deps.get_current_user),
    clock: Clock = Depends(deps.get_clock)
):
    attempt = test_session_service.start_attempt(db, user_id=current_user.id, stage=payload.stage, clock=clock)
    started = test_session_service.describe_started(db, attempt)
    return APIResponse(message="Test session started successfully", data=started)


@router.get("/current", response_model=APIResponse[TestSessionView])
def get_current_test(
    *,
    db: Session = Depends(deps.get_transactional_db),
    current_user: User = Depends(deps.get_current_user),
    clock: Clock = Depends(deps.get_clock)
):
    view = test_session_service.get_current_attempt(db, user_id=current_user.id, clock=clock)
    return APIResponse(message="Current test session retrieved successfully", data=view)


@router.get("/session/{session_id}", response_model=APIResponse[TestSessionView])
def get_test_session(
    *,
    db: Session = Depends(deps.get_transactional_db),
    session_id: int,
    current_user: User = Depends(deps.get_current_user),
    clock: Clock = Depends(deps.get_clock)
):
    view = test_session_service.get_session_view(db, attempt_id=session_id, user_id=current_user.id, clock=clock)
    return APIResponse(message="Test session retrieved successfully", data=view)


@router.post("/session/{session_id}/answer", response_model=APIResponse[AnswerAck])
def submit_answer(
    *,
    db: Session = Depends(deps.get_transactional_db),
    session_id: int,
    answer_in: AnswerSubmit,
    current_user: User = Depends(deps.get_current_user),
    clock: Clock = Depends(deps.get_clock)
):
    ack = test_session_service.record_answer(
        db,
        attempt_id=session_id,
        user_id=current_user.id,
        question_id=answer_in.question_id,
        selected_option=answer_in.selected_option,
        time_spent=answer_in.time_spent,
        clock=clock
    )
    return APIResponse(message="Answer submitted successfully", data=ack)


@router.post("/session/{session_id}/submit", response_model=APIResponse[TestResult])
def submit_test(
    *,
    db: Session = Depends(deps.get_transactional_db),
    session_id: int,
    current_user: User = Depends(deps.get_current_user),
    clock: Clock = Depends(deps.get_clock)
):
    result = test_session_service.finalize(db, attempt_id=session_id, user_id=current_user.id, clock=clock)
    return APIResponse(message="Test completed successfully", data=result)


@router.get("/history", response_model=APIResponse[List[TestAttemptSummary]])
def get_test_history(
    *,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=100)
):
    attempts = test_session_service.get_history(db, user_id=current_user.id, skip=skip, limit=limit)
    return APIResponse(
        message="Test history retrieved successfully",
        data=[TestAttemptSummary.model_validate(a) for a in attempts]
    )
