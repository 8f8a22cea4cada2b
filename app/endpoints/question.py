from typing import List
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session

from app.core.constants import StageEnum
from app.crud.question import question as crud_question
from app.models.user import User
from app.schemas.question import Question, QuestionCreate, QuestionUpdate
from app.schemas.response import APIResponse
from app.services.question_bank import question_bank_service
from app.utils import deps

router = APIRouter()


@router.post("/", response_model=APIResponse[Question], status_code=status.HTTP_201_CREATED)
def create_question(
    *,
    db: Session = Depends(deps.get_transactional_db),
    question_in: QuestionCreate,
    admin: User = Depends(deps.require_admin)
):
    new_question = crud_question.create_with_creator(db, obj_in=question_in, created_by=admin.id)
    return APIResponse(message="Question created successfully", data=Question.model_validate(new_question))


@router.get("/", response_model=APIResponse[List[Question]])
def get_questions(
    *,
    db: Session = Depends(deps.get_db),
    stage: StageEnum,
    active_only: bool = Query(False),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=100),
    admin: User = Depends(deps.require_admin)
):
    questions = crud_question.get_by_stage(db, stage=stage, active_only=active_only, skip=skip, limit=limit)
    return APIResponse(message="Questions retrieved successfully", data=[Question.model_validate(q) for q in questions])


@router.get("/{question_id}", response_model=APIResponse[Question])
def get_question(
    *,
    db: Session = Depends(deps.get_db),
    question_id: int,
    admin: User = Depends(deps.require_admin)
):
    question = question_bank_service.get_question(db, question_id)
    return APIResponse(message="Question retrieved successfully", data=Question.model_validate(question))


@router.put("/{question_id}", response_model=APIResponse[Question])
def update_question(
    *,
    db: Session = Depends(deps.get_transactional_db),
    question_id: int,
    question_in: QuestionUpdate,
    admin: User = Depends(deps.require_admin)
):
    question = question_bank_service.update_question(db, question_id, question_in)
    return APIResponse(message="Question updated successfully", data=Question.model_validate(question))


@router.delete("/{question_id}", response_model=APIResponse[Question])
def deactivate_question(
    *,
    db: Session = Depends(deps.get_transactional_db),
    question_id: int,
    admin: User = Depends(deps.require_admin)
):
    question = question_bank_service.deactivate_question(db, question_id)
    return APIResponse(message="Question deactivated successfully", data=Question.model_validate(question))
