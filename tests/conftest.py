import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault("TESTING", "true")
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.constants import RoleEnum, StageEnum, STAGE_LEVELS, CompetencyAreaEnum
from app.core.database import Base
from app.core.security import create_access_token
from app.models.user import User
from app.models.question import Question
from app.models.test_attempt import TestAttempt  # noqa: F401
from app.models.attempt_answer import AttemptAnswer  # noqa: F401
from app.utils import deps as deps_utils
from tests.helpers.clock import FakeClock
import main


@pytest.fixture(scope="function")
def database_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()

@pytest.fixture(scope="function")
def db_session(database_engine):
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=database_engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()

@pytest.fixture(scope="function")
def fake_clock():
    return FakeClock()

@pytest.fixture(scope="function")
def client(db_session, fake_clock):
    main.app.dependency_overrides[deps_utils.get_db] = lambda: db_session
    main.app.dependency_overrides[deps_utils.get_transactional_db] = lambda: db_session
    main.app.dependency_overrides[deps_utils.get_clock] = lambda: fake_clock
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()

@pytest.fixture
def user_factory(db_session):
    counter = {"n": 0}

    def _user_factory(level=None, can_retake=True, role=RoleEnum.STUDENT, is_active=True):
        counter["n"] += 1
        user = User(
            full_name=f"Test {role.value} {counter['n']}",
            email=f"{role.value}-{counter['n']}@stagecert.org",
            role=role,
            is_active=is_active,
            current_level=level,
            can_retake=can_retake,
        )
        db_session.add(user)
        db_session.flush()
        return user
    return _user_factory

@pytest.fixture
def auth_headers():
    def _auth_headers(user: User):
        token = create_access_token(user_id=user.id, email=user.email)
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers

@pytest.fixture
def question_factory(db_session):
    """Create active questions for a stage; option ``i % option_count`` is correct."""
    def _question_factory(stage=StageEnum.STAGE_1, count=None, option_count=4, is_active=True):
        count = settings.QUESTIONS_PER_TEST if count is None else count
        stage = StageEnum(stage)
        questions = []
        for i in range(count):
            correct = i % option_count
            question = Question(
                title=f"Stage {int(stage)} question {i + 1}",
                prompt=f"Which option is correct for question {i + 1}?",
                options=[
                    {"text": f"Option {chr(65 + o)}", "is_correct": o == correct}
                    for o in range(option_count)
                ],
                stage=int(stage),
                level=STAGE_LEVELS[stage][i % 2],
                competency_area=CompetencyAreaEnum.DIGITAL_LITERACY,
                is_active=is_active,
            )
            db_session.add(question)
            questions.append(question)
        db_session.flush()
        return questions
    return _question_factory
