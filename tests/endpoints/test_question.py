from fastapi.testclient import TestClient

from app.core.constants import RoleEnum, StageEnum
from app.schemas.question import Question
from tests.helpers.asserts import api_call, answer_all
from tests.helpers.contract import validate_envelope, validate_error


def _payload(**overrides):
    payload = {
        "title": "File extensions",
        "prompt": "Which extension is used for a spreadsheet?",
        "options": [
            {"text": ".xlsx", "is_correct": True},
            {"text": ".mp3"},
            {"text": ".png"},
        ],
        "stage": 1,
        "level": "A1",
        "competency_area": "digital_literacy",
    }
    payload.update(overrides)
    return payload


class TestQuestionEndpoints:
    def test_admin_creates_question(self, client: TestClient, user_factory, auth_headers):
        admin = user_factory(role=RoleEnum.ADMIN)
        body = api_call(client, "POST", "/questions/", headers=auth_headers(admin), json=_payload(), expected_status=201)

        data = validate_envelope(body, Question)
        assert data["created_by"] == admin.id
        assert data["difficulty"] == "medium"
        assert data["is_active"] is True

    def test_student_cannot_create_question(self, client: TestClient, user_factory, auth_headers):
        student = user_factory()
        body = api_call(client, "POST", "/questions/", headers=auth_headers(student), json=_payload(), expected_status=403)
        validate_error(body, "FORBIDDEN")

    def test_question_needs_a_correct_option(self, client: TestClient, user_factory, auth_headers):
        admin = user_factory(role=RoleEnum.ADMIN)
        payload = _payload(options=[{"text": "a"}, {"text": "b"}])
        body = api_call(client, "POST", "/questions/", headers=auth_headers(admin), json=payload, expected_status=422)
        validate_error(body, "VALIDATION_ERROR")

    def test_question_option_count_bounds(self, client: TestClient, user_factory, auth_headers):
        admin = user_factory(role=RoleEnum.ADMIN)
        too_few = _payload(options=[{"text": "only", "is_correct": True}])
        too_many = _payload(options=[{"text": str(i), "is_correct": i == 0} for i in range(5)])
        api_call(client, "POST", "/questions/", headers=auth_headers(admin), json=too_few, expected_status=422)
        api_call(client, "POST", "/questions/", headers=auth_headers(admin), json=too_many, expected_status=422)

    def test_question_level_must_match_stage(self, client: TestClient, user_factory, auth_headers):
        admin = user_factory(role=RoleEnum.ADMIN)
        body = api_call(client, "POST", "/questions/", headers=auth_headers(admin), json=_payload(level="C1"), expected_status=422)
        validate_error(body, "VALIDATION_ERROR")

    def test_list_questions_by_stage(self, client: TestClient, user_factory, auth_headers, question_factory):
        admin = user_factory(role=RoleEnum.ADMIN)
        question_factory(StageEnum.STAGE_1, count=3)
        question_factory(StageEnum.STAGE_1, count=2, is_active=False)
        question_factory(StageEnum.STAGE_2, count=4)

        body = api_call(client, "GET", "/questions/?stage=1", headers=auth_headers(admin))
        questions = validate_envelope(body, Question)
        assert len(questions) == 5
        assert {q["stage"] for q in questions} == {1}

        body = api_call(client, "GET", "/questions/?stage=1&active_only=true", headers=auth_headers(admin))
        assert len(body["data"]) == 3

    def test_list_questions_requires_stage(self, client: TestClient, user_factory, auth_headers):
        admin = user_factory(role=RoleEnum.ADMIN)
        api_call(client, "GET", "/questions/", headers=auth_headers(admin), expected_status=422)

    def test_get_question_by_id(self, client: TestClient, user_factory, auth_headers, question_factory):
        admin = user_factory(role=RoleEnum.ADMIN)
        question = question_factory(StageEnum.STAGE_2, count=1)[0]

        body = api_call(client, "GET", f"/questions/{question.id}", headers=auth_headers(admin))
        data = validate_envelope(body, Question)
        assert data["id"] == question.id
        assert data["stage"] == 2

    def test_get_missing_question(self, client: TestClient, user_factory, auth_headers):
        admin = user_factory(role=RoleEnum.ADMIN)
        body = api_call(client, "GET", "/questions/31337", headers=auth_headers(admin), expected_status=404)
        validate_error(body, "QUESTION_NOT_FOUND")

    def test_update_question(self, client: TestClient, user_factory, auth_headers, question_factory):
        admin = user_factory(role=RoleEnum.ADMIN)
        question = question_factory(StageEnum.STAGE_1, count=1)[0]

        body = api_call(
            client, "PUT", f"/questions/{question.id}", headers=auth_headers(admin),
            json={"title": "Renamed", "level": "A2", "difficulty": "hard"}
        )
        data = validate_envelope(body, Question)
        assert data["title"] == "Renamed"
        assert data["level"] == "A2"
        assert data["difficulty"] == "hard"
        assert data["prompt"] == question.prompt

    def test_update_rejects_level_outside_stage(self, client: TestClient, user_factory, auth_headers, question_factory):
        admin = user_factory(role=RoleEnum.ADMIN)
        question = question_factory(StageEnum.STAGE_1, count=1)[0]

        body = api_call(
            client, "PUT", f"/questions/{question.id}", headers=auth_headers(admin),
            json={"stage": 3}, expected_status=422
        )
        validate_error(body, "VALIDATION_ERROR")

    def test_update_rejects_options_without_answer(self, client: TestClient, user_factory, auth_headers, question_factory):
        admin = user_factory(role=RoleEnum.ADMIN)
        question = question_factory(StageEnum.STAGE_1, count=1)[0]
        api_call(
            client, "PUT", f"/questions/{question.id}", headers=auth_headers(admin),
            json={"options": [{"text": "a"}, {"text": "b"}]}, expected_status=422
        )

    def test_delete_deactivates_question(self, client: TestClient, user_factory, auth_headers, question_factory):
        admin = user_factory(role=RoleEnum.ADMIN)
        question = question_factory(StageEnum.STAGE_1, count=1)[0]

        body = api_call(client, "DELETE", f"/questions/{question.id}", headers=auth_headers(admin))
        assert body["data"]["is_active"] is False

        body = api_call(client, "GET", f"/questions/{question.id}", headers=auth_headers(admin))
        assert body["data"]["is_active"] is False
        body = api_call(client, "GET", "/questions/?stage=1&active_only=true", headers=auth_headers(admin))
        assert body["data"] == []

    def test_student_cannot_edit_question(self, client: TestClient, user_factory, auth_headers, question_factory):
        student = user_factory()
        question = question_factory(StageEnum.STAGE_1, count=1)[0]
        api_call(client, "PUT", f"/questions/{question.id}", headers=auth_headers(student), json={"title": "x"}, expected_status=403)
        api_call(client, "DELETE", f"/questions/{question.id}", headers=auth_headers(student), expected_status=403)

    def test_editing_question_in_use_keeps_scores(self, client: TestClient, user_factory, auth_headers, question_factory):
        admin = user_factory(role=RoleEnum.ADMIN)
        student = user_factory()
        questions = question_factory(StageEnum.STAGE_1)
        correct_by_id = {q.id: i % 4 for i, q in enumerate(questions)}
        headers = auth_headers(student)

        session = api_call(client, "POST", "/tests/start", headers=headers, json={"stage": 1}, expected_status=201)["data"]
        answer_all(client, headers, session, correct=20, correct_by_id=correct_by_id)

        edited_id = session["questions"][0]["id"]
        flipped = [{"text": f"Option {chr(65 + o)}", "is_correct": o != correct_by_id[edited_id]} for o in range(4)]
        api_call(client, "PUT", f"/questions/{edited_id}", headers=auth_headers(admin), json={"options": flipped})

        result = api_call(client, "POST", f"/tests/session/{session['session_id']}/submit", headers=headers)["data"]
        assert result["score"] == 20

        api_call(client, "DELETE", f"/questions/{edited_id}", headers=auth_headers(admin))
        history = api_call(client, "GET", "/tests/history", headers=headers)["data"]
        assert history[0]["score"] == 20
        assert history[0]["percentage"] == 100.0
