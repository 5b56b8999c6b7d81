"""API integration tests for the LIFE OS ledger service."""

from decimal import Decimal

from fastapi.testclient import TestClient

from lifeos.core.errors import OracleUnavailableError
from tests.helpers import StubChatAgent, StubOracle

HTTP_200_OK = 200
HTTP_201_CREATED = 201
HTTP_400_BAD_REQUEST = 400
HTTP_401_UNAUTHORIZED = 401
HTTP_502_BAD_GATEWAY = 502

ALICE = {"X-User-Id": "alice"}
SWIGGY_SMS = "Rs.150.00 debited from your A/c XXXX for Swiggy. Ref No. 123456789. Avl Bal Rs. 5000.00."
PAYTM_SMS = "Your A/c XXXX is credited with Rs. 2000.00 from PAYTM. UPI Ref 987654321."


def test_health(client: TestClient) -> None:
    """Test the /health endpoint returns status ok."""
    response = client.get("/health")
    if response.status_code != HTTP_200_OK:
        msg = f"Expected status {HTTP_200_OK}, got {response.status_code}"
        raise AssertionError(msg)
    if response.json() != {"status": "ok"}:
        msg = f"Expected response {{'status': 'ok'}}, got {response.json()}"
        raise AssertionError(msg)


def test_scalar_docs(client: TestClient) -> None:
    """Test the /scalar endpoint returns OpenAPI or Swagger docs."""
    response = client.get("/scalar")
    if response.status_code != HTTP_200_OK:
        msg = f"Expected status {HTTP_200_OK}, got {response.status_code}"
        raise AssertionError(msg)
    if not ("openapi" in response.text or "swagger" in response.text):
        msg = "Expected 'openapi' or 'swagger' in response text"
        raise AssertionError(msg)


def test_create_expense(client: TestClient) -> None:
    """Posting an SMS returns the stored, categorized transaction."""
    response = client.post("/expenses", json={"sms_text": SWIGGY_SMS}, headers=ALICE)
    if response.status_code != HTTP_201_CREATED:
        msg = f"Expected status {HTTP_201_CREATED}, got {response.status_code}: {response.text}"
        raise AssertionError(msg)
    body = response.json()
    if Decimal(body["amount"]) != Decimal("150.00"):
        msg = f"Expected amount 150.00, got {body['amount']}"
        raise AssertionError(msg)
    expected = {"direction": "Debit", "counterpart": "Swiggy", "category": "Food & Dining", "owner_id": "alice"}
    actual = {key: body[key] for key in expected}
    if actual != expected:
        msg = f"Expected {expected}, got {actual}"
        raise AssertionError(msg)
    if body["raw_text"] != SWIGGY_SMS or not body["recorded_at"]:
        msg = "Expected the raw SMS and a server timestamp"
        raise AssertionError(msg)


def test_list_expenses_newest_first(client: TestClient) -> None:
    """Transactions come back newest first and only for the caller."""
    client.post("/expenses", json={"sms_text": SWIGGY_SMS}, headers=ALICE)
    client.post("/expenses", json={"sms_text": PAYTM_SMS}, headers=ALICE)
    client.post("/expenses", json={"sms_text": SWIGGY_SMS}, headers={"X-User-Id": "bob"})
    response = client.get("/expenses", headers=ALICE)
    if response.status_code != HTTP_200_OK:
        msg = f"Expected status {HTTP_200_OK}, got {response.status_code}"
        raise AssertionError(msg)
    counterparts = [item["counterpart"] for item in response.json()]
    if counterparts != ["PAYTM", "Swiggy"]:
        msg = f"Expected ['PAYTM', 'Swiggy'], got {counterparts}"
        raise AssertionError(msg)
    if response.json()[0]["direction"] != "Credit":
        msg = "Expected the PAYTM transaction to be a credit"
        raise AssertionError(msg)


def test_expense_requires_owner(client: TestClient) -> None:
    """Requests without X-User-Id are rejected."""
    for response in (client.post("/expenses", json={"sms_text": SWIGGY_SMS}), client.get("/expenses")):
        if response.status_code != HTTP_401_UNAUTHORIZED:
            msg = f"Expected status {HTTP_401_UNAUTHORIZED}, got {response.status_code}"
            raise AssertionError(msg)


def test_blank_expense_is_rejected(client: TestClient) -> None:
    """Blank SMS text is a client error and nothing is stored."""
    response = client.post("/expenses", json={"sms_text": "  "}, headers=ALICE)
    if response.status_code != HTTP_400_BAD_REQUEST:
        msg = f"Expected status {HTTP_400_BAD_REQUEST}, got {response.status_code}"
        raise AssertionError(msg)
    if client.get("/expenses", headers=ALICE).json() != []:
        msg = "Expected no stored transactions"
        raise AssertionError(msg)


def test_create_plan(client: TestClient, oracle: StubOracle) -> None:
    """Posting planning text stores the model's schedule."""
    response = client.post("/plans", json={"plan_input": "Exam prep at 9, call at 11:30, run later"}, headers=ALICE)
    if response.status_code != HTTP_201_CREATED:
        msg = f"Expected status {HTTP_201_CREATED}, got {response.status_code}: {response.text}"
        raise AssertionError(msg)
    schedule = response.json()["parsed_schedule"]
    if [item["time"] for item in schedule] != ["Tomorrow 9:00 AM", "Tomorrow 11:30 AM", "Evening"]:
        msg = f"Unexpected schedule {schedule}"
        raise AssertionError(msg)
    if len(oracle.calls) != 1:
        msg = f"Expected one model call, got {len(oracle.calls)}"
        raise AssertionError(msg)


def test_unparsable_plan_is_stored_with_error_payload(client: TestClient, oracle: StubOracle) -> None:
    """A broken model answer is still a successful submission, stored as an error payload."""
    oracle.reply = '[{"time": "9 AM", "description": "Exam'
    response = client.post("/plans", json={"plan_input": "Exam at 9"}, headers=ALICE)
    if response.status_code != HTTP_201_CREATED:
        msg = f"Expected status {HTTP_201_CREATED}, got {response.status_code}"
        raise AssertionError(msg)
    schedule = response.json()["parsed_schedule"]
    if schedule.get("error") is not True or schedule.get("raw") != oracle.reply:
        msg = f"Expected an error payload with the raw output, got {schedule}"
        raise AssertionError(msg)
    stored = client.get("/plans", headers=ALICE).json()
    if len(stored) != 1 or stored[0]["parsed_schedule"]["raw"] != oracle.reply:
        msg = f"Expected the error payload to be stored, got {stored}"
        raise AssertionError(msg)


def test_repeated_plans_are_listed_newest_first(client: TestClient) -> None:
    """The same text submitted twice yields two plans, newest first."""
    first = client.post("/plans", json={"plan_input": "Gym at 7"}, headers=ALICE).json()
    second = client.post("/plans", json={"plan_input": "Gym at 7"}, headers=ALICE).json()
    ids = [plan["id"] for plan in client.get("/plans", headers=ALICE).json()]
    if ids != [second["id"], first["id"]]:
        msg = f"Expected [{second['id']}, {first['id']}], got {ids}"
        raise AssertionError(msg)


def test_plan_oracle_failure(client: TestClient, oracle: StubOracle) -> None:
    """An unreachable model is a gateway error and no plan is stored."""
    oracle.error = OracleUnavailableError("Groq API call failed: connection refused")
    response = client.post("/plans", json={"plan_input": "Gym at 7"}, headers=ALICE)
    if response.status_code != HTTP_502_BAD_GATEWAY:
        msg = f"Expected status {HTTP_502_BAD_GATEWAY}, got {response.status_code}"
        raise AssertionError(msg)
    if "connection refused" not in response.json()["detail"]:
        msg = f"Expected the upstream error in the detail, got {response.json()}"
        raise AssertionError(msg)
    if client.get("/plans", headers=ALICE).json() != []:
        msg = "Expected no stored plans"
        raise AssertionError(msg)


def test_plan_input_errors(client: TestClient) -> None:
    """Blank text is a bad request and a missing owner is unauthorized."""
    blank = client.post("/plans", json={"plan_input": ""}, headers=ALICE)
    if blank.status_code != HTTP_400_BAD_REQUEST:
        msg = f"Expected status {HTTP_400_BAD_REQUEST}, got {blank.status_code}"
        raise AssertionError(msg)
    anonymous = client.post("/plans", json={"plan_input": "Gym at 7"})
    if anonymous.status_code != HTTP_401_UNAUTHORIZED:
        msg = f"Expected status {HTTP_401_UNAUTHORIZED}, got {anonymous.status_code}"
        raise AssertionError(msg)


def test_chat(client: TestClient, chat_agent: StubChatAgent) -> None:
    """The chat relay returns the assistant reply and rejects empty conversations."""
    payload = {"messages": [{"role": "user", "content": "Plan my Sunday"}]}
    response = client.post("/chat", json=payload, headers=ALICE)
    if response.status_code != HTTP_200_OK or response.json() != {"response": "You said: Plan my Sunday"}:
        msg = f"Unexpected chat response {response.status_code}: {response.text}"
        raise AssertionError(msg)
    if len(chat_agent.calls) != 1:
        msg = "Expected one chat call"
        raise AssertionError(msg)
    empty = client.post("/chat", json={"messages": []}, headers=ALICE)
    if empty.status_code != HTTP_400_BAD_REQUEST:
        msg = f"Expected status {HTTP_400_BAD_REQUEST}, got {empty.status_code}"
        raise AssertionError(msg)
