"""Flask REST API exposing the in-memory expense ledger."""

from __future__ import annotations

from typing import Any, Dict, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from common.config import Settings
from common.exceptions import RecordNotFoundError, ValidationError
from common.services import SynchronizedLedger
from common.validators import parse_amount, validate_description, validate_month


def create_app(
    ledger: Optional[SynchronizedLedger] = None, settings: Optional[Settings] = None
) -> Flask:
    app = Flask(__name__)
    settings = settings or Settings.from_env()

    if settings.is_dev:
        CORS(app, resources={r"/*": {"origins": "*"}}, supports_credentials=True)
    elif settings.allowed_origins:
        CORS(app, resources={r"/*": {"origins": settings.allowed_origins}}, supports_credentials=True)
    else:
        CORS(app)

    ledger = ledger if ledger is not None else SynchronizedLedger()

    def _success(payload: Any, status: int = 200):
        if status == 204:
            return ("", status)
        return jsonify(payload), status

    def _handle_error(exc: Exception, status: int, message: str):
        app.logger.error("%s: %s", message, exc)
        return jsonify({"error": message, "details": str(exc)}), status

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return _handle_error(exc, 400, "Validation error")

    @app.errorhandler(RecordNotFoundError)
    def handle_not_found(exc: RecordNotFoundError):
        return _handle_error(exc, 404, "Record not found")

    def _json_body() -> Dict[str, Any]:
        if not request.is_json:
            raise ValidationError("Request content must be application/json")
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Malformed JSON body")
        return data

    @app.get("/expenses")
    def list_expenses():
        expenses = ledger.list()
        total = sum((expense.amount for expense in expenses), 0.0)
        return _success({
            "items": [expense.to_dict() for expense in expenses],
            "total": f"{total:.2f}",
        })

    @app.post("/expenses")
    def create_expense():
        payload = _json_body()
        description = validate_description(payload.get("description"))
        amount = parse_amount(payload.get("amount"))
        expense_id = ledger.add(description, amount)
        expense = ledger.get(expense_id)
        if expense is None:
            raise RecordNotFoundError(f"Expense {expense_id} not found")
        return _success(expense.to_dict(), 201)

    @app.get("/expenses/<int:expense_id>")
    def get_expense(expense_id: int):
        expense = ledger.get(expense_id)
        if expense is None:
            raise RecordNotFoundError(f"Expense {expense_id} not found")
        return _success(expense.to_dict())

    @app.delete("/expenses/<int:expense_id>")
    def delete_expense(expense_id: int):
        if not ledger.delete(expense_id):
            raise RecordNotFoundError(f"Expense {expense_id} not found")
        return _success({}, 204)

    @app.get("/summary")
    def summary():
        month = validate_month(request.args.get("month") or 0)
        total = ledger.summarize(month)
        return _success({"month": month, "total": f"{total:.2f}"})

    return app
