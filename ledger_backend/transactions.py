# ledger_backend/transactions.py
import logging
import sqlite3

from flask import Blueprint, jsonify, request

from .db import get_store
from .models import Transaction, json_object
from .security import token_required, token_required_if

logger = logging.getLogger("ledger-backend")

bp = Blueprint("transactions", __name__, url_prefix="/transactions")

LIST_LIMIT = 10

# read/update/delete stay open unless the whole ledger is locked down
gated = token_required_if("PROTECT_ALL_TRANSACTION_ROUTES")


def _payload():
    return json_object(request.get_json(silent=True))


@bp.route("", methods=["POST"])
@token_required
def add_transaction():
    values = Transaction.values_from_payload(_payload())

    try:
        tx_id = get_store().execute_db(
            "INSERT INTO transactions (type, category, amount, date, description) VALUES (?, ?, ?, ?, ?)",
            values
        )
    except sqlite3.Error as e:
        logger.exception(f"Error creating transaction: {e}")
        return "Internal Server Error", 500

    logger.info(f"Transaction {tx_id} created")
    return f"Created new Transaction with ID: {tx_id}"


@bp.route("", methods=["GET"])
@gated
def list_transactions():
    # no ORDER BY: rows come back in whatever order the engine yields them
    rows = get_store().query_db(f"SELECT * FROM transactions LIMIT {LIST_LIMIT}")
    return jsonify([Transaction.from_row(r).to_dict() for r in rows])


@bp.route("/<int:tx_id>", methods=["GET"])
@gated
def get_transaction(tx_id):
    row = get_store().query_db("SELECT * FROM transactions WHERE id = ?", (tx_id,), one=True)
    if row is None:
        return "", 200
    return jsonify(Transaction.from_row(row).to_dict())


@bp.route("/<int:tx_id>", methods=["PUT"])
@gated
def update_transaction(tx_id):
    values = Transaction.values_from_payload(_payload())

    try:
        changes = get_store().update_db(
            """UPDATE transactions
            SET type = ?, category = ?, amount = ?, date = ?, description = ?
            WHERE id = ?""",
            values + (tx_id,)
        )
    except sqlite3.Error as e:
        logger.exception(f"Error updating transaction: {e}")
        return "Internal Server Error", 404

    if changes == 0:
        return "Transaction not found", 404
    return "Transaction Updated Successfully"


@bp.route("/<int:tx_id>", methods=["DELETE"])
@gated
def delete_transaction(tx_id):
    changes = get_store().update_db("DELETE FROM transactions WHERE id = ?", (tx_id,))
    if changes:
        logger.info(f"Transaction {tx_id} deleted")
    return "Transaction Deleted Successfully"
