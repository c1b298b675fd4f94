# ledger_backend/auth.py
import logging
import sqlite3

from flask import Blueprint, jsonify, request

from .db import get_store
from .models import User, json_object
from .security import hash_password, issue_token, verify_password

logger = logging.getLogger("ledger-backend")

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/users/", methods=["POST"])
def register():
    data = json_object(request.get_json(silent=True))
    username = data.get("username")
    name = data.get("name")
    password = data.get("password")

    if not all(isinstance(v, str) and v for v in (username, name, password)):
        return "Username, name and password are required", 400

    store = get_store()
    try:
        hashed_password = hash_password(password)

        db_user = store.query_db("SELECT * FROM users WHERE username = ?", (username,), one=True)
        if db_user is not None:
            return "User already exists", 400

        new_user_id = store.execute_db(
            "INSERT INTO users (username, name, password) VALUES (?, ?, ?)",
            (username, name, hashed_password)
        )
    except sqlite3.IntegrityError:
        # lost a race with a concurrent registration of the same name
        return "User already exists", 400
    except (sqlite3.Error, ValueError) as e:
        logger.exception(f"Error registering user: {e}")
        return "Internal Server Error", 500

    logger.info(f"Registered user {new_user_id}")
    return f"Created new user with ID: {new_user_id}", 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = json_object(request.get_json(silent=True))
    username = data.get("username")
    password = data.get("password")

    try:
        db_user = get_store().query_db("SELECT * FROM users WHERE username = ?", (username,), one=True)
    except sqlite3.Error as e:
        logger.exception(f"Error during login: {e}")
        return jsonify({"error": "Internal Server Error"}), 500

    if db_user is None:
        return jsonify({"error": "Invalid User"}), 400

    user = User.from_row(db_user)
    if not verify_password(password, user.password_hash):
        return jsonify({"error": "Invalid Password"}), 400

    jwt_token = issue_token(user.username)
    logger.info(f"User {user.id} logged in")
    return jsonify({"jwtToken": jwt_token})
