# ledger_backend/security.py
"""
Password hashing and JWT handling.

Hashes come from werkzeug.security (salted, method/work factor taken from
PASSWORD_HASH_METHOD). Tokens are HS256 JWTs issued and checked through
flask_jwt_extended; every way a token can fail is answered with the same
401 body.
"""
from functools import wraps

from flask import current_app, g, jsonify
from flask_jwt_extended import (
    JWTManager, create_access_token, get_jwt_identity, verify_jwt_in_request
)
from werkzeug.security import check_password_hash, generate_password_hash

INVALID_TOKEN_MSG = "Invalid JWT Token"

jwt = JWTManager()


def hash_password(password, method=None):
    method = method or current_app.config.get("PASSWORD_HASH_METHOD", "scrypt")
    return generate_password_hash(password, method=method)


def verify_password(password, password_hash):
    if not isinstance(password, str) or not password_hash:
        return False
    return check_password_hash(password_hash, password)


def issue_token(username):
    # identity MUST be a string (PyJWT wants 'sub' as str)
    return create_access_token(identity=str(username), additional_claims={"username": username})


def _invalid_token(*_args):
    return jsonify(INVALID_TOKEN_MSG), 401


# missing header, bad signature, expired, malformed: all the same answer
jwt.unauthorized_loader(_invalid_token)
jwt.invalid_token_loader(_invalid_token)
jwt.expired_token_loader(_invalid_token)
jwt.revoked_token_loader(_invalid_token)
jwt.needs_fresh_token_loader(_invalid_token)
jwt.user_lookup_error_loader(_invalid_token)
jwt.token_verification_failed_loader(_invalid_token)


def _authenticate():
    verify_jwt_in_request()
    g.username = get_jwt_identity()


def token_required(fn):
    """Reject the request with 401 unless it carries a valid Bearer token."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        _authenticate()
        return fn(*args, **kwargs)
    return wrapper


def token_required_if(config_key):
    """Like token_required, but only when app.config[config_key] is truthy."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if current_app.config.get(config_key):
                _authenticate()
            return fn(*args, **kwargs)
        return wrapper
    return decorator
