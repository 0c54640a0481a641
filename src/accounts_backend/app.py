# src/accounts_backend/app.py
import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from pymongo.database import Database
from werkzeug.exceptions import HTTPException

from .db import connect, log_level
from .errors import AccountError, handle_account_error, handle_http_exception, handle_generic_exception, json_error
from .repository import user_repo
from .services.account_service import AccountService

logger = logging.getLogger('FLASK_APP')

SIGNUP_FIELDS = (
    "username", "firstname", "lastname", "gender", "birthdate",
    "region", "province", "city", "barangay", "email", "password",
)

def configure_logging():
    logging.basicConfig(level=log_level(), format='%(asctime)s - %(levelname)s - %(threadName)s - %(message)s')
    logging.getLogger('pymongo').setLevel(logging.WARNING)
    logging.getLogger('pymongo.server_monitoring').setLevel(logging.WARNING)

def create_app(db: Optional[Database] = None, service: Optional[AccountService] = None) -> Flask:
    """
    Thin JSON adapter over AccountService. Parses bodies, calls the service,
    and maps typed errors to status codes; it issues no sessions or tokens.
    """
    app = Flask(__name__)
    CORS(app)

    if service is None:
        if db is None:
            db = connect()
            user_repo.ensure_indexes(db)
        service = AccountService(db)
    app.config["ACCOUNT_SERVICE"] = service

    # --- Error Handlers ---
    @app.errorhandler(AccountError)
    def account_error(e): return handle_account_error(e)
    @app.errorhandler(HTTPException)
    def http_error(e): return handle_http_exception(e)
    @app.errorhandler(Exception)
    def unhandled_exception(e): return handle_generic_exception(e)

    # --- Authentication ---
    @app.route("/signup", methods=["POST"])
    def signup():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            payload, status = json_error("Invalid JSON body", 400)
            return jsonify(payload), status
        user = service.signup(*(data.get(field) for field in SIGNUP_FIELDS))
        return jsonify({"message": "User registered successfully!", "user": user}), 201

    @app.route("/login", methods=["POST"])
    def login():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            payload, status = json_error("Invalid JSON body", 400)
            return jsonify(payload), status
        user = service.login(data.get("identifier"), data.get("password"))
        return jsonify({"message": "Login successful!", "user": user}), 200

    # --- Health Check ---
    @app.route("/")
    def health(): return jsonify({"status": "Backend is running!"}), 200

    return app

def main():
    configure_logging()
    app = create_app()
    logger.info("Starting Flask server on http://localhost:8000 ...")
    app.run(host="0.0.0.0", port=8000)

if __name__ == "__main__":
    main()
