from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException


def form_error(form, status: int = 400):
    return jsonify(error="Invalid payload.", fields=form.errors), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return jsonify(error=exc.description), exc.code
