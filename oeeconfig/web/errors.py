from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException

from oeeconfig.errors import ErrorKind, StoreError

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.PERMISSION_DENIED: 403,
    ErrorKind.PARSE_ERROR: 400,
    ErrorKind.IO_ERROR: 500,
}


def handle_store_error(err: StoreError):
    status = STATUS_BY_KIND.get(err.kind, 500)
    if status >= 500:
        current_app.logger.error("Error: %s (%s)", err.message, err.path, exc_info=err)
    else:
        current_app.logger.warning("%s: %s", err.kind.value, err.message)
    return jsonify({"message": err.message, "error": err.kind.value}), status


def handle_unexpected_error(err: Exception):
    if isinstance(err, HTTPException):
        return err
    current_app.logger.error("Error: %s", err, exc_info=err)
    return jsonify({"message": "Internal Server Error"}), 500


def register_error_handlers(app) -> None:
    app.register_error_handler(StoreError, handle_store_error)
    app.register_error_handler(Exception, handle_unexpected_error)
