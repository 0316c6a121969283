from typing import Any


def message_response(message: str, **extra: Any) -> dict:
    return {"message": message, **extra}


def error_response(message: str, error: Any = None) -> dict:
    body: dict = {"message": message}
    if error is not None:
        body["error"] = error
    return body
