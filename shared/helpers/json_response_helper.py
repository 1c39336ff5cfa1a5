from fastapi import HTTPException


def error_response(message: str, http_status: int = 400):
    raise HTTPException(status_code=http_status, detail=message)


def not_found(resource: str):
    return error_response(message=f"{resource} not found", http_status=404)


def invalid_id(resource: str):
    return error_response(message=f"Invalid {resource} ID", http_status=400)
