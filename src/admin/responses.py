from dataclasses import asdict

from fastapi.responses import JSONResponse

from src.admin.dtos import ActionFailure, ActionResult


def action_response(result: ActionResult) -> JSONResponse:
    """Render a form action result for the page: 200 on success, the failure status otherwise."""
    if isinstance(result, ActionFailure):
        return JSONResponse(status_code=result.status_code, content={"error": result.error})
    return JSONResponse(status_code=200, content=asdict(result))
