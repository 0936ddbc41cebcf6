import yaml
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from roombook.infrastructure.config import settings
from roombook.infrastructure.database import Base, engine
from roombook.infrastructure.logging_config import setup_logging
from roombook.presentation.routers import router

setup_logging(settings.log_level)

app = FastAPI(title="roombook")


# Use the contractual schema
def custom_openapi():
    with open(settings.openapi_path) as f:
        return yaml.safe_load(f)


def _format_validation_errors(errors) -> str:
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        field = ".".join(loc)
        parts.append(f"{field}: {err['msg']}" if field else err["msg"])
    return "; ".join(parts)


@app.exception_handler(RequestValidationError)
async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Malformed request bodies are client errors answered with 400 and a `message`, like every other failure.
    """
    return JSONResponse(status_code=400, content={"message": _format_validation_errors(exc.errors())})


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


app.openapi = custom_openapi
Base.metadata.create_all(bind=engine)
app.include_router(router)
