import os
import time

from fastapi import FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mangum import Mangum
from models import *
import analysis_service
from utils import logging

DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "Portuguese")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

MISSING_FIELDS_ERROR = "Word and sentence are required."
ANALYSIS_FAILED_ERROR = "Failed to process with AI."

# FASTAPI app and AWS Lambda handler
app = FastAPI(title="Web Reader API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
handler = Mangum(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = logging.set_request_id(request.headers.get("X-Request-ID"))

    start_time = time.time()
    logging.info(f"Incoming request: {request.method} {request.url.path}")

    try:
        response = await call_next(request)

        process_time = time.time() - start_time
        logging.info(f"Completed request: {request.method} {request.url.path} with {response.status_code} in {process_time:.2f} seconds")

        response.headers["X-Request-ID"] = request_id
        return response
    finally:
        logging.clear_request_id()

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logging.exception(f"Unhandled exception at {request.method} {request.url.path} - {str(exc)}")

    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error"},
    )

@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logging.warning(f"Rejected request body at {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": MISSING_FIELDS_ERROR},
    )


@app.post(
    "/analisar",
    response_model=AnalysisResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def analyze(req: AnalysisRequest):
    if not req.word or not req.sentence:
        raise HTTPException(status_code=400, detail=MISSING_FIELDS_ERROR)

    language = req.language or DEFAULT_LANGUAGE
    try:
        return analysis_service.analyze_word(req.word, req.sentence, language)
    except analysis_service.AnalysisError as e:
        logging.error(f"Analysis failed for \"{req.word}\": {str(e)}")
        return JSONResponse(status_code=500, content={"error": ANALYSIS_FAILED_ERROR})


@app.get("/languages", response_model=LanguageList)
async def get_languages():
    return LanguageList(languages=LANGUAGES)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "3001"))
    logging.info(f"Server running with {analysis_service.analysis.BEDROCK_MODEL_ID} on port {port}")
    uvicorn.run(app, host="0.0.0.0", port=port)
