import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from certificate_service.core.config import LOG_LEVEL
from certificate_service.core.exceptions import CertificateServiceError, MethodNotAllowedError
from certificate_service.core.utils import isoformat_z, utc_now
from certificate_service.routers import certificates

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Mock Certificate API",
    version="1.0.0",
    description="Mock digital certificates backed by a mock NFT reference"
)

app.include_router(certificates.router)


@app.exception_handler(CertificateServiceError)
async def certificate_service_error_handler(request: Request, exc: CertificateServiceError):
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=exc.headers
    )


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Any method other than POST on the certificates endpoint"""
    if exc.status_code == 405 and request.url.path.rstrip("/") == certificates.CERTIFICATES_PATH:
        return await certificate_service_error_handler(request, MethodNotAllowedError())

    return await http_exception_handler(request, exc)


@app.get('/health', tags=["health"])
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": isoformat_z(utc_now())
    }


@app.get("/", tags=["root"])
async def root():
    """Root endpoint"""
    return {
        "message": "Mock Certificate API",
        "docs": "/docs",
        "health": "/health"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
