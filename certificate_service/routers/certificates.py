import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError as PydanticValidationError

from certificate_service.core.certificates import generate_x509_certificate
from certificate_service.core.config import (
    CONTRACT_ADDRESS,
    ISSUER_NAME,
    ROOT,
    VALIDITY_DAYS,
)
from certificate_service.core.exceptions import (
    CertificateServiceError,
    InternalError,
    ValidationError,
)
from certificate_service.core.models import (
    CertificateRecord,
    CertificateRequest,
    CertificateResponse,
    CertificateSubjectInput,
    ErrorResponse,
    NftRecord,
)
from certificate_service.core.security import get_api_key, verify_api_key
from certificate_service.core.utils import (
    add_calendar_year,
    generate_mock_serial_number,
    generate_mock_token_id,
    generate_mock_transaction_hash,
    isoformat_z,
    utc_now,
)

logger = logging.getLogger(__name__)

CERTIFICATES_PATH = f"{ROOT}/certificates"

router = APIRouter(
    prefix=CERTIFICATES_PATH,
    tags=["certificates"]
)


def format_validation_errors(exc: PydanticValidationError) -> list[str]:
    details = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        message = "field is required" if error["type"] == "missing" else error["msg"]
        details.append(f"{field}: {message}")

    return details


def parse_certificate_request(body: dict) -> CertificateRequest:
    try:
        return CertificateRequest.model_validate(body)
    except PydanticValidationError as e:
        details = format_validation_errors(e)
        logger.warning(f"Invalid certificate request: {details}")
        raise ValidationError(details=details)


def build_certificate_response(data: CertificateRequest) -> CertificateResponse:
    valid_from = utc_now()
    valid_to = add_calendar_year(valid_from)

    # Builder keeps its own 365 days window, one day short of
    # valid_to when the year crosses a 29 February
    fields = generate_x509_certificate(
        CertificateSubjectInput(
            common_name=data.personal_info.name,
            document_number=data.personal_info.dni,
        ),
        data.public_key,
        VALIDITY_DAYS,
        now=valid_from,
    )

    return CertificateResponse(
        nft=NftRecord(
            token_id=generate_mock_token_id(),
            contract_address=CONTRACT_ADDRESS,
            transaction_hash=generate_mock_transaction_hash(),
        ),
        certificate=CertificateRecord(
            serial_number=generate_mock_serial_number(),
            subject=data.personal_info.name,
            issuer=ISSUER_NAME,
            valid_from=isoformat_z(valid_from),
            valid_to=isoformat_z(valid_to),
            pem_data=fields.to_text(),
        ),
    )


@router.post(
    "",
    response_model=CertificateResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    }
)
async def create_certificate(
    request: Request,
    api_key: str = Depends(get_api_key)
):
    """Issues a mock certificate and its NFT reference"""
    try:
        body = await request.json()
        if not isinstance(body, dict):
            raise TypeError("Request body must be a JSON object")

        verify_api_key(body.get("apiKey"), api_key)
        data = parse_certificate_request(body)
        response = build_certificate_response(data)

    except CertificateServiceError:
        raise
    except Exception as e:
        logger.exception(f"Error processing certificate request: {e}")
        raise InternalError(details=[str(e)])

    logger.info(
        f"Certificate {response.certificate.serial_number} issued "
        f"for {response.certificate.subject}"
    )
    return response

