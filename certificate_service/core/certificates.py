"""
X.509-like certificate field records.

Nothing here is signed or DER encoded: the record mirrors the fields of a
certificate issued under the Argentine PKI, with an empty signature value
to be filled by a real CA.

Input is not validated here. Callers (the certificates router) are
responsible for checking the request before building the record.
"""

import secrets

from datetime import datetime, timedelta
from typing import Optional

from certificate_service.core.config import (
    COUNTRY_NAME,
    ISSUER_COMMON_NAME,
    ISSUER_ORGANIZATION_NAME,
    KEY_USAGE,
    POLICY_IDENTIFIER,
    POLICY_QUALIFIERS,
    PUBLIC_KEY_ALGORITHM,
    SIGNATURE_ALGORITHM,
)
from certificate_service.core.models import (
    BasicConstraints,
    CertificateFields,
    CertificatePolicy,
    CertificateSubjectInput,
    Extensions,
    Issuer,
    PublicKeyInfo,
    Signature,
    Subject,
    Validity,
)
from certificate_service.core.utils import isoformat_z, utc_now

CERTIFICATE_VERSION = 3


def generate_serial_number() -> str:
    """32 lowercase hex characters from a cryptographically strong source"""
    return secrets.token_hex(16)


def generate_x509_certificate(
    subject: CertificateSubjectInput,
    public_key: str,
    validity_period: int,
    now: Optional[datetime] = None
) -> CertificateFields:
    """
    Builds the certificate fields for subject and public_key.
    The validity window is [now, now + validity_period days].
    """
    not_before = now or utc_now()
    not_after = not_before + timedelta(days=validity_period)

    return CertificateFields(
        version=CERTIFICATE_VERSION,
        serial_number=generate_serial_number(),
        subject=Subject(
            common_name=subject.common_name,
            serial_number=f"CUIT {subject.document_number}",
            organization_name=subject.organization_name,
            country_name=COUNTRY_NAME,
        ),
        issuer=Issuer(
            common_name=ISSUER_COMMON_NAME,
            organization_name=ISSUER_ORGANIZATION_NAME,
            country_name=COUNTRY_NAME,
        ),
        validity=Validity(
            not_before=isoformat_z(not_before),
            not_after=isoformat_z(not_after),
        ),
        public_key=PublicKeyInfo(
            algorithm=PUBLIC_KEY_ALGORITHM,
            value=public_key,
        ),
        extensions=Extensions(
            key_usage=list(KEY_USAGE),
            basic_constraints=BasicConstraints(is_ca=False),
            certificate_policies=[
                CertificatePolicy(
                    policy_identifier=POLICY_IDENTIFIER,
                    policy_qualifiers=list(POLICY_QUALIFIERS),
                )
            ],
        ),
        signature=Signature(
            algorithm=SIGNATURE_ALGORITHM,
            value="",
        ),
    )
