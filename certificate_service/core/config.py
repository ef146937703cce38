import os

from certificate_service.core.utils import read_secret

ROOT = '/api'

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Shared secret for the certificates endpoint (env or docker secret file)
API_KEY = os.getenv("CERTIFICATE_API_KEY") or read_secret(
    os.getenv("CERTIFICATE_API_KEY_FILE", "")
)

CONTRACT_ADDRESS = os.getenv(
    "NFT_CONTRACT_ADDRESS", "0x1234567890abcdef1234567890abcdef12345678"
)
ISSUER_NAME = os.getenv("CERTIFICATE_ISSUER", "Digital Certificate Authority")

VALIDITY_DAYS = 365

COUNTRY_NAME = "AR"

ISSUER_COMMON_NAME = "AC MODERNIZACIÓN-PFDR"
ISSUER_ORGANIZATION_NAME = "Secretaría de Innovación Pública"

PUBLIC_KEY_ALGORITHM = "RSA-2048"
SIGNATURE_ALGORITHM = "SHA256withRSA"

KEY_USAGE = ["digitalSignature", "nonRepudiation", "keyEncipherment"]

POLICY_IDENTIFIER = "2.16.32.1.1.0"
POLICY_QUALIFIERS = [
    "https://pki.jgm.gov.ar/docs/pdf/Politica_Unica_de_Certificacion_v2.0.pdf"
]
