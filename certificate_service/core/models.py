from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialized with camelCase keys, as exposed on the wire"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


NonEmptyStr = Annotated[str, Field(min_length=1)]


# Request

class PersonalInfo(CamelModel):
    name: NonEmptyStr
    dni: NonEmptyStr


class BiometricProof(CamelModel):
    # Only checked for presence, no biometric verification takes place
    provider: NonEmptyStr
    verification_id: NonEmptyStr


class CertificateRequest(CamelModel):
    api_key: str
    personal_info: PersonalInfo
    biometric_proof: BiometricProof
    public_key: str

    @field_validator("public_key")
    @classmethod
    def validate_public_key(cls, v: str) -> str:
        if not v.startswith("0x"):
            raise ValueError("must start with 0x")
        return v


# Certificate fields record

class CertificateSubjectInput(BaseModel):
    common_name: str
    document_number: str
    organization_name: Optional[str] = None


class Subject(CamelModel):
    common_name: str
    serial_number: Optional[str] = None  # CUIT/CUIL/CDI
    organization_name: Optional[str] = None
    organizational_unit_name: Optional[str] = None
    country_name: str


class Issuer(CamelModel):
    common_name: str
    organization_name: str
    country_name: str


class Validity(CamelModel):
    not_before: str
    not_after: str


class PublicKeyInfo(CamelModel):
    algorithm: str
    value: str


class BasicConstraints(CamelModel):
    is_ca: bool = Field(alias="isCA")
    path_length_constraint: Optional[int] = None


class CertificatePolicy(CamelModel):
    policy_identifier: str
    policy_qualifiers: Optional[list[str]] = None


class Extensions(CamelModel):
    key_usage: list[str]
    basic_constraints: BasicConstraints
    authority_key_identifier: Optional[str] = None
    subject_key_identifier: Optional[str] = None
    certificate_policies: Optional[list[CertificatePolicy]] = None


class Signature(CamelModel):
    algorithm: str
    value: str


class CertificateFields(CamelModel):
    version: int
    serial_number: str
    subject: Subject
    issuer: Issuer
    validity: Validity
    public_key: PublicKeyInfo
    extensions: Extensions
    signature: Signature

    def to_text(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


# Response

class NftRecord(CamelModel):
    token_id: str
    contract_address: str
    transaction_hash: str


class CertificateRecord(CamelModel):
    serial_number: str
    subject: str
    issuer: str
    valid_from: str
    valid_to: str
    pem_data: str


class CertificateResponse(CamelModel):
    nft: NftRecord
    certificate: CertificateRecord


class ErrorResponse(BaseModel):
    error: str
    message: str
    details: Optional[list[str]] = None
