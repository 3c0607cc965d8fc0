"""Registro de campos graváveis por tipo de entidade.

Tabelas imutáveis: para liberar um campo novo basta incluí-lo aqui,
sem tocar no sanitizer.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Final


class EntityType(StrEnum):
    """Tipos de payload que passam pelo sanitizer."""

    CUSTOMER = "customer"
    CONTRACTOR = "contractor"
    SCHEDULED_JOB = "scheduled_job"


# Campo do dono, sempre injetado pelo chamador nos perfis
OWNER_FIELD: Final = "user_id"

# Identificador da linha; IDs gerados no cliente começam com TEMP_ID_PREFIX
ID_FIELD: Final = "id"
TEMP_ID_PREFIX: Final = "temp-"

GEO_FIELDS: Final = frozenset({"latitude", "longitude"})

# Geocoding/matching dependem da presença dessas chaves mesmo vazias
ADDRESS_FIELDS: Final = frozenset({"address", "city", "state", "zip_code"})

PROFILE_ENTITY_TYPES: Final = frozenset({EntityType.CUSTOMER, EntityType.CONTRACTOR})

_CUSTOMER_FIELDS = frozenset(
    {
        "id",
        "first_name",
        "last_name",
        "phone",
        "address",
        "city",
        "state",
        "zip_code",
        "bio",
        "profile_photo",
        "email_notifications",
        "sms_notifications",
        "preferred_contact_method",
        "home_type",
        "home_age",
        "latitude",
        "longitude",
    }
)

_CONTRACTOR_FIELDS = frozenset(
    {
        "id",
        "first_name",
        "last_name",
        "business_name",
        "phone",
        "business_email",
        "license_number",
        "address",
        "city",
        "state",
        "zip_code",
        "specialties",
        "years_experience",
        "email_notifications",
        "sms_notifications",
        "bio",
        "profile_photo",
        "preferred_contact_method",
        "service_radius",
        "business_type",
        "tax_id",
        "w9_on_file",
        "insurance_provider",
        "insurance_policy_number",
        "stripe_connect_account_id",
        "latitude",
        "longitude",
    }
)

_SCHEDULED_JOB_FIELDS = frozenset(
    {
        "id",
        "quote_id",
        "contractor_id",
        "job_request_id",
        "title",
        "job_date",
        "start_time",
        "end_time",
        "status",
        "location",
        "job_value",
        "notes",
        "client_name",
        "client_email",
        "client_phone",
    }
)

ALLOWED_FIELDS: Final = MappingProxyType(
    {
        EntityType.CUSTOMER: _CUSTOMER_FIELDS,
        EntityType.CONTRACTOR: _CONTRACTOR_FIELDS,
        EntityType.SCHEDULED_JOB: _SCHEDULED_JOB_FIELDS,
    }
)

SCHEDULED_JOB_REQUIRED_FIELDS: Final = (
    "contractor_id",
    "job_request_id",
    "job_date",
    "start_time",
    "title",
)

PROFILE_TABLES: Final = MappingProxyType(
    {
        EntityType.CUSTOMER: "customer_profiles",
        EntityType.CONTRACTOR: "contractor_profiles",
    }
)


def allowed_fields_for(entity_type: EntityType) -> frozenset[str]:
    """Retorna o allow-list do tipo de entidade."""
    return ALLOWED_FIELDS[entity_type]
