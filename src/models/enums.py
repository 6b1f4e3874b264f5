from __future__ import annotations

from enum import StrEnum
from typing import Final


class RightsDomain(StrEnum):
    __slots__ = ()

    AGRICULTURE = "agriculture"
    BUSINESS = "business"
    HEALTHCARE = "healthcare"
    JOURNALISM = "journalism"
    NRI = "nri"
    LIBRARY = "library"
    HOUSING = "housing"
    EDUCATION = "education"
    DIGITAL = "digital"
    ENVIRONMENT = "environment"
    GOVERNMENT_SERVICES = "government_services"
    WOMEN = "women"
    CONSUMER = "consumer"


class UrgencyLevel(StrEnum):
    __slots__ = ()

    URGENT = "urgent"
    PRIORITY = "priority"
    NORMAL = "normal"


class TimelineUnit(StrEnum):
    __slots__ = ()

    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


# ---------------------------------------------------------------------------
# Category keys, one closed set per domain
# ---------------------------------------------------------------------------


class AgricultureCategory(StrEnum):
    __slots__ = ()

    FARMER_RIGHTS = "farmer_rights"
    LAND_RIGHTS = "land_rights"
    CROP_INSURANCE = "crop_insurance"
    AGRICULTURAL_SUBSIDIES = "agricultural_subsidies"
    MARKET_ACCESS = "market_access"
    AGRICULTURAL_LABOR = "agricultural_labor"
    AGRICULTURAL_TECHNOLOGY = "agricultural_technology"
    ENVIRONMENTAL_PROTECTION = "environmental_protection"


class BusinessCategory(StrEnum):
    __slots__ = ()

    BUSINESS_REGISTRATION = "business_registration"
    BUSINESS_OPERATIONS = "business_operations"
    INTELLECTUAL_PROPERTY = "intellectual_property"
    CONSUMER_PROTECTION = "consumer_protection"
    LABOR_RIGHTS = "labor_rights"
    TAX_RIGHTS = "tax_rights"
    ENVIRONMENTAL_COMPLIANCE = "environmental_compliance"
    FOREIGN_INVESTMENT = "foreign_investment"


class HealthcareCategory(StrEnum):
    __slots__ = ()

    EMERGENCY_CARE = "emergency_care"
    MEDICAL_NEGLIGENCE = "medical_negligence"
    PATIENT_RIGHTS = "patient_rights"
    INSURANCE_RIGHTS = "insurance_rights"
    PUBLIC_HEALTH = "public_health"
    MENTAL_HEALTH = "mental_health"
    PHARMACEUTICAL_RIGHTS = "pharmaceutical_rights"
    RURAL_HEALTHCARE = "rural_healthcare"


class JournalismCategory(StrEnum):
    __slots__ = ()

    PRESS_FREEDOM = "press_freedom"
    MEDIA_RIGHTS = "media_rights"
    JOURNALIST_PROTECTION = "journalist_protection"
    CITIZEN_JOURNALISM = "citizen_journalism"
    CONTENT_CREATION = "content_creation"
    MEDIA_ETHICS = "media_ethics"
    WHISTLEBLOWING = "whistleblowing"
    COMMUNITY_MEDIA = "community_media"


class NRICategory(StrEnum):
    __slots__ = ()

    NRI_INVESTMENT = "nri_investment"
    NRI_PROPERTY = "nri_property"
    NRI_BANKING = "nri_banking"
    NRI_TAXATION = "nri_taxation"
    NRI_EDUCATION = "nri_education"
    NRI_HEALTHCARE = "nri_healthcare"
    NRI_CONSULAR = "nri_consular"
    NRI_RETIREMENT = "nri_retirement"


class LibraryCategory(StrEnum):
    __slots__ = ()

    CONSTITUTIONAL_DOCUMENTS = "constitutional_documents"
    LEGAL_DOCUMENTS = "legal_documents"
    HISTORICAL_DOCUMENTS = "historical_documents"
    ACADEMIC_DOCUMENTS = "academic_documents"
    RESEARCH_MATERIALS = "research_materials"
    DIGITAL_LIBRARY = "digital_library"
    PUBLIC_ACCESS = "public_access"
    COPYRIGHT_PROTECTION = "copyright_protection"


class HousingCategory(StrEnum):
    __slots__ = ()

    RIGHT_TO_HOUSING = "right_to_housing"
    LANDLORD_TENANT = "landlord_tenant"
    PROPERTY_RIGHTS = "property_rights"
    SLUM_REHABILITATION = "slum_rehabilitation"
    AFFORDABLE_HOUSING = "affordable_housing"
    HOUSING_DISCRIMINATION = "housing_discrimination"
    INFRASTRUCTURE = "infrastructure"
    HOUSING_FINANCE = "housing_finance"


class EducationCategory(StrEnum):
    __slots__ = ()

    RIGHT_TO_EDUCATION = "right_to_education"
    ADMISSION_RIGHTS = "admission_rights"
    DISCRIMINATION = "discrimination"
    SPECIAL_EDUCATION = "special_education"
    TEACHER_RIGHTS = "teacher_rights"
    STUDENT_DISCIPLINE = "student_discipline"
    EXAMINATION_RIGHTS = "examination_rights"
    INFRASTRUCTURE = "infrastructure"


class DigitalCategory(StrEnum):
    __slots__ = ()

    DATA_PRIVACY = "data_privacy"
    ONLINE_HARASSMENT = "online_harassment"
    CYBER_CRIME = "cyber_crime"
    DIGITAL_SAFETY = "digital_safety"
    INTERNET_FREEDOM = "internet_freedom"
    INTELLECTUAL_PROPERTY = "intellectual_property"
    ACCESS_RIGHTS = "access_rights"
    PLATFORM_ACCOUNTABILITY = "platform_accountability"


class EnvironmentCategory(StrEnum):
    __slots__ = ()

    AIR_POLLUTION = "air_pollution"
    WATER_POLLUTION = "water_pollution"
    SOIL_POLLUTION = "soil_pollution"
    NOISE_POLLUTION = "noise_pollution"
    DEFORESTATION = "deforestation"
    BIODIVERSITY_LOSS = "biodiversity_loss"
    WASTE_MANAGEMENT = "waste_management"
    CLIMATE_CHANGE = "climate_change"


class GovernmentServiceCategory(StrEnum):
    __slots__ = ()

    AADHAAR = "aadhaar"
    PASSPORT = "passport"
    PAN = "pan"
    DRIVING_LICENSE = "driving_license"
    VOTER_ID = "voter_id"


class WomenCategory(StrEnum):
    __slots__ = ()

    DOMESTIC_VIOLENCE = "domestic_violence"
    SEXUAL_HARASSMENT = "sexual_harassment"
    WORKPLACE_DISCRIMINATION = "workplace_discrimination"
    PROPERTY_RIGHTS = "property_rights"
    EDUCATION_RIGHTS = "education_rights"
    REPRODUCTIVE_RIGHTS = "reproductive_rights"


class ConsumerCategory(StrEnum):
    __slots__ = ()

    PRODUCT = "product"
    SERVICE = "service"
    FINANCIAL = "financial"
    DIGITAL = "digital"
    REAL_ESTATE = "real_estate"


DOMAIN_CATEGORIES: Final[dict[RightsDomain, type[StrEnum]]] = {
    RightsDomain.AGRICULTURE: AgricultureCategory,
    RightsDomain.BUSINESS: BusinessCategory,
    RightsDomain.HEALTHCARE: HealthcareCategory,
    RightsDomain.JOURNALISM: JournalismCategory,
    RightsDomain.NRI: NRICategory,
    RightsDomain.LIBRARY: LibraryCategory,
    RightsDomain.HOUSING: HousingCategory,
    RightsDomain.EDUCATION: EducationCategory,
    RightsDomain.DIGITAL: DigitalCategory,
    RightsDomain.ENVIRONMENT: EnvironmentCategory,
    RightsDomain.GOVERNMENT_SERVICES: GovernmentServiceCategory,
    RightsDomain.WOMEN: WomenCategory,
    RightsDomain.CONSUMER: ConsumerCategory,
}
