from src.models.enums import (
    DOMAIN_CATEGORIES,
    AgricultureCategory,
    BusinessCategory,
    ConsumerCategory,
    DigitalCategory,
    EducationCategory,
    EnvironmentCategory,
    GovernmentServiceCategory,
    HealthcareCategory,
    HousingCategory,
    JournalismCategory,
    LibraryCategory,
    NRICategory,
    RightsDomain,
    TimelineUnit,
    UrgencyLevel,
    WomenCategory,
)
from src.models.rights import (
    ActionPlan,
    CategoryTable,
    Checklists,
    ComplaintTemplate,
    ConstitutionalProvision,
    Contact,
    ContentRecord,
    DigitalPlatform,
    Institution,
    IssueType,
    LawReference,
    LegalOption,
    RecentCase,
    RightsReference,
    RightsStrategy,
)

__all__ = [
    "DOMAIN_CATEGORIES",
    "ActionPlan",
    "AgricultureCategory",
    "BusinessCategory",
    "CategoryTable",
    "Checklists",
    "ComplaintTemplate",
    "ConstitutionalProvision",
    "Contact",
    "ConsumerCategory",
    "ContentRecord",
    "DigitalCategory",
    "DigitalPlatform",
    "EducationCategory",
    "EnvironmentCategory",
    "GovernmentServiceCategory",
    "HealthcareCategory",
    "HousingCategory",
    "Institution",
    "IssueType",
    "JournalismCategory",
    "LawReference",
    "LegalOption",
    "LibraryCategory",
    "NRICategory",
    "RecentCase",
    "RightsDomain",
    "RightsReference",
    "RightsStrategy",
    "TimelineUnit",
    "UrgencyLevel",
    "WomenCategory",
]
