"""
Catalogue entry schema
Structures one alternative product/service and the concerns attached to it.
"""

import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


# Only tags in these groups count towards the privacy-signal component.
PRIMARY_PRIVACY_TAGS = ("privacy", "gdpr", "encryption", "zero-knowledge", "no-logs")
SECONDARY_PRIVACY_TAGS = ("offline", "federated", "local")


class CountryCode(str, Enum):
    """
    Jurisdiction codes

    EU member states, European non-EU states, other jurisdictions and the
    meta code "eu". Extend this enum when adding entries from new
    jurisdictions, and classify them in TrustScoreEngine.
    """
    # EU member states
    AT = "at"
    BE = "be"
    BG = "bg"
    HR = "hr"
    CY = "cy"
    CZ = "cz"
    DK = "dk"
    EE = "ee"
    FI = "fi"
    FR = "fr"
    DE = "de"
    GR = "gr"
    HU = "hu"
    IE = "ie"
    IT = "it"
    LV = "lv"
    LT = "lt"
    LU = "lu"
    MT = "mt"
    NL = "nl"
    PL = "pl"
    PT = "pt"
    RO = "ro"
    SK = "sk"
    SI = "si"
    ES = "es"
    SE = "se"
    # European non-EU
    CH = "ch"
    NO = "no"
    GB = "gb"
    IS = "is"
    # Other
    CA = "ca"
    US = "us"
    # Meta
    EU = "eu"


class CategoryId(str, Enum):
    """Product categories"""
    CLOUD_STORAGE = "cloud-storage"
    EMAIL = "email"
    MAIL_CLIENT = "mail-client"
    SEARCH_ENGINE = "search-engine"
    SOCIAL_MEDIA = "social-media"
    MESSAGING = "messaging"
    MEETING_SOFTWARE = "meeting-software"
    VIDEO_HOSTING = "video-hosting"
    OFFICE_SUITE = "office-suite"
    MAPS = "maps"
    BROWSER = "browser"
    DESKTOP_OS = "desktop-os"
    MOBILE_OS = "mobile-os"
    VPN = "vpn"
    ANALYTICS = "analytics"
    PROJECT_MANAGEMENT = "project-management"
    PASSWORD_MANAGER = "password-manager"
    TWO_FA_AUTHENTICATOR = "2fa-authenticator"
    AI_ML = "ai-ml"
    HOSTING = "hosting"
    PAYMENTS = "payments"
    SMART_HOME = "smart-home"
    ECOMMERCE = "ecommerce"
    VERSION_CONTROL = "version-control"
    OTHER = "other"


class OpenSourceLevel(str, Enum):
    """Degree of openness"""
    FULL = "full"
    PARTIAL = "partial"
    NONE = "none"


class Pricing(str, Enum):
    """Pricing tier"""
    FREE = "free"
    FREEMIUM = "freemium"
    PAID = "paid"


class ReservationSeverity(str, Enum):
    """Reservation severity"""
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"


class TrustScoreStatus(str, Enum):
    """Review status of a trust score"""
    PENDING = "pending"
    READY = "ready"


def numeric_score(value):
    """Rejects non-numeric trust scores instead of coercing "3" to 3"""
    if value is None or (isinstance(value, (int, float)) and not isinstance(value, bool)):
        return value
    raise ValueError(f"trustScore is not a number (got {type(value).__name__})")


class CatalogueModel(BaseModel):
    """
    Base for catalogue records

    The catalogue file uses camelCase keys; Python code uses snake_case.
    Records are frozen once loaded.
    """
    model_config = ConfigDict(
        use_enum_values=True,
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Reservation(CatalogueModel):
    """
    A documented concern about an entry

    severity is kept as a plain string so an unknown value still loads;
    scoring treats it as minor and the validation tool reports it.
    """
    id: str
    text: str = Field(description="Concern, in English")
    text_de: Optional[str] = Field(default=None, description="Concern, in German")
    severity: Optional[str] = Field(
        default=None,
        description="minor / moderate / major",
        examples=["moderate"]
    )
    date: Optional[datetime.date] = None
    source_url: Optional[str] = None


class USVendorComparison(CatalogueModel):
    """Comparison with the specific US product being replaced"""
    id: str
    name: Optional[str] = None
    trust_score_status: Optional[str] = Field(
        default=None,
        description="pending / ready"
    )
    trust_score: Optional[float] = Field(
        default=None,
        description="Score of the US product (ready only)"
    )
    description: Optional[str] = None
    description_de: Optional[str] = None
    reservations: list[Reservation] = Field(default_factory=list)

    @field_validator("trust_score", mode="before")
    @classmethod
    def check_numeric_score(cls, value):
        return numeric_score(value)


class LocalizedDescriptions(CatalogueModel):
    """Translated descriptions"""
    de: Optional[str] = None


class ActionLink(CatalogueModel):
    """Call-to-action link shown on the entry card"""
    label: str
    url: str


class TrustScoreBreakdown(CatalogueModel):
    """Components of a trust score"""
    jurisdiction: int = Field(description="Jurisdiction tier score")
    openness: int = Field(description="Openness score")
    privacy_signals: int = Field(description="Privacy tag score (0-2)")
    sovereignty_bonus: int = Field(description="Self-hosting bonus")
    reservation_penalty: int = Field(description="Sum of reservation weights")
    us_cap_applied: bool = Field(
        default=False,
        description="US ceiling rule lowered the score"
    )


class Alternative(CatalogueModel):
    """
    Catalogue entry

    One European or open-source alternative to a US tech product.
    If trust_score is set it is a curated value and overrides the formula.
    """

    # === Identity ===
    id: str = Field(examples=["tuta"])
    name: str = Field(examples=["Tuta"])
    description: str
    localized_descriptions: LocalizedDescriptions = Field(
        default_factory=LocalizedDescriptions
    )
    website: str
    logo: Optional[str] = None

    # === Classification ===
    country: CountryCode = Field(description="Jurisdiction")
    category: CategoryId
    pricing: Pricing
    tags: list[str] = Field(
        default_factory=list,
        examples=[["encryption", "privacy", "GDPR"]]
    )

    # === US products ===
    replaces_us: list[str] = Field(
        default_factory=list,
        alias="replacesUS",
        description="US products this entry replaces",
        examples=[["Gmail", "Outlook"]]
    )
    us_vendor_comparisons: list[USVendorComparison] = Field(default_factory=list)

    # === Openness ===
    is_open_source: bool
    open_source_level: Optional[OpenSourceLevel] = None
    open_source_audit_url: Optional[str] = None
    source_code_url: Optional[str] = None
    self_hostable: bool = False

    # === Details ===
    action_links: list[ActionLink] = Field(default_factory=list)
    founded_year: Optional[int] = None
    headquarters_city: Optional[str] = None
    license: Optional[str] = None

    # === Trust ===
    reservations: list[Reservation] = Field(default_factory=list)
    trust_score: Optional[int] = Field(
        default=None,
        description="Curated score, authoritative when set"
    )
    trust_score_status: Optional[TrustScoreStatus] = None
    trust_score_breakdown: Optional[TrustScoreBreakdown] = None

    @field_validator("trust_score", mode="before")
    @classmethod
    def check_numeric_score(cls, value):
        return numeric_score(value)

    def to_summary(self) -> str:
        """One-line summary"""
        parts = [self.name, self.country.upper(), self.category]
        if self.replaces_us:
            parts.append("replaces " + ", ".join(self.replaces_us))
        return " | ".join(parts)
