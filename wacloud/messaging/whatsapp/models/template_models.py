"""
WhatsApp message template management models.

Provides Pydantic v2 models for template CRUD on the WhatsApp Business
Account (``/{waba_id}/message_templates``):
- TemplateCreateRequest / TemplateCreateResponse
- TemplateUpdateRequest
- TemplateListParams / TemplateListResponse
- MessageTemplate: a template as returned by the Graph API

Reference: https://developers.facebook.com/docs/graph-api/reference/whats-app-business-account/message_templates
"""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TemplateCategory(str, Enum):
    """Template categories accepted at creation."""

    AUTHENTICATION = "AUTHENTICATION"
    MARKETING = "MARKETING"
    UTILITY = "UTILITY"


class TemplateStatus(str, Enum):
    """Review and lifecycle status of a template."""

    APPROVED = "APPROVED"
    IN_APPEAL = "IN_APPEAL"
    PENDING = "PENDING"
    REJECTED = "REJECTED"
    PENDING_DELETION = "PENDING_DELETION"
    DELETED = "DELETED"
    DISABLED = "DISABLED"
    PAUSED = "PAUSED"
    LIMIT_EXCEEDED = "LIMIT_EXCEEDED"


class TemplateRejectedReason(str, Enum):
    ABUSIVE_CONTENT = "ABUSIVE_CONTENT"
    INVALID_FORMAT = "INVALID_FORMAT"
    NONE = "NONE"
    PROMOTIONAL = "PROMOTIONAL"
    TAG_CONTENT_MISMATCH = "TAG_CONTENT_MISMATCH"
    SCAM = "SCAM"


class TemplateLanguage(str, Enum):
    """Locale codes supported for message templates."""

    AFRIKAANS = "af"
    ALBANIAN = "sq"
    ARABIC = "ar"
    AZERBAIJANI = "az"
    BENGALI = "bn"
    BULGARIAN = "bg"
    CATALAN = "ca"
    CHINESE_CHN = "zh_CN"
    CHINESE_HKG = "zh_HK"
    CHINESE_TAI = "zh_TW"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    ENGLISH_UK = "en_GB"
    ENGLISH_US = "en_US"
    ESTONIAN = "et"
    FILIPINO = "fil"
    FINNISH = "fi"
    FRENCH = "fr"
    GEORGIAN = "ka"
    GERMAN = "de"
    GREEK = "el"
    GUJARATI = "gu"
    HAUSA = "ha"
    HEBREW = "he"
    HINDI = "hi"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    IRISH = "ga"
    ITALIAN = "it"
    JAPANESE = "ja"
    KANNADA = "kn"
    KAZAKH = "kk"
    KINYARWANDA = "rw_RW"
    KOREAN = "ko"
    KYRGYZ = "ky_KG"
    LAO = "lo"
    LATVIAN = "lv"
    LITHUANIAN = "lt"
    MACEDONIAN = "mk"
    MALAY = "ms"
    MALAYALAM = "ml"
    MARATHI = "mr"
    NORWEGIAN = "nb"
    PERSIAN = "fa"
    POLISH = "pl"
    PORTUGUESE_BR = "pt_BR"
    PORTUGUESE_POR = "pt_PT"
    PUNJABI = "pa"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SERBIAN = "sr"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SPANISH_ARG = "es_AR"
    SPANISH_SPA = "es_ES"
    SPANISH_MEX = "es_MX"
    SWAHILI = "sw"
    SWEDISH = "sv"
    TAMIL = "ta"
    TELUGU = "te"
    THAI = "th"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    URDU = "ur"
    UZBEK = "uz"
    VIETNAMESE = "vi"
    ZULU = "zu"


class TemplateComponentType(str, Enum):
    HEADER = "HEADER"
    BODY = "BODY"
    FOOTER = "FOOTER"
    BUTTONS = "BUTTONS"


class TemplateHeaderFormat(str, Enum):
    TEXT = "TEXT"
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    DOCUMENT = "DOCUMENT"
    LOCATION = "LOCATION"


class TemplateButtonType(str, Enum):
    URL = "URL"
    PHONE_NUMBER = "PHONE_NUMBER"
    QUICK_REPLY = "QUICK_REPLY"
    COPY_CODE = "COPY_CODE"
    FLOW = "FLOW"


class TemplateModel(BaseModel):
    """Base for template payload objects."""

    model_config = ConfigDict(extra="forbid", use_enum_values=True)


class TemplateExample(TemplateModel):
    """Sample values shown to reviewers for variables and media headers."""

    header_text: list[str] | None = None
    header_handle: list[str] | None = Field(
        None, description="Uploaded media handle for media headers"
    )
    body_text: list[list[str]] | None = None


class TemplateButton(TemplateModel):
    type: TemplateButtonType
    text: str | None = Field(None, max_length=25)
    phone_number: str | None = None
    url: str | None = None
    example: list[str] | None = None
    flow_id: str | None = None
    flow_action: Literal["navigate", "data_exchange"] | None = None
    navigate_screen: str | None = None

    @model_validator(mode="after")
    def validate_target(self):
        if self.type == TemplateButtonType.URL and not self.url:
            raise ValueError("URL buttons require 'url'")
        if self.type == TemplateButtonType.PHONE_NUMBER and not self.phone_number:
            raise ValueError("PHONE_NUMBER buttons require 'phone_number'")
        if self.type == TemplateButtonType.FLOW and not self.flow_id:
            raise ValueError("FLOW buttons require 'flow_id'")
        return self


class TemplateComponent(TemplateModel):
    """Component of a template definition (header, body, footer, buttons)."""

    type: TemplateComponentType
    format: TemplateHeaderFormat | None = Field(
        None, description="Header format; only valid for HEADER components"
    )
    text: str | None = None
    example: TemplateExample | None = None
    buttons: list[TemplateButton] | None = None

    @model_validator(mode="after")
    def validate_component(self):
        if self.format is not None and self.type != TemplateComponentType.HEADER:
            raise ValueError("'format' is only valid for HEADER components")
        if self.type == TemplateComponentType.BUTTONS and not self.buttons:
            raise ValueError("BUTTONS components require 'buttons'")
        if self.type == TemplateComponentType.BODY and not self.text:
            raise ValueError("BODY components require 'text'")
        return self


class LibraryTemplateButtonInput(TemplateModel):
    type: Literal["URL", "PHONE_NUMBER"]
    base_url: str | None = None
    url_suffix_example: str | None = None
    phone_number: str | None = None


class TemplateCreateRequest(TemplateModel):
    """Body of a template creation request."""

    name: str = Field(..., min_length=1, max_length=512)
    category: TemplateCategory
    language: TemplateLanguage
    allow_category_change: bool | None = None
    library_template_name: str | None = None
    library_template_button_inputs: list[LibraryTemplateButtonInput] | None = None
    components: list[TemplateComponent] | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Template names are lowercase alphanumerics and underscores."""
        if not all(c.islower() or c.isdigit() or c == "_" for c in v):
            raise ValueError(
                "Template name may only contain lowercase letters, digits and underscores"
            )
        return v

    @model_validator(mode="after")
    def validate_content(self):
        if not self.components and not self.library_template_name:
            raise ValueError("Provide 'components' or 'library_template_name'")
        return self


class TemplateCreateResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    status: TemplateStatus
    category: TemplateCategory


class TemplateUpdateRequest(TemplateModel):
    """Body of a template edit request; at least one field is required."""

    category: TemplateCategory | None = None
    components: list[TemplateComponent] | None = None

    @model_validator(mode="after")
    def validate_not_empty(self):
        if self.category is None and not self.components:
            raise ValueError("Provide 'category' and/or 'components' to update")
        return self


class TemplateListParams(TemplateModel):
    """Query parameters for listing templates."""

    fields: list[str] | None = Field(
        None, description="Template fields to return, e.g. ['name', 'status']"
    )
    limit: int | None = Field(None, gt=0)
    after: str | None = Field(None, description="Cursor for the next page")
    before: str | None = Field(None, description="Cursor for the previous page")

    def to_query(self) -> dict[str, str]:
        """Render as Graph API query parameters."""
        query: dict[str, str] = {}
        if self.fields:
            query["fields"] = ",".join(self.fields)
        if self.limit is not None:
            query["limit"] = str(self.limit)
        if self.after:
            query["after"] = self.after
        if self.before:
            query["before"] = self.before
        return query


class QualityScore(BaseModel):
    model_config = ConfigDict(extra="allow")

    score: str
    date: int | None = None
    reasons: list[str] | None = None


class MessageTemplate(BaseModel):
    """A message template as returned by the Graph API."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str | None = None
    category: str | None = None
    language: str | None = None
    status: TemplateStatus | None = None
    components: list[dict[str, Any]] | None = None
    correct_category: str | None = None
    previous_category: str | None = None
    sub_category: str | None = None
    rejected_reason: TemplateRejectedReason | None = None
    quality_score: QualityScore | None = None
    library_template_name: str | None = None
    message_send_ttl_seconds: int | None = None
    cta_url_link_tracking_opted_out: bool | None = None


class PagingCursors(BaseModel):
    before: str | None = None
    after: str | None = None


class Paging(BaseModel):
    model_config = ConfigDict(extra="allow")

    cursors: PagingCursors | None = None
    next: str | None = None
    previous: str | None = None


class TemplateListResponse(BaseModel):
    """One page of templates."""

    data: list[MessageTemplate] = Field(default_factory=list)
    paging: Paging | None = None

    @property
    def next_cursor(self) -> str | None:
        """Cursor for the next page, or None on the last page."""
        if self.paging and self.paging.next and self.paging.cursors:
            return self.paging.cursors.after
        return None
