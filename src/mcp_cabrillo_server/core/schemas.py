"""JSON-facing models for parsed logs.

These mirror the core dataclasses in a serializable shape; the schema of
ParseResponse is published as an MCP resource.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .bandplan import lookup_band
from .errors import CabrilloError
from .models import ContactRecord, LogRecord, OffDutyPeriod, SignalReport


class SignalReportModel(BaseModel):
    readability: int = Field(ge=1, le=5)
    strength: int = Field(ge=1, le=9)
    tone: int = Field(ge=0, le=9, description="0 when the report had two digits.")

    @classmethod
    def from_report(cls, report: SignalReport | None) -> SignalReportModel | None:
        if report is None:
            return None
        return cls(readability=report.readability, strength=report.strength, tone=report.tone)


class ContactModel(BaseModel):
    frequency_khz: int | None = Field(description="kHz; null for LIGHT contacts.")
    band: str | None = Field(description="Band derived from the frequency, if any.")
    mode: str
    timestamp: str = Field(description="ISO-8601 UTC timestamp.")
    sent_call: str
    sent_exchange: str
    sent_report: SignalReportModel | None = None
    received_call: str
    received_exchange: str
    received_report: SignalReportModel | None = None
    is_duplicate_transmitter: bool = False

    @classmethod
    def from_contact(cls, contact: ContactRecord) -> ContactModel:
        band = lookup_band(contact.frequency)
        return cls(
            frequency_khz=contact.frequency.khz,
            band=band.value if band is not None else None,
            mode=contact.mode.value,
            timestamp=contact.timestamp.isoformat(),
            sent_call=contact.sent_call,
            sent_exchange=contact.sent_exchange,
            sent_report=SignalReportModel.from_report(contact.sent_report),
            received_call=contact.received_call,
            received_exchange=contact.received_exchange,
            received_report=SignalReportModel.from_report(contact.received_report),
            is_duplicate_transmitter=contact.is_duplicate_transmitter,
        )


class OffDutyPeriodModel(BaseModel):
    begin: str
    end: str

    @classmethod
    def from_period(cls, period: OffDutyPeriod) -> OffDutyPeriodModel:
        return cls(begin=period.begin.isoformat(), end=period.end.isoformat())


class LogSummaryModel(BaseModel):
    """Header fields of a log plus contact counts."""

    format_version: float
    callsign: str | None = None
    contest: str | None = None
    category_assisted: bool | None = None
    category_band: str | None = None
    category_mode: str | None = None
    category_operator: str | None = None
    category_power: str | None = None
    category_station: str | None = None
    category_time: str | None = None
    category_transmitter: str | None = None
    category_overlay: str | None = None
    certificate: bool | None = None
    claimed_score: int | None = None
    club: str | None = None
    created_by: str | None = None
    email: str | None = None
    grid_locator: str | None = None
    location: str | None = None
    name: str | None = None
    address: str | None = None
    soapbox: str | None = None
    debug: bool = False
    operators: list[str] = Field(default_factory=list)
    off_duty_periods: list[OffDutyPeriodModel] = Field(default_factory=list)
    unknown_tags: dict[str, str] = Field(default_factory=dict)
    contact_count: int = 0
    ignored_contact_count: int = 0

    @classmethod
    def from_record(cls, record: LogRecord) -> LogSummaryModel:
        def token(value):
            return value.value if value is not None else None

        return cls(
            format_version=record.format_version,
            callsign=record.callsign,
            contest=record.contest,
            category_assisted=record.category_assisted,
            category_band=token(record.category_band),
            category_mode=token(record.category_mode),
            category_operator=token(record.category_operator),
            category_power=token(record.category_power),
            category_station=token(record.category_station),
            category_time=token(record.category_time),
            category_transmitter=token(record.category_transmitter),
            category_overlay=token(record.category_overlay),
            certificate=record.certificate,
            claimed_score=record.claimed_score,
            club=record.club,
            created_by=record.created_by,
            email=record.email,
            grid_locator=record.grid_locator,
            location=record.location,
            name=record.name,
            address=record.address,
            soapbox=record.soapbox,
            debug=record.debug,
            operators=list(record.operators),
            off_duty_periods=[OffDutyPeriodModel.from_period(p) for p in record.off_duty_periods],
            unknown_tags=dict(record.unknown_tags),
            contact_count=len(record.contacts),
            ignored_contact_count=len(record.ignored_contacts),
        )


class ParseErrorModel(BaseModel):
    kind: str = Field(description="IO, PARSE or OTHER.")
    tag: str = Field(description="Tag being processed; empty before a tag was identified.")
    line: int = Field(ge=0, description="Zero-based line number.")
    detail: str
    message: str

    @classmethod
    def from_error(cls, error: CabrilloError) -> ParseErrorModel:
        return cls(
            kind=error.kind.value,
            tag=error.tag,
            line=error.line,
            detail=error.detail,
            message=str(error),
        )


class ParseResponse(BaseModel):
    ok: bool
    log: LogSummaryModel | None = None
    contacts: list[ContactModel] = Field(default_factory=list)
    ignored_contacts: list[ContactModel] = Field(default_factory=list)
    error: ParseErrorModel | None = None
