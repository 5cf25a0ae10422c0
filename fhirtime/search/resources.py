"""Record types read by the resolution protocol.

These are plain immutable records holding only the fields that
:mod:`fhirtime.search.resolve` reads. Field names follow the resource
definitions in snake case. Choice fields (``effective[x]``,
``onset[x]`` and so on) are a single attribute typed as a union of the
allowed alternatives.

Each record class names its search parameter enumeration in the
``SearchParameter`` class attribute.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from fhirtime.core.date import Date
from fhirtime.core.datetime import DateTime
from fhirtime.core.instant import Instant
from fhirtime.search import parameters

# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Period:
    """A time range with optional bounds."""

    start: DateTime | None = None
    end: DateTime | None = None


@dataclass(frozen=True)
class Quantity:
    value: float | None = None
    unit: str | None = None


@dataclass(frozen=True)
class Age(Quantity):
    """A duration of life, such as ``42 years``."""


@dataclass(frozen=True)
class Range:
    low: Quantity | None = None
    high: Quantity | None = None


@dataclass(frozen=True)
class Timing:
    """A schedule. ``event`` lists the exact times it occurs, if any."""

    event: tuple[DateTime, ...] = ()


@dataclass(frozen=True)
class Dosage:
    text: str | None = None
    timing: Timing | None = None


@dataclass(frozen=True)
class Recommendation:
    """One vaccination recommendation; the date it was made is required."""

    date: DateTime
    dose_number: int | None = None


# Choice field alternatives
EffectiveChoice = Union[DateTime, Period]
OnsetChoice = Union[DateTime, Age, Period, Range, str]
OccurrenceChoice = Union[DateTime, Period, Timing]


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Observation:
    SearchParameter: ClassVar[type[Enum]] = parameters.ObservationSearchParameter

    id: str | None = None
    status: str | None = None
    effective: EffectiveChoice | None = None


@dataclass(frozen=True)
class Immunization:
    SearchParameter: ClassVar[type[Enum]] = parameters.ImmunizationSearchParameter

    id: str | None = None
    date: DateTime | None = None


@dataclass(frozen=True)
class ImmunizationRecommendation:
    SearchParameter: ClassVar[type[Enum]] = parameters.ImmunizationRecommendationSearchParameter

    id: str | None = None
    recommendation: tuple[Recommendation, ...] = ()


@dataclass(frozen=True)
class EpisodeOfCare:
    SearchParameter: ClassVar[type[Enum]] = parameters.EpisodeOfCareSearchParameter

    id: str | None = None
    period: Period | None = None


@dataclass(frozen=True)
class Encounter:
    SearchParameter: ClassVar[type[Enum]] = parameters.EncounterSearchParameter

    id: str | None = None
    status: str | None = None
    period: Period | None = None


@dataclass(frozen=True)
class DiagnosticReport:
    SearchParameter: ClassVar[type[Enum]] = parameters.DiagnosticReportSearchParameter

    id: str | None = None
    effective: EffectiveChoice | None = None


@dataclass(frozen=True)
class Consent:
    SearchParameter: ClassVar[type[Enum]] = parameters.ConsentSearchParameter

    id: str | None = None
    date_time: DateTime | None = None


@dataclass(frozen=True)
class Flag:
    SearchParameter: ClassVar[type[Enum]] = parameters.FlagSearchParameter

    id: str | None = None
    period: Period | None = None


@dataclass(frozen=True)
class MedicationRequest:
    SearchParameter: ClassVar[type[Enum]] = parameters.MedicationRequestSearchParameter

    id: str | None = None
    dosage_instruction: tuple[Dosage, ...] = ()


@dataclass(frozen=True)
class NutritionOrder:
    SearchParameter: ClassVar[type[Enum]] = parameters.NutritionOrderSearchParameter

    date_time: DateTime
    id: str | None = None


@dataclass(frozen=True)
class DocumentReference:
    SearchParameter: ClassVar[type[Enum]] = parameters.DocumentReferenceSearchParameter

    indexed: Instant
    id: str | None = None


@dataclass(frozen=True)
class AllergyIntolerance:
    SearchParameter: ClassVar[type[Enum]] = parameters.AllergyIntoleranceSearchParameter

    id: str | None = None
    asserted_date: DateTime | None = None


@dataclass(frozen=True)
class Condition:
    SearchParameter: ClassVar[type[Enum]] = parameters.ConditionSearchParameter

    id: str | None = None
    asserted_date: DateTime | None = None
    onset: OnsetChoice | None = None


@dataclass(frozen=True)
class CareTeam:
    SearchParameter: ClassVar[type[Enum]] = parameters.CareTeamSearchParameter

    id: str | None = None
    period: Period | None = None


@dataclass(frozen=True)
class CarePlan:
    SearchParameter: ClassVar[type[Enum]] = parameters.CarePlanSearchParameter

    id: str | None = None
    period: Period | None = None


@dataclass(frozen=True)
class Appointment:
    SearchParameter: ClassVar[type[Enum]] = parameters.AppointmentSearchParameter

    id: str | None = None
    start: Instant | None = None


@dataclass(frozen=True)
class MedicationDispense:
    SearchParameter: ClassVar[type[Enum]] = parameters.MedicationDispenseSearchParameter

    id: str | None = None
    when_handed_over: DateTime | None = None


@dataclass(frozen=True)
class MedicationStatement:
    SearchParameter: ClassVar[type[Enum]] = parameters.MedicationStatementSearchParameter

    id: str | None = None
    effective: EffectiveChoice | None = None


@dataclass(frozen=True)
class DeviceRequest:
    SearchParameter: ClassVar[type[Enum]] = parameters.DeviceRequestSearchParameter

    id: str | None = None
    authored_on: DateTime | None = None


@dataclass(frozen=True)
class Procedure:
    SearchParameter: ClassVar[type[Enum]] = parameters.ProcedureSearchParameter

    id: str | None = None
    performed: EffectiveChoice | None = None


@dataclass(frozen=True)
class ProcedureRequest:
    SearchParameter: ClassVar[type[Enum]] = parameters.ProcedureRequestSearchParameter

    id: str | None = None
    occurrence: OccurrenceChoice | None = None


@dataclass(frozen=True)
class Patient:
    SearchParameter: ClassVar[type[Enum]] = parameters.PatientSearchParameter

    id: str | None = None
    birth_date: Date | None = None


RECORD_TYPES: tuple[type, ...] = (
    Observation,
    Immunization,
    ImmunizationRecommendation,
    EpisodeOfCare,
    Encounter,
    DiagnosticReport,
    Consent,
    Flag,
    MedicationRequest,
    NutritionOrder,
    DocumentReference,
    AllergyIntolerance,
    Condition,
    CareTeam,
    CarePlan,
    Appointment,
    MedicationDispense,
    MedicationStatement,
    DeviceRequest,
    Procedure,
    ProcedureRequest,
    Patient,
)


__all__ = [
    "Age",
    "Dosage",
    "EffectiveChoice",
    "OccurrenceChoice",
    "OnsetChoice",
    "Period",
    "Quantity",
    "Range",
    "Recommendation",
    "Timing",
    "RECORD_TYPES",
    "AllergyIntolerance",
    "Appointment",
    "CarePlan",
    "CareTeam",
    "Condition",
    "Consent",
    "DeviceRequest",
    "DiagnosticReport",
    "DocumentReference",
    "Encounter",
    "EpisodeOfCare",
    "Flag",
    "Immunization",
    "ImmunizationRecommendation",
    "MedicationDispense",
    "MedicationRequest",
    "MedicationStatement",
    "NutritionOrder",
    "Observation",
    "Patient",
    "Procedure",
    "ProcedureRequest",
]
