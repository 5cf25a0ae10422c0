"""Resolution of search parameters to comparable values.

Given a record and one of its search parameters, :func:`resolve` returns
the value that sorting and range filtering should use:

    - None when the record carries no value for the parameter;
    - a Date, DateTime or Instant for temporal parameters;
    - a plain string for token parameters such as ``status``.

A parameter with no resolver raises UnsupportedSelectorError, which is
never conflated with None.

Resolvers are registered per (record type, parameter) pair. Each record
type's coverage is partial; :func:`supported_selectors` lists it.

Examples:
    >>> from fhirtime import DateTime
    >>> from fhirtime.search.resources import Encounter, Period
    >>> from fhirtime.search.parameters import EncounterSearchParameter as P
    >>> encounter = Encounter(period=Period(end=DateTime.parse("2024-02-11")))
    >>> resolve(encounter, P.DATE)
    DateTime(FullDate(2024, 2, 11))
    >>> resolve(encounter, P.LOCATION)
    Traceback (most recent call last):
    ...
    fhirtime.errors.UnsupportedSelectorError: Encounter:location is not supported
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, Union

from fhirtime.core.date import Date
from fhirtime.core.datetime import DateTime
from fhirtime.core.instant import Instant
from fhirtime.errors import UnsupportedSelectorError
from fhirtime.search import parameters as p
from fhirtime.search import resources as r

logger = logging.getLogger(__name__)

# Type alias for resolved values
Comparable = Union[Date, DateTime, Instant, str]

Extractor = Callable[[Any], Union[Comparable, None]]

# record type -> selector -> extractor. Populated by @_resolver below.
RESOLVER_REGISTRY: dict[type, dict[Enum, Extractor]] = {}


def _resolver(record_type: type, selector: Enum) -> Callable[[Extractor], Extractor]:
    """Register the decorated function as the resolver for record_type:selector."""
    if not isinstance(selector, record_type.SearchParameter):
        raise TypeError(
            f"{selector!r} is not a {record_type.SearchParameter.__name__} member"
        )

    def decorator(func: Extractor) -> Extractor:
        extractors = RESOLVER_REGISTRY.setdefault(record_type, {})
        if selector in extractors:
            raise ValueError(f"{record_type.__name__}:{selector.value} is already registered")
        extractors[selector] = func
        return func

    return decorator


def resolve(record: Any, selector: Enum) -> Comparable | None:
    """Extract the comparable value of a record for a search parameter.

    Args:
        record: A record instance from :mod:`fhirtime.search.resources`.
        selector: A member of the record's ``SearchParameter`` enumeration.

    Returns:
        The resolved value, or None if the record carries no value.

    Raises:
        TypeError: If record is not a record type, or selector belongs to
            another record type's enumeration.
        UnsupportedSelectorError: If no resolver exists for the selector,
            or the populated alternative of a choice field cannot be
            resolved.
    """
    record_type = type(record)
    expected = getattr(record_type, "SearchParameter", None)
    if expected is None:
        raise TypeError(f"{record_type.__name__} is not a searchable record type")
    if not isinstance(selector, expected):
        raise TypeError(
            f"selector for {record_type.__name__} must be a {expected.__name__}, "
            f"got {selector!r}"
        )

    extractors = RESOLVER_REGISTRY.get(record_type)
    if extractors is None:
        logger.debug("No resolvers registered for %s", record_type.__name__)
        raise UnsupportedSelectorError(record_type.__name__, selector, "no resolver registered")

    extractor = extractors.get(selector)
    if extractor is None:
        logger.debug("Unsupported selector %s:%s", record_type.__name__, selector.value)
        raise UnsupportedSelectorError(record_type.__name__, selector)

    value = extractor(record)
    if value is None:
        logger.debug("%s:%s resolved to no value", record_type.__name__, selector.value)
    return value


def supported_selectors(record_type: type) -> frozenset[Enum]:
    """Return the selectors of record_type that have a resolver.

    Examples:
        >>> from fhirtime.search.resources import Condition
        >>> sorted(s.value for s in supported_selectors(Condition))
        ['asserted-date', 'onset-date']
    """
    return frozenset(RESOLVER_REGISTRY.get(record_type, {}))


def unregistered_resource_types() -> list[type]:
    """Return the record types that have no resolver at all.

    Examples:
        >>> [t.__name__ for t in unregistered_resource_types()]
        ['Patient']
    """
    return [t for t in r.RECORD_TYPES if t not in RESOLVER_REGISTRY]


def _period(period: r.Period | None) -> DateTime | None:
    """Resolve a period to its start, else its end."""
    if period is None:
        return None
    if period.start is not None:
        return period.start
    return period.end


def _effective(value: r.EffectiveChoice | None) -> DateTime | None:
    if isinstance(value, r.Period):
        return _period(value)
    return value


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------


@_resolver(r.Observation, p.ObservationSearchParameter.DATE)
def _observation_date(record: r.Observation) -> DateTime | None:
    return _effective(record.effective)


@_resolver(r.Observation, p.ObservationSearchParameter.STATUS)
def _observation_status(record: r.Observation) -> str | None:
    return record.status


@_resolver(r.Immunization, p.ImmunizationSearchParameter.DATE)
def _immunization_date(record: r.Immunization) -> DateTime | None:
    return record.date


@_resolver(r.ImmunizationRecommendation, p.ImmunizationRecommendationSearchParameter.DATE)
def _immunization_recommendation_date(record: r.ImmunizationRecommendation) -> DateTime | None:
    for recommendation in record.recommendation:
        return recommendation.date
    return None


@_resolver(r.EpisodeOfCare, p.EpisodeOfCareSearchParameter.DATE)
def _episode_of_care_date(record: r.EpisodeOfCare) -> DateTime | None:
    return _period(record.period)


@_resolver(r.Encounter, p.EncounterSearchParameter.DATE)
def _encounter_date(record: r.Encounter) -> DateTime | None:
    return _period(record.period)


@_resolver(r.Encounter, p.EncounterSearchParameter.STATUS)
def _encounter_status(record: r.Encounter) -> str | None:
    return record.status


@_resolver(r.DiagnosticReport, p.DiagnosticReportSearchParameter.DATE)
def _diagnostic_report_date(record: r.DiagnosticReport) -> DateTime | None:
    return _effective(record.effective)


@_resolver(r.Consent, p.ConsentSearchParameter.DATE)
def _consent_date(record: r.Consent) -> DateTime | None:
    return record.date_time


@_resolver(r.Flag, p.FlagSearchParameter.DATE)
def _flag_date(record: r.Flag) -> DateTime | None:
    return _period(record.period)


@_resolver(r.MedicationRequest, p.MedicationRequestSearchParameter.DATE)
def _medication_request_date(record: r.MedicationRequest) -> DateTime | None:
    """Resolve to the first event of the first timed dosage instruction.

    The server-side search parameter matches against the whole event list
    of that timing. Resolution here keeps only its first event so the
    result is a single lattice value, and an empty event list resolves to
    None rather than to an empty (but present) value.
    """
    for dosage in record.dosage_instruction:
        if dosage.timing is not None:
            return dosage.timing.event[0] if dosage.timing.event else None
    return None


@_resolver(r.NutritionOrder, p.NutritionOrderSearchParameter.DATETIME)
def _nutrition_order_datetime(record: r.NutritionOrder) -> DateTime | None:
    return record.date_time


@_resolver(r.DocumentReference, p.DocumentReferenceSearchParameter.INDEXED)
def _document_reference_indexed(record: r.DocumentReference) -> Instant | None:
    return record.indexed


@_resolver(r.AllergyIntolerance, p.AllergyIntoleranceSearchParameter.DATE)
def _allergy_intolerance_date(record: r.AllergyIntolerance) -> DateTime | None:
    return record.asserted_date


@_resolver(r.Condition, p.ConditionSearchParameter.ASSERTED_DATE)
def _condition_asserted_date(record: r.Condition) -> DateTime | None:
    return record.asserted_date


@_resolver(r.Condition, p.ConditionSearchParameter.ONSET_DATE)
def _condition_onset_date(record: r.Condition) -> DateTime | None:
    onset = record.onset
    if isinstance(onset, DateTime):
        return onset
    if isinstance(onset, r.Period):
        return _period(onset)
    # Age, Range and string onsets name no point in time.
    return None


@_resolver(r.CareTeam, p.CareTeamSearchParameter.DATE)
def _care_team_date(record: r.CareTeam) -> DateTime | None:
    return _period(record.period)


@_resolver(r.CarePlan, p.CarePlanSearchParameter.DATE)
def _care_plan_date(record: r.CarePlan) -> DateTime | None:
    return _period(record.period)


@_resolver(r.Appointment, p.AppointmentSearchParameter.DATE)
def _appointment_date(record: r.Appointment) -> Instant | None:
    return record.start


@_resolver(r.MedicationDispense, p.MedicationDispenseSearchParameter.WHENHANDEDOVER)
def _medication_dispense_whenhandedover(record: r.MedicationDispense) -> DateTime | None:
    return record.when_handed_over


@_resolver(r.MedicationStatement, p.MedicationStatementSearchParameter.EFFECTIVE)
def _medication_statement_effective(record: r.MedicationStatement) -> DateTime | None:
    return _effective(record.effective)


@_resolver(r.DeviceRequest, p.DeviceRequestSearchParameter.AUTHORED_ON)
def _device_request_authored_on(record: r.DeviceRequest) -> DateTime | None:
    return record.authored_on


@_resolver(r.Procedure, p.ProcedureSearchParameter.DATE)
def _procedure_date(record: r.Procedure) -> DateTime | None:
    return _effective(record.performed)


@_resolver(r.ProcedureRequest, p.ProcedureRequestSearchParameter.OCCURRENCE)
def _procedure_request_occurrence(record: r.ProcedureRequest) -> DateTime | None:
    occurrence = record.occurrence
    if isinstance(occurrence, r.Timing):
        raise UnsupportedSelectorError(
            "ProcedureRequest",
            p.ProcedureRequestSearchParameter.OCCURRENCE,
            "only dateTime and Period occurrences are supported",
        )
    return _effective(occurrence)


__all__ = [
    "Comparable",
    "RESOLVER_REGISTRY",
    "resolve",
    "supported_selectors",
    "unregistered_resource_types",
]
