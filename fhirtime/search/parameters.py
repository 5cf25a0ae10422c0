"""Search parameter enumerations, one per resource type.

Each enumeration lists the search parameter codes a resource type
defines. A record class names its enumeration in its ``SearchParameter``
attribute, and selectors passed to :func:`fhirtime.search.resolve` must
be members of it.

Only some members have a resolver; see
:func:`fhirtime.search.supported_selectors`.
"""

from __future__ import annotations

from enum import Enum


class ObservationSearchParameter(Enum):
    BASED_ON = "based-on"
    CATEGORY = "category"
    CODE = "code"
    COMPONENT_CODE = "component-code"
    CONTEXT = "context"
    DATE = "date"
    DEVICE = "device"
    ENCOUNTER = "encounter"
    IDENTIFIER = "identifier"
    PATIENT = "patient"
    PERFORMER = "performer"
    SPECIMEN = "specimen"
    STATUS = "status"
    SUBJECT = "subject"
    VALUE_DATE = "value-date"
    VALUE_QUANTITY = "value-quantity"
    VALUE_STRING = "value-string"


class ImmunizationSearchParameter(Enum):
    DATE = "date"
    DOSE_SEQUENCE = "dose-sequence"
    IDENTIFIER = "identifier"
    LOCATION = "location"
    LOT_NUMBER = "lot-number"
    MANUFACTURER = "manufacturer"
    NOTGIVEN = "notgiven"
    PATIENT = "patient"
    PRACTITIONER = "practitioner"
    REACTION = "reaction"
    REACTION_DATE = "reaction-date"
    REASON = "reason"
    STATUS = "status"
    VACCINE_CODE = "vaccine-code"


class ImmunizationRecommendationSearchParameter(Enum):
    DATE = "date"
    DOSE_NUMBER = "dose-number"
    DOSE_SEQUENCE = "dose-sequence"
    IDENTIFIER = "identifier"
    INFORMATION = "information"
    PATIENT = "patient"
    STATUS = "status"
    SUPPORT = "support"
    TARGET_DISEASE = "target-disease"
    VACCINE_TYPE = "vaccine-type"


class EpisodeOfCareSearchParameter(Enum):
    CARE_MANAGER = "care-manager"
    CONDITION = "condition"
    DATE = "date"
    IDENTIFIER = "identifier"
    INCOMINGREFERRAL = "incomingreferral"
    ORGANIZATION = "organization"
    PATIENT = "patient"
    STATUS = "status"
    TYPE = "type"


class EncounterSearchParameter(Enum):
    APPOINTMENT = "appointment"
    CLASS = "class"
    DATE = "date"
    DIAGNOSIS = "diagnosis"
    EPISODEOFCARE = "episodeofcare"
    IDENTIFIER = "identifier"
    LENGTH = "length"
    LOCATION = "location"
    LOCATION_PERIOD = "location-period"
    PART_OF = "part-of"
    PARTICIPANT = "participant"
    PATIENT = "patient"
    REASON = "reason"
    SERVICE_PROVIDER = "service-provider"
    STATUS = "status"
    SUBJECT = "subject"
    TYPE = "type"


class DiagnosticReportSearchParameter(Enum):
    BASED_ON = "based-on"
    CATEGORY = "category"
    CODE = "code"
    CONTEXT = "context"
    DATE = "date"
    DIAGNOSIS = "diagnosis"
    ENCOUNTER = "encounter"
    IDENTIFIER = "identifier"
    ISSUED = "issued"
    PATIENT = "patient"
    PERFORMER = "performer"
    RESULT = "result"
    SPECIMEN = "specimen"
    STATUS = "status"
    SUBJECT = "subject"


class ConsentSearchParameter(Enum):
    ACTION = "action"
    ACTOR = "actor"
    CATEGORY = "category"
    CONSENTOR = "consentor"
    DATA = "data"
    DATE = "date"
    IDENTIFIER = "identifier"
    ORGANIZATION = "organization"
    PATIENT = "patient"
    PERIOD = "period"
    PURPOSE = "purpose"
    SECURITYLABEL = "securitylabel"
    SOURCE = "source"
    STATUS = "status"


class FlagSearchParameter(Enum):
    AUTHOR = "author"
    DATE = "date"
    ENCOUNTER = "encounter"
    IDENTIFIER = "identifier"
    PATIENT = "patient"
    SUBJECT = "subject"


class MedicationRequestSearchParameter(Enum):
    AUTHOREDON = "authoredon"
    CATEGORY = "category"
    CODE = "code"
    CONTEXT = "context"
    DATE = "date"
    IDENTIFIER = "identifier"
    INTENDED_DISPENSER = "intended-dispenser"
    INTENT = "intent"
    MEDICATION = "medication"
    PATIENT = "patient"
    PRIORITY = "priority"
    REQUESTER = "requester"
    STATUS = "status"
    SUBJECT = "subject"


class NutritionOrderSearchParameter(Enum):
    ADDITIVE = "additive"
    DATETIME = "datetime"
    ENCOUNTER = "encounter"
    FORMULA = "formula"
    IDENTIFIER = "identifier"
    ORAL = "oral"
    PATIENT = "patient"
    PROVIDER = "provider"
    STATUS = "status"
    SUPPLEMENT = "supplement"


class DocumentReferenceSearchParameter(Enum):
    AUTHENTICATOR = "authenticator"
    AUTHOR = "author"
    CLASS = "class"
    CREATED = "created"
    CUSTODIAN = "custodian"
    DESCRIPTION = "description"
    ENCOUNTER = "encounter"
    EVENT = "event"
    FACILITY = "facility"
    FORMAT = "format"
    IDENTIFIER = "identifier"
    INDEXED = "indexed"
    LANGUAGE = "language"
    LOCATION = "location"
    PATIENT = "patient"
    PERIOD = "period"
    RELATED_ID = "related-id"
    RELATED_REF = "related-ref"
    RELATESTO = "relatesto"
    SECURITY_LABEL = "securitylabel"
    SETTING = "setting"
    STATUS = "status"
    SUBJECT = "subject"
    TYPE = "type"


class AllergyIntoleranceSearchParameter(Enum):
    ASSERTER = "asserter"
    CATEGORY = "category"
    CLINICAL_STATUS = "clinical-status"
    CODE = "code"
    CRITICALITY = "criticality"
    DATE = "date"
    IDENTIFIER = "identifier"
    LAST_DATE = "last-date"
    MANIFESTATION = "manifestation"
    ONSET = "onset"
    PATIENT = "patient"
    RECORDER = "recorder"
    ROUTE = "route"
    SEVERITY = "severity"
    TYPE = "type"
    VERIFICATION_STATUS = "verification-status"


class ConditionSearchParameter(Enum):
    ABATEMENT_AGE = "abatement-age"
    ABATEMENT_BOOLEAN = "abatement-boolean"
    ABATEMENT_DATE = "abatement-date"
    ABATEMENT_STRING = "abatement-string"
    ASSERTED_DATE = "asserted-date"
    ASSERTER = "asserter"
    BODY_SITE = "body-site"
    CATEGORY = "category"
    CLINICAL_STATUS = "clinical-status"
    CODE = "code"
    CONTEXT = "context"
    ENCOUNTER = "encounter"
    EVIDENCE = "evidence"
    EVIDENCE_DETAIL = "evidence-detail"
    IDENTIFIER = "identifier"
    ONSET_AGE = "onset-age"
    ONSET_DATE = "onset-date"
    ONSET_INFO = "onset-info"
    PATIENT = "patient"
    SEVERITY = "severity"
    STAGE = "stage"
    SUBJECT = "subject"
    VERIFICATION_STATUS = "verification-status"


class CareTeamSearchParameter(Enum):
    CATEGORY = "category"
    CONTEXT = "context"
    DATE = "date"
    ENCOUNTER = "encounter"
    IDENTIFIER = "identifier"
    PARTICIPANT = "participant"
    PATIENT = "patient"
    STATUS = "status"
    SUBJECT = "subject"


class CarePlanSearchParameter(Enum):
    ACTIVITY_CODE = "activity-code"
    ACTIVITY_DATE = "activity-date"
    ACTIVITY_REFERENCE = "activity-reference"
    BASED_ON = "based-on"
    CARE_TEAM = "care-team"
    CATEGORY = "category"
    CONDITION = "condition"
    CONTEXT = "context"
    DATE = "date"
    DEFINITION = "definition"
    ENCOUNTER = "encounter"
    GOAL = "goal"
    IDENTIFIER = "identifier"
    INTENT = "intent"
    PART_OF = "part-of"
    PATIENT = "patient"
    PERFORMER = "performer"
    REPLACES = "replaces"
    STATUS = "status"
    SUBJECT = "subject"


class AppointmentSearchParameter(Enum):
    ACTOR = "actor"
    APPOINTMENT_TYPE = "appointment-type"
    DATE = "date"
    IDENTIFIER = "identifier"
    INCOMINGREFERRAL = "incomingreferral"
    LOCATION = "location"
    PART_STATUS = "part-status"
    PATIENT = "patient"
    PRACTITIONER = "practitioner"
    SERVICE_TYPE = "service-type"
    STATUS = "status"


class MedicationDispenseSearchParameter(Enum):
    CODE = "code"
    CONTEXT = "context"
    DESTINATION = "destination"
    IDENTIFIER = "identifier"
    MEDICATION = "medication"
    PATIENT = "patient"
    PERFORMER = "performer"
    PRESCRIPTION = "prescription"
    RECEIVER = "receiver"
    RESPONSIBLEPARTY = "responsibleparty"
    STATUS = "status"
    SUBJECT = "subject"
    TYPE = "type"
    WHENHANDEDOVER = "whenhandedover"
    WHENPREPARED = "whenprepared"


class MedicationStatementSearchParameter(Enum):
    CATEGORY = "category"
    CODE = "code"
    CONTEXT = "context"
    EFFECTIVE = "effective"
    IDENTIFIER = "identifier"
    MEDICATION = "medication"
    PART_OF = "part-of"
    PATIENT = "patient"
    SOURCE = "source"
    STATUS = "status"
    SUBJECT = "subject"


class DeviceRequestSearchParameter(Enum):
    AUTHORED_ON = "authored-on"
    BASED_ON = "based-on"
    CODE = "code"
    DEFINITION = "definition"
    DEVICE = "device"
    ENCOUNTER = "encounter"
    EVENT_DATE = "event-date"
    GROUP_IDENTIFIER = "group-identifier"
    IDENTIFIER = "identifier"
    INTENT = "intent"
    PATIENT = "patient"
    PERFORMER = "performer"
    PRIORREQUEST = "priorrequest"
    REQUESTER = "requester"
    STATUS = "status"
    SUBJECT = "subject"


class ProcedureSearchParameter(Enum):
    BASED_ON = "based-on"
    CATEGORY = "category"
    CODE = "code"
    CONTEXT = "context"
    DATE = "date"
    DEFINITION = "definition"
    ENCOUNTER = "encounter"
    IDENTIFIER = "identifier"
    LOCATION = "location"
    PART_OF = "part-of"
    PATIENT = "patient"
    PERFORMER = "performer"
    STATUS = "status"
    SUBJECT = "subject"


class ProcedureRequestSearchParameter(Enum):
    AUTHORED = "authored"
    BASED_ON = "based-on"
    BODY_SITE = "body-site"
    CODE = "code"
    CONTEXT = "context"
    DEFINITION = "definition"
    ENCOUNTER = "encounter"
    IDENTIFIER = "identifier"
    INTENT = "intent"
    OCCURRENCE = "occurrence"
    PATIENT = "patient"
    PERFORMER = "performer"
    PERFORMER_TYPE = "performer-type"
    PRIORITY = "priority"
    REPLACES = "replaces"
    REQUESTER = "requester"
    REQUISITION = "requisition"
    SPECIMEN = "specimen"
    STATUS = "status"
    SUBJECT = "subject"


class PatientSearchParameter(Enum):
    ACTIVE = "active"
    ADDRESS = "address"
    BIRTHDATE = "birthdate"
    DEATH_DATE = "death-date"
    DECEASED = "deceased"
    EMAIL = "email"
    FAMILY = "family"
    GENDER = "gender"
    GENERAL_PRACTITIONER = "general-practitioner"
    GIVEN = "given"
    IDENTIFIER = "identifier"
    NAME = "name"
    ORGANIZATION = "organization"
    PHONE = "phone"


__all__ = [
    "AllergyIntoleranceSearchParameter",
    "AppointmentSearchParameter",
    "CarePlanSearchParameter",
    "CareTeamSearchParameter",
    "ConditionSearchParameter",
    "ConsentSearchParameter",
    "DeviceRequestSearchParameter",
    "DiagnosticReportSearchParameter",
    "DocumentReferenceSearchParameter",
    "EncounterSearchParameter",
    "EpisodeOfCareSearchParameter",
    "FlagSearchParameter",
    "ImmunizationRecommendationSearchParameter",
    "ImmunizationSearchParameter",
    "MedicationDispenseSearchParameter",
    "MedicationRequestSearchParameter",
    "MedicationStatementSearchParameter",
    "NutritionOrderSearchParameter",
    "ObservationSearchParameter",
    "PatientSearchParameter",
    "ProcedureRequestSearchParameter",
    "ProcedureSearchParameter",
]
