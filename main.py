import logging
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, field_validator
from typing import List
from contextlib import asynccontextmanager

from config import ADMISSIONS_CAPACITY, API_HOST, API_PORT, configure_logging
from admissions.errors import EmptyQueue, QueueFull
from admissions.patient_record import ArrivalCounter, PatientRecord, TriageLevel
from admissions.priority_heap import PriorityCareAdmissions
from storage.seen_history import SeenPatientHistory

logger = logging.getLogger(__name__)

CLOSED_MSG = "Sorry! We are closed due to out of control circumstances!"


class AdmissionRequest(BaseModel):
    age: int = Field(ge=0)
    gender: str = Field(min_length=1, max_length=1)
    triage: TriageLevel

    @field_validator("gender", mode="before")
    @classmethod
    def _upper_gender(cls, value):
        return value.upper() if isinstance(value, str) else value

    @field_validator("triage", mode="before")
    @classmethod
    def _upper_triage(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


class PatientRecordResponse(BaseModel):
    case_number: int
    age: int
    gender: str
    triage: TriageLevel
    arrival_order: int
    seen: bool
    display: str

    @classmethod
    def from_record(cls, record: PatientRecord):
        return cls(
            case_number=record.case_number,
            age=record.age,
            gender=record.gender,
            triage=record.triage,
            arrival_order=record.arrival_order,
            seen=record.seen,
            display=record.display(),
        )


class PatientListResponse(BaseModel):
    count: int
    patients: List[PatientRecordResponse]


class QueueStatusResponse(BaseModel):
    size: int
    capacity: int
    is_empty: bool
    seen_count: int


app_state = {
    "admissions": None,
    "seen_patients": None,
    "arrivals": None,
}


def init_state(capacity: int = ADMISSIONS_CAPACITY):
    app_state["admissions"] = PriorityCareAdmissions(capacity)
    app_state["seen_patients"] = SeenPatientHistory()
    app_state["arrivals"] = ArrivalCounter()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    init_state(ADMISSIONS_CAPACITY)
    logger.info("Admissions queue ready, capacity=%d", ADMISSIONS_CAPACITY)

    yield

    logger.info("Admissions service stopping with %d unseen patients", app_state["admissions"].size())


app = FastAPI(title="Priority Care Admissions", lifespan=lifespan)


def _listing(records) -> PatientListResponse:
    patients = [PatientRecordResponse.from_record(r) for r in records]
    return PatientListResponse(count=len(patients), patients=patients)


@app.post("/v1/patients", response_model=PatientRecordResponse, status_code=201)
async def admit_patient(request: AdmissionRequest):
    queue = app_state["admissions"]
    record = PatientRecord.create(request.gender, request.age, request.triage, app_state["arrivals"])

    try:
        queue.insert(record)
    except QueueFull as e:
        raise HTTPException(status_code=409, detail=str(e))

    return PatientRecordResponse.from_record(record)


@app.get("/v1/patients", response_model=PatientListResponse)
async def list_unseen_patients():
    return _listing(app_state["admissions"].ordered_listing())


@app.get("/v1/patients/next", response_model=PatientRecordResponse)
async def show_next_patient():
    try:
        record = app_state["admissions"].peek()
    except EmptyQueue as e:
        raise HTTPException(status_code=404, detail=str(e))
    return PatientRecordResponse.from_record(record)


@app.post("/v1/patients/next/see", response_model=PatientRecordResponse)
async def see_next_patient():
    try:
        record = app_state["admissions"].extract_min()
    except EmptyQueue as e:
        raise HTTPException(status_code=404, detail=str(e))

    record.see()
    app_state["seen_patients"].add(record)
    return PatientRecordResponse.from_record(record)


@app.get("/v1/patients/seen", response_model=PatientListResponse)
async def list_seen_patients():
    return _listing(app_state["seen_patients"])


@app.delete("/v1/patients")
async def clear_queue():
    queue = app_state["admissions"]
    dropped = queue.size()
    queue.clear()
    logger.info("Admissions queue cleared, %d unseen patients dropped", dropped)
    return {"status": "cleared", "message": CLOSED_MSG, "dropped": dropped}


@app.get("/v1/queue/status", response_model=QueueStatusResponse)
async def get_queue_status():
    queue = app_state["admissions"]

    return QueueStatusResponse(
        size=queue.size(),
        capacity=queue.capacity(),
        is_empty=queue.is_empty(),
        seen_count=app_state["seen_patients"].size()
    )


@app.get("/health")
async def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=API_HOST, port=API_PORT)
