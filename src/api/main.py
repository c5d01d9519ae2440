"""
FastAPI backend: the presentation layer over the record store.
Run with uvicorn: uvicorn api.main:app --reload
"""

import datetime as dt
import logging
from contextlib import asynccontextmanager
from functools import partial

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from conquistas.application import (
    PRESET_AVATARS,
    ContactInput,
    EncounterInput,
    RecordStore,
    StatisticsEngine,
    validate_contact,
    validate_encounter,
)
from conquistas.config import load_settings
from conquistas.domain import Contact, Encounter
from conquistas.infrastructure import JsonFileKeyValueStore, dial_uri, format_phone

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = load_settings()
    logging.getLogger().setLevel(settings.log_level)
    logger.info("Data directory: %s", settings.data_dir.resolve())
    store = RecordStore(
        JsonFileKeyValueStore(settings.data_dir),
        format_phone=partial(format_phone, default_region=settings.phone_region),
    )
    app.state.settings = settings
    app.state.store = store
    app.state.stats = StatisticsEngine(store)
    yield


app = FastAPI(title="Conquistas API", lifespan=lifespan)


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_stats(request: Request) -> StatisticsEngine:
    return request.app.state.stats


# --- response models ---


class ContactItem(BaseModel):
    id: str
    name: str
    photo: str
    nickname: str | None = None
    phone: str | None = None
    phone_uri: str | None = None
    notes: str | None = None
    created_at: str
    total_spent: float = 0.0
    encounter_count: int = 0
    last_encounter_at: str | None = None


class EncounterItem(BaseModel):
    id: str
    contact_id: str
    date: str
    location: str
    amount: float
    rating: int | None = None
    notes: str | None = None


class ContactDetail(BaseModel):
    contact: ContactItem
    encounters: list[EncounterItem]


class StatsResponse(BaseModel):
    total_spent: float
    total_encounters: int
    average_per_encounter: float
    most_expensive: ContactItem | None = None
    contact_count: int


def _contact_item(contact: Contact, stats: StatisticsEngine) -> ContactItem:
    summary = stats.contact_summary(contact.id)
    last = summary.last_encounter_at
    return ContactItem(
        id=contact.id,
        name=contact.name,
        photo=contact.photo,
        nickname=contact.nickname,
        phone=contact.phone,
        phone_uri=dial_uri(contact.phone),
        notes=contact.notes,
        created_at=contact.created_at.isoformat(),
        total_spent=summary.total_spent,
        encounter_count=summary.encounter_count,
        last_encounter_at=last.isoformat() if last else None,
    )


def _encounter_item(encounter: Encounter) -> EncounterItem:
    return EncounterItem(
        id=encounter.id,
        contact_id=encounter.contact_id,
        date=encounter.date.isoformat(),
        location=encounter.location,
        amount=encounter.amount,
        rating=encounter.rating,
        notes=encounter.notes,
    )


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/avatars")
def list_avatars():
    return list(PRESET_AVATARS)


# --- REST: contacts ---


class CreateContactBody(BaseModel):
    name: str
    photo: str = PRESET_AVATARS[0]
    nickname: str | None = None
    phone: str | None = None
    notes: str | None = None


@app.get("/contacts")
def list_contacts(request: Request):
    store = get_store(request)
    stats = get_stats(request)
    return [_contact_item(c, stats) for c in store.contacts]


@app.post("/contacts")
def create_contact(body: CreateContactBody, request: Request):
    store = get_store(request)
    data = ContactInput(
        name=body.name,
        photo=body.photo,
        nickname=body.nickname,
        phone=body.phone,
        notes=body.notes,
    )
    invalid = validate_contact(
        data, max_photo_bytes=request.app.state.settings.max_photo_bytes
    )
    if invalid is not None:
        raise HTTPException(status_code=400, detail=invalid.reason)
    contact = store.add_contact(data)
    item = _contact_item(contact, get_stats(request))
    return JSONResponse(content=item.model_dump(), status_code=201)


@app.get("/contacts/{contact_id}")
def get_contact(contact_id: str, request: Request):
    store = get_store(request)
    stats = get_stats(request)
    contact = store.get_contact(contact_id)
    if contact is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    return ContactDetail(
        contact=_contact_item(contact, stats),
        encounters=[_encounter_item(e) for e in stats.encounters_for_contact(contact_id)],
    )


@app.delete("/contacts/{contact_id}")
def delete_contact(contact_id: str, request: Request):
    get_store(request).delete_contact(contact_id)
    return Response(status_code=204)


# --- REST: encounters ---


class CreateEncounterBody(BaseModel):
    contact_id: str
    location: str
    date: dt.date | None = None
    amount: float | str | None = None
    rating: int | None = None
    notes: str | None = None


@app.get("/encounters")
def list_encounters(request: Request):
    return [_encounter_item(e) for e in get_store(request).encounters]


@app.post("/encounters")
def create_encounter(body: CreateEncounterBody, request: Request):
    store = get_store(request)
    data = EncounterInput(
        contact_id=body.contact_id,
        location=body.location,
        date=body.date,
        amount=body.amount,
        rating=body.rating,
        notes=body.notes,
    )
    invalid = validate_encounter(data, store.has_contact)
    if invalid is not None:
        raise HTTPException(status_code=400, detail=invalid.reason)
    encounter = store.add_encounter(data)
    return JSONResponse(content=_encounter_item(encounter).model_dump(), status_code=201)


@app.delete("/encounters/{encounter_id}")
def delete_encounter(encounter_id: str, request: Request):
    get_store(request).delete_encounter(encounter_id)
    return Response(status_code=204)


# --- REST: statistics ---


@app.get("/stats")
def get_dashboard(request: Request):
    stats = get_stats(request)
    dashboard = stats.dashboard()
    most = dashboard.most_expensive
    return StatsResponse(
        total_spent=dashboard.total_spent,
        total_encounters=dashboard.total_encounters,
        average_per_encounter=dashboard.average_per_encounter,
        most_expensive=_contact_item(most, stats) if most else None,
        contact_count=dashboard.contact_count,
    )
