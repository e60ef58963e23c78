from fastapi import FastAPI

from edict import api
from edict.database import init_db
from edict.parsing.taxonomy import DETAIL_FOR


app = FastAPI(
    title="EDICT API",
    description="Parsing and lookup of EDICT2 dictionary entries",
    version="0.1.0",
)

app.include_router(api.router)


@app.on_event("startup")
def on_startup() -> None:
    init_db()


@app.get("/status")
def status_info():
    return {"status": "ok", "codes": len(DETAIL_FOR)}
