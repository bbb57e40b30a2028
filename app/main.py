from fastapi import FastAPI

from app.api import api_router
from app.config import configure_logging

configure_logging()

app = FastAPI(title="Loan payment calculator")
app.include_router(api_router)


@app.get("/health")
def health():
    return {"status": "ok"}
