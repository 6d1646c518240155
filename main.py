# file: main.py

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

load_dotenv()

from app.controllers.notification import router as notification_router
from app.services.firebase_app import init_firebase
from app.utils.errors import http_exception_handler, unhandled_exception_handler

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

app = FastAPI(title="Booking Push API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

app.include_router(notification_router, prefix="/api/booking-push", tags=["notifications"])


@app.get("/")
async def root():
    return {"message": "Booking Push API is running"}


@app.on_event("startup")
async def startup_event():
    # Fails the process start when the service account is missing.
    init_firebase()
