from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from khet_mitra.api.rest_routes.auth import router as auth_router
from khet_mitra.api.rest_routes.chat import router as chat_router
from khet_mitra.api.rest_routes.chatroom import router as chatroom_router
from khet_mitra.api.rest_routes.disease_identification import (
    router as disease_identification_router,
)
from khet_mitra.api.rest_routes.fertilizer_recommendation import (
    router as fertilizer_recommendation_router,
)
from khet_mitra.api.rest_routes.files import router as files_router
from khet_mitra.api.rest_routes.history import router as history_router
from khet_mitra.api.rest_routes.i18n import router as i18n_router
from khet_mitra.api.rest_routes.location_guidance import (
    router as location_guidance_router,
)
from khet_mitra.api.rest_routes.marketplace import router as marketplace_router
from khet_mitra.api.rest_routes.my_poll import router as my_poll_router
from khet_mitra.api.rest_routes.navigation import router as navigation_router
from khet_mitra.api.rest_routes.param_mitr import router as param_mitr_router
from khet_mitra.api.rest_routes.soil_analysis import router as soil_analysis_router
from khet_mitra.api.websocket.endpoints import router as websocket_router
from khet_mitra.core.logging_config import setup_logging
from khet_mitra.core.mongodb import close_mongo_client, init_mongo_client
from khet_mitra.services.azure_blob import close_blob_service_client

load_dotenv()
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_mongo_client()
    yield
    await close_mongo_client()
    await close_blob_service_client()


app = FastAPI(title="Khet-Mitra API", lifespan=lifespan)

app.include_router(websocket_router, tags=["websocket"])
app.include_router(auth_router)
app.include_router(disease_identification_router)
app.include_router(soil_analysis_router)
app.include_router(fertilizer_recommendation_router)
app.include_router(location_guidance_router)
app.include_router(param_mitr_router)
app.include_router(chat_router)
app.include_router(chatroom_router)
app.include_router(files_router)
app.include_router(history_router)
app.include_router(i18n_router)
app.include_router(navigation_router)
app.include_router(marketplace_router)
app.include_router(my_poll_router)


@app.get("/")
async def root():
    return {"message": "Welcome to Khet-Mitra, your smart farming companion!"}


@app.get("/health")
async def health():
    return {"status": "ok"}
