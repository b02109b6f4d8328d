from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chatproviders.core.config import get_settings
from chatproviders.server.api.models import router as models_router

settings = get_settings()

app = FastAPI(title=settings.api_title, version=settings.api_version)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(models_router)


@app.get("/")
async def root() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
