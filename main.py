from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config import get_settings
from api.errors import register_exception_handlers

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title="Cloud Room API",
    description="Shared cloud variable rooms for multiplayer projects",
    version="1.0.0"
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure this properly in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/")
def root():
    return {"message": "Cloud Room API", "status": "ok"}


@app.get("/health")
def health():
    limits = settings.room_limits()
    return {
        "status": "healthy",
        "max_variables": limits.max_variables,
        "max_name_length": limits.max_name_length,
        "max_value_length": limits.max_value_length,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
