# hermes/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hermes.core.config import get_settings
from hermes.core.logging_config import configure_logging
from hermes.api.health import router as health_router
from hermes.api.notifications import router as notifications_router
from hermes.middleware.request_logging import RequestLoggingMiddleware

settings = get_settings()

# 1) logging antes de crear la app
configure_logging(settings.log_level)

app = FastAPI(title=settings.app_name)

# 2) CORS (limitar orígenes en prod con CORS_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
# 3) log por request
app.add_middleware(RequestLoggingMiddleware)

# 4) Rutas REST
app.include_router(notifications_router, prefix=settings.api_prefix)
app.include_router(health_router)
