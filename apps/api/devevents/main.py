from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from devevents.api.router import router as api_router
from devevents.core.config import settings
from devevents.core.logging import configure_logging
from devevents.middleware.request_id import RequestIdMiddleware
from devevents.middleware.security_headers import SecurityHeadersMiddleware

configure_logging()

app = FastAPI(
    title="Dev Events API",
    description="Developer events and their speakers.",
    version="1.0.0",
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url=None,
    openapi_url="/openapi.json" if settings.docs_enabled else None,
)

# Starlette runs the LAST added middleware FIRST (outermost).
# RequestId wraps everything so redirects and CORS preflights are logged too.
if settings.https_redirect_enabled:
    app.add_middleware(HTTPSRedirectMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestIdMiddleware)

Instrumentator().instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)


@app.get("/")
def root():
    return {"name": "Dev Events API", "status": "ok"}


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(api_router, prefix="/api")
