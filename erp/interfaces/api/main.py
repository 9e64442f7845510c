from __future__ import annotations

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from erp.infrastructure.config import get_settings
from erp.interfaces.api.middleware.rate_limit import RateLimitMiddleware

app = FastAPI(
    title="Grupo 2S ERP - Calculos",
    debug=get_settings().debug,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.get("/api/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


from erp.interfaces.api.routes.folha_routes import router as folha_router  # noqa: E402
from erp.interfaces.api.routes.parcelamento_routes import router as parcelamento_router  # noqa: E402
from erp.interfaces.api.routes.ponto_routes import router as ponto_router  # noqa: E402
from erp.interfaces.api.routes.rateio_routes import router as rateio_router  # noqa: E402
from erp.interfaces.api.routes.validacao_routes import router as validacao_router  # noqa: E402

app.include_router(rateio_router, prefix="/api")
app.include_router(parcelamento_router, prefix="/api")
app.include_router(ponto_router, prefix="/api")
app.include_router(folha_router, prefix="/api")
app.include_router(validacao_router, prefix="/api")
