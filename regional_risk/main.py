import uvicorn
from fastapi import FastAPI
from regional_risk.api.routes_health import router as health_router
from regional_risk.api.routes_narrative import router as narrative_router
from regional_risk.api.routes_regions import router as regions_router
from regional_risk.core.config import settings
from regional_risk.core.logger import setup_logging


setup_logging(settings.LOG_LEVEL)
app = FastAPI(title="Regional Health Risk API", version="1.0.0")


app.include_router(health_router, prefix="/health", tags=["health"])
app.include_router(regions_router, prefix="/api/regions", tags=["regions"])
app.include_router(narrative_router, prefix="/api/narrative", tags=["narrative"])


def run():
    uvicorn.run("regional_risk.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
