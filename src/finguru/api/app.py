import uvicorn
from fastapi import FastAPI

from finguru.api.routes.accounts import router as accounts_router
from finguru.api.routes.alert_rules import router as alert_rules_router
from finguru.api.routes.budgets import router as budgets_router
from finguru.api.routes.chat import router as chat_router
from finguru.api.routes.goals import router as goals_router
from finguru.api.routes.health import router as health_router
from finguru.api.routes.net_worth import router as net_worth_router
from finguru.api.routes.profile import router as profile_router
from finguru.api.routes.transactions import router as transactions_router
from finguru.config import settings
from finguru.logging import configure_logging

app = FastAPI(title="FinGuru Intake API", version="0.1.0")
app.include_router(health_router)
for router in (
    accounts_router,
    transactions_router,
    chat_router,
    budgets_router,
    goals_router,
    profile_router,
    net_worth_router,
    alert_rules_router,
):
    app.include_router(router, prefix=settings.api_prefix)


def run() -> None:
    configure_logging(settings.log_level, settings.log_json)
    uvicorn.run(
        "finguru.api.app:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=False,
        log_config=None,
    )
