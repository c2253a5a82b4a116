import logging

from fastapi import FastAPI

from poolschedule.api.v1.schedule import router as schedule_router
from poolschedule.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("resource_id", "reservation_id", "owner_id", "date", "status", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Pool Schedule", version="1.0.0")

app.include_router(schedule_router, prefix="/api/v1", tags=["schedule"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
