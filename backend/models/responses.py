from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    llm_provider: str | None = None
