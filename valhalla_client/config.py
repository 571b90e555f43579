from pydantic import BaseModel
import os

class Settings(BaseModel):
    valhalla_url: str = os.getenv("VALHALLA_URL", "http://localhost:8002")
    timeout_s: float = float(os.getenv("VALHALLA_TIMEOUT_S", "30"))

settings = Settings()
