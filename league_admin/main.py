from fastapi import FastAPI
import logging
from fastapi.middleware.cors import CORSMiddleware
from league_admin.core.config import settings
from league_admin.core.database import init_db
from league_admin.api import api_router

# Setup logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="League Admin")


# The admin frontend is served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Ensure database tables are created
@app.on_event("startup")
async def startup():
    try:
        init_db()
        logger.info("✅ Database ready and tables created.")
    except Exception as e:
        logger.error(f"❌ Database initialization error: {e}")
        raise

@app.get("/")
async def home():
    return {"message": "Welcome to League Admin"}

# Include all API routes
app.include_router(api_router)
