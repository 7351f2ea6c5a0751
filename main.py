import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config

# Routers
from routers.marking import router as marking_router
from routers.questions import router as questions_router
from routers.steps import router as steps_router

logger = logging.getLogger("gd-practice")
logging.basicConfig(level=config.LOG_LEVEL)

app = FastAPI(title="Gradient Descent Practice API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(questions_router)  # /questions, /questions/random, /questions/{id}
app.include_router(steps_router)  # /questions/{id}/reveal
app.include_router(marking_router)  # /mark

logger.info("gradient descent practice API ready")
